from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from pagetest.config import PageConfig
from pagetest.presentation.base import BasePresentation, GroupHandle
from pagetest.presentation.html import HtmlPresentation
from pagetest.results import ResultRecord, RunSummary, Status
from pagetest.verbose import close_logger, setup_logger

TestGroup = Mapping[str, Callable[[], Any]]
TestSuite = Mapping[str, TestGroup]

SETUP = "setup"
TEARDOWN = "teardown"


class Runner:
    """Runs test groups in order and reports each outcome to a presentation surface.

    Within a group, setup runs first, then every case in declaration order,
    then teardown. An exception (including ``SystemExit``) in setup, a case or
    teardown is reported as a failure and never stops the rest of the group or
    the suite. Successful setup and teardown are not reported.
    """

    def __init__(
        self,
        presentation: BasePresentation,
        logger: logging.Logger | None = None,
    ):
        self.presentation = presentation
        self.logger = logger or logging.getLogger("pagetest.runner")

    def run(self, suite: TestSuite) -> RunSummary:
        summary = RunSummary()
        for group_name, group in suite.items():
            self._run_group(group_name, group, summary)

        self.logger.debug(
            f"Run finished: {summary.passed} passed, {summary.failed} failed "
            f"across {summary.groups} group(s)"
        )
        return summary

    def _run_group(self, name: str, group: TestGroup, summary: RunSummary) -> None:
        self.logger.debug(f"Starting group '{name}'")
        handle = self.presentation.begin_group(name)

        # non-callable setup/teardown entries are ignored
        setup = group.get(SETUP) if callable(group.get(SETUP)) else None
        teardown = group.get(TEARDOWN) if callable(group.get(TEARDOWN)) else None
        cases = [(desc, fn) for desc, fn in group.items() if desc not in (SETUP, TEARDOWN)]

        self._try_to_do(setup, "Error during setup()", handle, summary, suppress_pass=True)
        for description, fn in cases:
            self._try_to_do(fn, description, handle, summary)
        self._try_to_do(
            teardown, "Error during teardown()", handle, summary, suppress_pass=True
        )

        self.presentation.end_group(handle)
        summary.groups += 1
        if handle.failed:
            summary.failed_groups.append(name)

    def _try_to_do(
        self,
        fn: Callable[[], Any] | None,
        description: str,
        handle: GroupHandle,
        summary: RunSummary,
        suppress_pass: bool = False,
    ) -> ResultRecord | None:
        """Call fn and report the outcome; returns the record, or None when nothing ran."""
        if fn is None:
            return None
        if not callable(fn):
            self.logger.warning(
                f"Skipping '{description}' in group '{handle.name}': not callable"
            )
            return None

        try:
            fn()
        except (Exception, SystemExit) as e:
            record = ResultRecord(status=Status.FAIL, description=description, error=e)
            self.logger.error(
                f"[{handle.name}] {description}: {record.error_info}", exc_info=e
            )
            self.presentation.report_result(handle, record)
            summary.failed += 1
            return record

        record = ResultRecord(status=Status.PASS, description=description)
        self.logger.debug(f"[{handle.name}] {description}: pass")
        if not suppress_pass:
            self.presentation.report_result(handle, record)
            summary.passed += 1
        return record


def run(
    suite: TestSuite,
    presentation: BasePresentation,
    logger: logging.Logger | None = None,
) -> RunSummary:
    """Run *suite*, reporting to *presentation*."""
    return Runner(presentation, logger=logger).run(suite)


def run_to_page(
    suite: TestSuite, config: PageConfig | None = None
) -> tuple[RunSummary, Path]:
    """Run *suite* into an HTML results page and write it.

    Returns the run summary and the path of the written page.
    """
    config = config or PageConfig()
    logger = setup_logger(
        config.debug_log_path, verbose=config.verbose, logger_name="pagetest_page"
    )
    try:
        presentation = HtmlPresentation(config)
        summary = Runner(presentation, logger=logger).run(suite)
        page_path = presentation.reveal()
        logger.debug(f"Results page: {page_path}")
    finally:
        close_logger(logger)
    return summary, page_path
