"""Tests for test-group execution and result reporting."""

import logging
import sys

import pytest

from pagetest.assertions import AssertionFailure, assert_equals, assert_true
from pagetest.equality import CyclicComparisonError
from pagetest.results import Status
from pagetest.runner import Runner, run


def _fail():
    assert_true(False)


def _ok():
    pass


def _statuses(presentation):
    return [(r.status, r.description) for r in presentation.records]


def test_failing_case_does_not_stop_the_next_one(presentation):
    calls = []

    def setup():
        calls.append("setup")

    def case_a():
        calls.append("case A")
        raise ValueError("boom")

    def case_b():
        calls.append("case B")

    def teardown():
        calls.append("teardown")

    summary = run(
        {
            "G": {
                "setup": setup,
                "case A": case_a,
                "case B": case_b,
                "teardown": teardown,
            }
        },
        presentation,
    )

    assert calls == ["setup", "case A", "case B", "teardown"]
    assert _statuses(presentation) == [
        (Status.FAIL, "case A"),
        (Status.PASS, "case B"),
    ]
    assert summary.passed == 1
    assert summary.failed == 1
    assert summary.failed_groups == ["G"]


def test_setup_and_teardown_successes_are_silent(presentation):
    run({"G": {"setup": _ok, "teardown": _ok}}, presentation)
    assert presentation.records == []
    assert presentation.group("G").failed is False


def test_setup_position_in_group_does_not_matter(presentation):
    calls = []
    group = {
        "case": lambda: calls.append("case"),
        "teardown": lambda: calls.append("teardown"),
        "setup": lambda: calls.append("setup"),
    }
    run({"G": group}, presentation)
    assert calls == ["setup", "case", "teardown"]


def test_failing_setup_is_reported_and_cases_still_run(presentation):
    calls = []

    def setup():
        raise RuntimeError("no fixture")

    run(
        {
            "G": {
                "setup": setup,
                "case": lambda: calls.append("case"),
                "teardown": lambda: calls.append("teardown"),
            }
        },
        presentation,
    )

    assert calls == ["case", "teardown"]
    records = presentation.records
    assert records[0].status is Status.FAIL
    assert records[0].description == "Error during setup()"
    assert isinstance(records[0].error, RuntimeError)
    assert records[1].description == "case"
    assert records[1].passed


def test_failing_teardown_is_reported(presentation):
    def teardown():
        raise KeyError("gone")

    run({"G": {"case": _ok, "teardown": teardown}}, presentation)

    assert _statuses(presentation) == [
        (Status.PASS, "case"),
        (Status.FAIL, "Error during teardown()"),
    ]
    assert presentation.group("G").failed is True


def test_teardown_runs_after_every_case_failed(presentation):
    calls = []
    run(
        {"G": {"a": _fail, "b": _fail, "teardown": lambda: calls.append("teardown")}},
        presentation,
    )
    assert calls == ["teardown"]


def test_cases_run_in_declaration_order(presentation):
    calls = []
    group = {name: (lambda n=name: calls.append(n)) for name in ["z", "a", "m"]}
    run({"G": group}, presentation)
    assert calls == ["z", "a", "m"]
    assert [r.description for r in presentation.records] == ["z", "a", "m"]


def test_all_groups_report_even_when_first_group_fails(presentation):
    summary = run(
        {
            "first": {"one": _fail, "two": _fail},
            "second": {"three": _ok},
        },
        presentation,
    )

    assert [g.name for g in presentation.groups] == ["first", "second"]
    assert presentation.group("first").failed is True
    assert presentation.group("second").failed is False
    assert summary.groups == 2
    assert summary.failed_groups == ["first"]
    assert summary.all_passed is False


def test_assertion_failure_detail_is_captured(presentation):
    run({"G": {"five is six": lambda: assert_equals(5, 6)}}, presentation)

    record = presentation.records[0]
    assert isinstance(record.error, AssertionFailure)
    info = record.error_info
    assert info.kind == "AssertionError"
    assert info.message == "Expected 6, but 5 was returned."
    assert "AssertionFailure" in info.detail
    assert str(info) == "AssertionError: Expected 6, but 5 was returned."


def test_arbitrary_exception_uses_class_name_as_kind(presentation):
    def case():
        return None.missing

    run({"G": {"null reference": case}}, presentation)

    info = presentation.records[0].error_info
    assert info.kind == "AttributeError"
    assert "missing" in info.message


def test_cyclic_comparison_is_reported_as_failure(presentation):
    def case():
        a = [1]
        a.append(a)
        assert_equals(a, a)

    summary = run({"G": {"cycle": case, "after": _ok}}, presentation)

    assert isinstance(presentation.records[0].error, CyclicComparisonError)
    assert presentation.records[0].error_info.kind == "CyclicComparisonError"
    assert presentation.records[1].passed
    assert summary.failed == 1


def test_keyboard_interrupt_is_not_caught(presentation):
    def case():
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        run({"G": {"interrupt": case}}, presentation)


def test_non_callable_entries_are_skipped(presentation, caplog):
    with caplog.at_level(logging.WARNING, logger="pagetest.runner"):
        summary = run(
            {"G": {"setup": None, "not a test": 42, "real": _ok}}, presentation
        )

    assert _statuses(presentation) == [(Status.PASS, "real")]
    assert summary.passed == 1
    assert "not callable" in caplog.text


def test_failures_are_logged_at_error_level(presentation, caplog):
    with caplog.at_level(logging.ERROR, logger="pagetest.runner"):
        run({"G": {"broken": _fail}}, presentation)

    assert "[G] broken" in caplog.text
    assert "Expected true, but false was returned." in caplog.text


def test_runner_uses_group_handles(mocker, presentation):
    begin = mocker.spy(presentation, "begin_group")
    report = mocker.spy(presentation, "report_result")
    end = mocker.spy(presentation, "end_group")

    Runner(presentation).run({"G": {"a": _ok, "b": _fail}})

    handle = begin.spy_return
    assert begin.call_count == 1
    assert [c.args[0] for c in report.call_args_list] == [handle, handle]
    end.assert_called_once_with(handle)
    assert handle.closed is True


def test_runner_never_reveals(mocker, presentation):
    reveal = mocker.spy(presentation, "reveal")
    run({"G": {"a": _ok}}, presentation)
    reveal.assert_not_called()


def test_reporting_to_closed_group_is_rejected(presentation):
    run({"G": {"a": _ok}}, presentation)
    group = presentation.group("G")
    with pytest.raises(RuntimeError, match="already ended"):
        presentation.report_result(group, presentation.records[0])


def test_empty_suite_reports_nothing(presentation):
    summary = run({}, presentation)
    assert presentation.groups == []
    assert summary.to_dict() == {
        "groups": 0,
        "passed": 0,
        "failed": 0,
        "failed_groups": [],
    }


def test_system_exit_in_case_does_not_stop_the_run(presentation):
    calls = []

    def exits():
        sys.exit(1)

    summary = run(
        {
            "G": {
                "exits": exits,
                "after": _ok,
                "teardown": lambda: calls.append("teardown"),
            },
            "H": {"ok": _ok},
        },
        presentation,
    )

    assert [g.name for g in presentation.groups] == ["G", "H"]
    assert calls == ["teardown"]
    record = presentation.group("G").records[0]
    assert isinstance(record.error, SystemExit)
    assert record.error_info.kind == "SystemExit"
    assert _statuses(presentation)[1:] == [(Status.PASS, "after"), (Status.PASS, "ok")]
    assert summary.failed_groups == ["G"]


def test_non_callable_setup_and_teardown_are_ignored_silently(presentation, caplog):
    with caplog.at_level(logging.DEBUG, logger="pagetest.runner"):
        run({"G": {"setup": "fixture", "teardown": 0, "real": _ok}}, presentation)

    assert _statuses(presentation) == [(Status.PASS, "real")]
    assert "not callable" not in caplog.text
