"""Minimal unit-testing helper that renders results into a page."""

from pagetest.assertions import AssertionFailure, assert_equals, assert_true
from pagetest.config import PageConfig, load_config
from pagetest.equality import UNDEFINED, CyclicComparisonError, equals
from pagetest.presentation import (
    BasePresentation,
    GroupHandle,
    HtmlPresentation,
    RecordingPresentation,
)
from pagetest.results import ErrorInfo, ResultRecord, RunSummary, Status
from pagetest.runner import Runner, run, run_to_page

__all__ = [
    "AssertionFailure",
    "BasePresentation",
    "CyclicComparisonError",
    "ErrorInfo",
    "GroupHandle",
    "HtmlPresentation",
    "PageConfig",
    "RecordingPresentation",
    "ResultRecord",
    "Runner",
    "RunSummary",
    "Status",
    "UNDEFINED",
    "assert_equals",
    "assert_true",
    "equals",
    "load_config",
    "run",
    "run_to_page",
]
