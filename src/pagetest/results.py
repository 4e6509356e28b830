"""Records produced by the runner for each reported outcome."""

from __future__ import annotations

import traceback
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any


class Status(str, Enum):
    PASS = "pass"
    FAIL = "fail"


@dataclass(frozen=True)
class ErrorInfo:
    """Printable detail of a caught exception.

    Attributes:
        kind: ``"AssertionError"`` for assertion failures, otherwise the
            exception class name.
        message: Human-readable message.
        detail: Formatted traceback captured where the runner caught it.
    """

    kind: str
    message: str
    detail: str = ""

    @classmethod
    def from_exception(cls, exc: BaseException) -> ErrorInfo:
        kind = getattr(exc, "kind", None) or type(exc).__name__
        message = getattr(exc, "message", None)
        if not isinstance(message, str):
            message = str(exc)
        detail = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        return cls(kind=kind, message=message, detail=detail)

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


@dataclass(frozen=True)
class ResultRecord:
    status: Status
    description: str
    error: BaseException | None = None

    @property
    def passed(self) -> bool:
        return self.status is Status.PASS

    @property
    def error_info(self) -> ErrorInfo | None:
        if self.error is None:
            return None
        return ErrorInfo.from_exception(self.error)


@dataclass
class RunSummary:
    """Counts of reported outcomes for one run."""

    groups: int = 0
    passed: int = 0
    failed: int = 0
    failed_groups: list[str] = field(default_factory=list)

    @property
    def all_passed(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
