from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from pagetest.results import ResultRecord


@dataclass
class GroupHandle:
    """Rendering context for one test group, returned by ``begin_group``.

    Results are attached to the handle they are reported against, so a
    surface never needs a shared "current group" field.
    """

    name: str
    records: list[ResultRecord] = field(default_factory=list)
    closed: bool = False

    @property
    def failed(self) -> bool:
        return any(not r.passed for r in self.records)

    def add(self, record: ResultRecord) -> None:
        if self.closed:
            raise RuntimeError(f"Group '{self.name}' has already ended")
        self.records.append(record)


class BasePresentation(ABC):
    """Passive surface that receives group and result notifications."""

    @abstractmethod
    def begin_group(self, name: str) -> GroupHandle:
        """Open a rendering context for the group called *name*."""
        ...

    def report_result(self, group: GroupHandle, record: ResultRecord) -> None:
        """Attach *record* to *group*."""
        group.add(record)

    def end_group(self, group: GroupHandle) -> None:
        """Close *group*; later reports against it are rejected."""
        group.closed = True

    @abstractmethod
    def reveal(self) -> Any:
        """Make the accumulated results visible."""
        ...
