"""In-memory surface that keeps the plain record stream."""

from __future__ import annotations

from pagetest.presentation.base import BasePresentation, GroupHandle
from pagetest.results import ResultRecord


class RecordingPresentation(BasePresentation):
    def __init__(self) -> None:
        self.groups: list[GroupHandle] = []

    def begin_group(self, name: str) -> GroupHandle:
        group = GroupHandle(name=name)
        self.groups.append(group)
        return group

    @property
    def records(self) -> list[ResultRecord]:
        return [record for group in self.groups for record in group.records]

    def group(self, name: str) -> GroupHandle:
        for group in self.groups:
            if group.name == name:
                return group
        raise KeyError(name)

    def reveal(self) -> list[GroupHandle]:
        return list(self.groups)
