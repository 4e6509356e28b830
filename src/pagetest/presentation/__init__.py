from pagetest.presentation.base import BasePresentation, GroupHandle
from pagetest.presentation.html import HtmlPresentation
from pagetest.presentation.memory import RecordingPresentation

__all__ = [
    "BasePresentation",
    "GroupHandle",
    "HtmlPresentation",
    "RecordingPresentation",
]
