"""Shared formatting dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Tag(str, Enum):
    """Semantic category of one classified line."""

    PLAIN = "plain"
    STATUS_MODIFIED = "status-modified"
    STATUS_NEW = "status-new"
    STATUS_DELETED = "status-deleted"
    BANNER = "banner"
    WARNING = "warning"
    FATAL = "fatal"
    HINT = "hint"
    INFO = "info"
    SUCCESS = "success"
    GENERIC_COLORED = "generic-colored"


@dataclass(frozen=True)
class ClassifiedLine:
    """One raw line with its tag and rendered text."""

    original: str
    tag: Tag
    rendered: str


@dataclass(frozen=True)
class TableRow:
    """Ordered cell texts; styles apply to rendering only."""

    cells: tuple[str, ...]
    styles: tuple[str | None, ...] = ()

    def style_of(self, index: int) -> str | None:
        if index < len(self.styles):
            return self.styles[index]
        return None


@dataclass(frozen=True)
class TableBlock:
    """Fixed header plus data rows in source order."""

    header: tuple[str, ...]
    rows: tuple[TableRow, ...] = ()


@dataclass(frozen=True)
class FormattedDocument:
    """Final output of one formatting pass."""

    segments: tuple[str, ...]
    lines: tuple[ClassifiedLine, ...] = ()
    tables: tuple[TableBlock, ...] = ()
    skipped: tuple[str, ...] = ()
    exit_code: int = 0
    text: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "text", "".join(self.segments))

    def __str__(self) -> str:
        return self.text
