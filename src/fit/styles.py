"""Terminal styling for formatted git output."""

from __future__ import annotations

import io
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from rich import box
from rich.console import COLOR_SYSTEMS, Console, RenderableType
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from fit.types import TableBlock, Tag

GLYPH_MODIFIED = "🛠️"
GLYPH_NEW = "✨"
GLYPH_DELETED = "❌"
GLYPH_UNTRACKED = "📁"
GLYPH_SUCCESS = "✅"
GLYPH_INFO = "ℹ️"
GLYPH_CURRENT = "📍"

DEFAULT_PALETTE: Mapping[str, str] = MappingProxyType({
    "status.modified": "blue",
    "status.new": "green",
    "status.deleted": "red",
    "marker.modified": "bright_blue",
    "marker.new": "bright_green",
    "marker.deleted": "bright_red",
    "banner.branch": "green",
    "banner.success": "bright_green",
    "banner.info": "bright_blue",
    "branch.current": "green",
    "diff.index": "yellow",
    "diff.file": "cyan",
    "diff.hunk": "blue",
    "diff.removed": "red",
    "diff.added": "green",
    "diff.context": "bright_black",
    "table.header": "bold",
})

# tag -> (label, label style, message style)
LABELS: Mapping[Tag, tuple[str, str, str]] = MappingProxyType({
    Tag.INFO: ("INFO", "black on cyan", "bright_cyan"),
    Tag.HINT: ("INFO", "black on cyan", "bright_cyan"),
    Tag.WARNING: ("WARNING", "black on yellow", "yellow"),
    Tag.FATAL: ("ERROR", "black on bright_red", "bright_red"),
})


def _build_console(*, no_color: bool, width: int | None) -> Console:
    return Console(
        file=io.StringIO(),
        force_terminal=not no_color,
        no_color=no_color,
        color_system=None if no_color else "auto",
        highlight=False,
        markup=False,
        emoji=False,
        width=width,
    )


@dataclass(frozen=True)
class StyledLine:
    """Raw text fragments paired with rich style names.

    Fragments are painted with ``Style.render`` directly, so tabs and control
    characters such as ``\\r`` reach the terminal exactly as git wrote them.
    """

    fragments: tuple[tuple[str, str], ...] = ()

    @classmethod
    def of(cls, content: str, style: str = "") -> StyledLine:
        return cls(((content, style),))

    @property
    def plain(self) -> str:
        return "".join(content for content, _style in self.fragments)

    def __add__(self, other: StyledLine) -> StyledLine:
        return StyledLine(self.fragments + other.fragments)


@dataclass(frozen=True)
class StyleSheet:
    """Stateless lookup from semantic roles to rich styles, plus string rendering."""

    console: Console
    palette: Mapping[str, str] = field(default_factory=lambda: DEFAULT_PALETTE)

    @classmethod
    def for_terminal(cls, *, no_color: bool = False, width: int | None = None) -> StyleSheet:
        return cls(console=_build_console(no_color=no_color, width=width))

    @classmethod
    def plain(cls, width: int = 120) -> StyleSheet:
        """Color-less sheet; rendered text equals the visible characters."""
        return cls(console=_build_console(no_color=True, width=width))

    def style(self, role: str) -> str:
        return self.palette.get(role, "")

    def text(self, content: str, role: str | None = None) -> StyledLine:
        return StyledLine.of(content, self.style(role) if role else "")

    def box(self, content: str, role: str) -> Panel:
        return Panel.fit(Text(content, style=self.style(role)), box=box.SQUARE)

    def label(self, tag: Tag, message: str) -> StyledLine:
        """Build a labelled block; continuation lines align under the first."""

        name, label_style, message_style = LABELS.get(tag, LABELS[Tag.INFO])
        prefix = f" {name} "
        indent = " " * (len(prefix) + 1)
        fragments: list[tuple[str, str]] = [(prefix, label_style), (" ", "")]
        for index, line in enumerate(message.split("\n")):
            if index:
                fragments.append(("\n" + indent, ""))
            fragments.append((line, message_style))
        return StyledLine(tuple(fragments))

    def table(self, block: TableBlock) -> Table:
        table = Table(box=box.SQUARE, header_style=self.style("table.header"))
        for title in block.header:
            table.add_column(title)
        for row in block.rows:
            table.add_row(*(Text(cell, style=row.style_of(index) or "") for index, cell in enumerate(row.cells)))
        return table

    def paint(self, line: StyledLine) -> str:
        color_system = None if self.console.no_color else COLOR_SYSTEMS.get(self.console.color_system or "")
        return "".join(
            Style.parse(style).render(content, color_system=color_system) if style else content
            for content, style in line.fragments
        )

    def render(self, renderable: StyledLine | RenderableType) -> str:
        """Render to a string that ends with exactly one newline."""

        if isinstance(renderable, StyledLine):
            return self.paint(renderable).rstrip("\n") + "\n"
        with self.console.capture() as capture:
            self.console.print(renderable)
        return capture.get().rstrip("\n") + "\n"
