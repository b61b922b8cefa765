"""Line classification rules."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from rich.console import RenderableType

from fit.commands import CommandContext
from fit.styles import (
    GLYPH_DELETED,
    GLYPH_INFO,
    GLYPH_MODIFIED,
    GLYPH_NEW,
    GLYPH_SUCCESS,
    GLYPH_UNTRACKED,
    StyledLine,
    StyleSheet,
)
from fit.types import ClassifiedLine, TableRow, Tag

HINT_PREFIX = "hint:"

Transform = Callable[[StyledLine, StyleSheet, CommandContext], StyledLine | RenderableType]


@dataclass(frozen=True)
class Rule:
    """One (predicate, transform) pair; the predicate sees plain text.

    A final rule ends classification once applied.
    """

    tag: Tag
    matches: Callable[[str, CommandContext], bool]
    apply: Transform
    final: bool = False


def _prefix(*prefixes: str) -> Callable[[str, CommandContext], bool]:
    return lambda text, _context: text.startswith(prefixes)


def _contains(marker: str) -> Callable[[str, CommandContext], bool]:
    return lambda text, _context: marker in text


def _boxed(role: str, glyph: str = "") -> Transform:
    def apply(line: StyledLine, styles: StyleSheet, _context: CommandContext) -> StyledLine | RenderableType:
        content = f"{glyph} {line.plain}" if glyph else line.plain
        return styles.box(content, role)

    return apply


def _marked(glyph: str, role: str | None) -> Transform:
    def apply(line: StyledLine, styles: StyleSheet, _context: CommandContext) -> StyledLine | RenderableType:
        return StyledLine.of(glyph) + (styles.text(line.plain, role) if role else line)

    return apply


def _labelled(tag: Tag, prefix: str = "") -> Transform:
    def apply(line: StyledLine, styles: StyleSheet, _context: CommandContext) -> StyledLine | RenderableType:
        message = line.plain.removeprefix(prefix).strip() if prefix else line.plain
        return styles.label(tag, message)

    return apply


def _is_usage(text: str, context: CommandContext) -> bool:
    return text.startswith(context.usage_prefix)


def _rebrand(line: StyledLine, _styles: StyleSheet, context: CommandContext) -> StyledLine | RenderableType:
    rebranded = f"usage: {context.program_name}" + line.plain.removeprefix(context.usage_prefix)
    return StyledLine.of(rebranded)


BANNER_RULES: tuple[Rule, ...] = (
    Rule(Tag.BANNER, _prefix("On branch"), _boxed("banner.branch"), final=True),
    Rule(
        Tag.SUCCESS,
        _prefix("Initialized empty Git repository"),
        _boxed("banner.success", GLYPH_SUCCESS),
        final=True,
    ),
    Rule(Tag.SUCCESS, _prefix("Switched to"), _boxed("banner.success", GLYPH_SUCCESS), final=True),
    Rule(Tag.BANNER, _prefix("Already on"), _boxed("banner.info", GLYPH_INFO), final=True),
)

MARKER_RULES: tuple[Rule, ...] = (
    Rule(Tag.STATUS_MODIFIED, _contains("modified:"), _marked(f"{GLYPH_MODIFIED} ", "marker.modified")),
    Rule(Tag.STATUS_NEW, _contains("new file:"), _marked(GLYPH_NEW, "marker.new")),
    Rule(Tag.STATUS_DELETED, _contains("deleted:"), _marked(f"{GLYPH_DELETED} ", "marker.deleted")),
    Rule(Tag.GENERIC_COLORED, _contains("Untracked files:"), _marked(f"{GLYPH_UNTRACKED} ", None)),
)

REBRAND_RULES: tuple[Rule, ...] = (Rule(Tag.PLAIN, _is_usage, _rebrand),)

SEVERITY_RULES: tuple[Rule, ...] = (
    Rule(Tag.FATAL, _prefix("fatal:"), _labelled(Tag.FATAL, "fatal:"), final=True),
    Rule(Tag.FATAL, _prefix("error:"), _labelled(Tag.FATAL, "error:"), final=True),
    Rule(Tag.WARNING, _prefix("warning:"), _labelled(Tag.WARNING, "warning:"), final=True),
)

INFO_PHRASES: tuple[str, ...] = (
    "No commits yet",
    "nothing added to commit but untracked files present",
    "no changes added to commit",
    "nothing to commit, working tree clean",
    "HEAD",
    "Your branch is",
)

INFO_RULES: tuple[Rule, ...] = (Rule(Tag.INFO, _prefix(*INFO_PHRASES), _labelled(Tag.INFO), final=True),)

# Stages compose in order; within a stage the first matching rule wins.
# Boxes and labelled blocks are final.
STAGES: tuple[tuple[Rule, ...], ...] = (
    BANNER_RULES,
    MARKER_RULES,
    REBRAND_RULES,
    SEVERITY_RULES,
    INFO_RULES,
)

SEVERITY_PREFIXES: tuple[str, ...] = ("fatal:", "error:", "warning:")

# Order matters: file markers must be checked before single-character prefixes.
DIFF_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("index",), "diff.index"),
    (("---", "+++"), "diff.file"),
    (("@@",), "diff.hunk"),
    (("-",), "diff.removed"),
    (("+",), "diff.added"),
)

STATUS_ENTRIES: tuple[tuple[str, str, str], ...] = (
    ("modified:", "Modified", "status.modified"),
    ("new file:", "New File", "status.new"),
    ("deleted:", "Deleted", "status.deleted"),
)


def _finish(original: str, tag: Tag, renderable: StyledLine | RenderableType, styles: StyleSheet) -> ClassifiedLine:
    return ClassifiedLine(original=original, tag=tag, rendered=styles.render(renderable))


def classify(line: str, context: CommandContext, styles: StyleSheet) -> ClassifiedLine:
    """Classify one line through the generic rule stages."""

    current: StyledLine | RenderableType = StyledLine.of(line.rstrip("\n"))
    tag = Tag.PLAIN
    for stage in STAGES:
        plain = current.plain
        for rule in stage:
            if rule.matches(plain, context):
                current = rule.apply(current, styles, context)
                tag = rule.tag
                if rule.final:
                    return _finish(line, tag, current, styles)
                break
    return _finish(line, tag, current, styles)


def diff_role(line: str) -> str:
    for prefixes, role in DIFF_RULES:
        if line.startswith(prefixes):
            return role
    return "diff.context"


def classify_diff_line(line: str, styles: StyleSheet) -> ClassifiedLine:
    """Color one diff line by its structural prefix."""

    return _finish(line, Tag.GENERIC_COLORED, styles.text(line, diff_role(line)), styles)


def detect_status_entry(line: str) -> TableRow | None:
    """Extract a (path, status) row from a status line, if it is one."""

    stripped = line.strip()
    for prefix, label, role in STATUS_ENTRIES:
        if stripped.startswith(prefix):
            path = stripped.removeprefix(prefix).strip()
            return TableRow(cells=(path, label), styles=(None, role))
    return None


def has_severity_prefix(line: str) -> bool:
    return line.startswith(SEVERITY_PREFIXES)


@dataclass
class HintBuffer:
    """Collects consecutive hint lines into one info block."""

    lines: list[str] = field(default_factory=list)

    @staticmethod
    def is_hint(line: str) -> bool:
        return line.startswith(HINT_PREFIX)

    def add(self, line: str) -> None:
        self.lines.append(line.removeprefix(HINT_PREFIX).removeprefix(" "))

    def flush(self, styles: StyleSheet) -> ClassifiedLine | None:
        if not self.lines:
            return None
        content = "".join(f"{line}\n" for line in self.lines)
        self.lines.clear()
        return ClassifiedLine(
            original=content,
            tag=Tag.HINT,
            rendered=styles.render(styles.label(Tag.HINT, content.rstrip("\n"))),
        )
