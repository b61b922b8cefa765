"""Output formatter: dispatches raw git output to per-command handlers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from loguru import logger

from fit.classifier import (
    HintBuffer,
    classify,
    classify_diff_line,
    detect_status_entry,
    has_severity_prefix,
)
from fit.commands import Command, CommandContext
from fit.styles import GLYPH_CURRENT, StyleSheet
from fit.types import ClassifiedLine, FormattedDocument, TableBlock, TableRow

STATUS_HEADER = ("FILE", "STATUS")
LOG_HEADER = ("DATE", "HASH", "AUTHOR", "MESSAGE")
BRANCH_HEADER = ("BRANCH", "CURRENT")
LOG_FIELDS = 4
HASH_WIDTH = 10
CURRENT_BRANCH_MARKER = "*"


def split_lines(raw_output: str) -> list[str]:
    """Split on newlines; a final newline terminates the last line."""

    lines = raw_output.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


@dataclass
class _DocumentBuilder:
    styles: StyleSheet
    context: CommandContext
    segments: list[str] = field(default_factory=list)
    lines: list[ClassifiedLine] = field(default_factory=list)
    tables: list[TableBlock] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    def add_line(self, classified: ClassifiedLine) -> None:
        self.lines.append(classified)
        self.segments.append(classified.rendered)

    def classify(self, line: str) -> None:
        self.add_line(classify(line, self.context, self.styles))

    def add_table(self, header: tuple[str, ...], rows: list[TableRow]) -> None:
        block = TableBlock(header=header, rows=tuple(rows))
        self.tables.append(block)
        self.segments.append(self.styles.render(self.styles.table(block)))

    def build(self, exit_code: int) -> FormattedDocument:
        return FormattedDocument(
            segments=tuple(self.segments),
            lines=tuple(self.lines),
            tables=tuple(self.tables),
            skipped=tuple(self.skipped),
            exit_code=exit_code,
        )


def _format_status(lines: list[str], document: _DocumentBuilder) -> None:
    rows: list[TableRow] = []
    for line in lines:
        row = detect_status_entry(line)
        if row is not None:
            rows.append(row)
        else:
            document.classify(line.strip())
    document.add_table(STATUS_HEADER, rows)


def _format_log(lines: list[str], document: _DocumentBuilder) -> None:
    rows: list[TableRow] = []
    for line in lines:
        if has_severity_prefix(line):
            document.classify(line)
            continue
        parts = line.split("|", LOG_FIELDS - 1)
        if len(parts) < LOG_FIELDS:
            logger.debug("format.log.skipped fields={} line={!r}", len(parts), line)
            document.skipped.append(line)
            continue
        date, commit_hash, author, message = parts
        rows.append(TableRow(cells=(date, commit_hash[:HASH_WIDTH], author, message)))
    document.add_table(LOG_HEADER, rows)


def _format_branch(lines: list[str], document: _DocumentBuilder) -> None:
    rows: list[TableRow] = []
    for line in lines:
        if has_severity_prefix(line):
            document.classify(line)
        elif line.startswith(CURRENT_BRANCH_MARKER):
            name = line.replace(CURRENT_BRANCH_MARKER, " ", 1).strip()
            rows.append(TableRow(cells=(name, GLYPH_CURRENT), styles=("branch.current", None)))
        elif line.strip():
            rows.append(TableRow(cells=(line.strip(), "")))
    document.add_table(BRANCH_HEADER, rows)


def _format_diff(lines: list[str], document: _DocumentBuilder) -> None:
    for line in lines:
        document.add_line(classify_diff_line(line, document.styles))


def _format_default(lines: list[str], document: _DocumentBuilder) -> None:
    hints = HintBuffer()
    for line in lines:
        if hints.is_hint(line):
            hints.add(line)
            continue
        flushed = hints.flush(document.styles)
        if flushed is not None:
            document.add_line(flushed)
        document.classify(line)
    flushed = hints.flush(document.styles)
    if flushed is not None:
        document.add_line(flushed)


Handler = Callable[[list[str], _DocumentBuilder], None]

HANDLERS: dict[Command, Handler] = {
    Command.STATUS: _format_status,
    Command.LOG: _format_log,
    Command.BRANCH: _format_branch,
    Command.DIFF: _format_diff,
    Command.DEFAULT: _format_default,
}


def format_output(
    command_name: str,
    raw_output: str,
    styles: StyleSheet,
    *,
    exit_code: int = 0,
    program_name: str | None = None,
) -> FormattedDocument:
    """Render raw git output for the given subcommand."""

    if program_name is None:
        context = CommandContext.for_name(command_name)
    else:
        context = CommandContext.for_name(command_name, program_name=program_name)
    lines = split_lines(raw_output)
    logger.debug("format.dispatch command={} lines={}", context.command.name.lower(), len(lines))
    document = _DocumentBuilder(styles=styles, context=context)
    HANDLERS[context.command](lines, document)
    return document.build(exit_code)
