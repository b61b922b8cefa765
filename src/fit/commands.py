"""Subcommand dispatch types."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

TOOL_NAME = "git"
PROGRAM_NAME = "fit"


class Command(str, Enum):
    """Subcommands with dedicated formatting; everything else is DEFAULT."""

    STATUS = "status"
    LOG = "log"
    BRANCH = "branch"
    DIFF = "diff"
    DEFAULT = ""

    @classmethod
    def from_name(cls, name: str) -> Command:
        for command in cls:
            if command is not cls.DEFAULT and command.value == name:
                return command
        return cls.DEFAULT


@dataclass(frozen=True)
class CommandContext:
    """Immutable context for one formatting pass."""

    name: str = ""
    command: Command = Command.DEFAULT
    tool_name: str = TOOL_NAME
    program_name: str = PROGRAM_NAME

    @classmethod
    def for_name(cls, name: str, *, program_name: str = PROGRAM_NAME) -> CommandContext:
        return cls(name=name, command=Command.from_name(name), program_name=program_name)

    @classmethod
    def from_args(cls, args: Sequence[str], *, program_name: str = PROGRAM_NAME) -> CommandContext:
        """Build a context from the forwarded argv; the first token is the subcommand."""
        name = args[0] if args else ""
        return cls.for_name(name, program_name=program_name)

    @property
    def usage_prefix(self) -> str:
        return f"usage: {self.tool_name}"
