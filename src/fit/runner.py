"""Git process runner."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass

from loguru import logger

from fit.commands import Command
from fit.config import Settings
from fit.errors import GitNotFoundError

LOG_FORMAT_ARG = "--pretty=format:%ai|%H|%an|%s"


@dataclass(frozen=True)
class GitResult:
    """Combined output and exit code of one git invocation."""

    args: list[str]
    output: str
    exit_code: int


def build_git_args(args: Sequence[str]) -> list[str]:
    """Copy argv, requesting the pipe-delimited format for `log`."""

    git_args = list(args)
    if git_args and git_args[0] == Command.LOG.value:
        git_args.append(LOG_FORMAT_ARG)
    return git_args


def build_env(locale: str) -> dict[str, str]:
    env = dict(os.environ)
    env["LANG"] = locale
    return env


def run_git(args: Sequence[str], settings: Settings) -> GitResult:
    """Run git with stdout and stderr merged into one stream."""

    git_args = build_git_args(args)
    logger.info("git.run binary={} args={}", settings.git_binary, git_args)
    try:
        completed = subprocess.run(  # noqa: S603
            [settings.git_binary, *git_args],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            env=build_env(settings.locale),
            check=False,
        )
    except FileNotFoundError as exc:
        raise GitNotFoundError(settings.git_binary) from exc

    output = completed.stdout.decode("utf-8", errors="replace")
    logger.info("git.exit code={} bytes={}", completed.returncode, len(completed.stdout))
    return GitResult(args=git_args, output=output, exit_code=completed.returncode)
