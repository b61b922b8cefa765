import subprocess

import pytest

from fit import runner
from fit.config import Settings
from fit.errors import GitNotFoundError
from fit.runner import LOG_FORMAT_ARG, build_env, build_git_args, run_git


def test_log_gets_format_request() -> None:
    args = ["log", "-n", "3"]
    assert build_git_args(args) == ["log", "-n", "3", LOG_FORMAT_ARG]
    assert args == ["log", "-n", "3"]


@pytest.mark.parametrize("args", [[], ["status"], ["show", "log"]])
def test_other_commands_are_forwarded_untouched(args: list[str]) -> None:
    assert build_git_args(args) == args


def test_env_forces_locale(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LANG", "de_DE.ISO-8859-1")
    monkeypatch.setenv("HOME", "/home/tester")
    env = build_env("en_US.UTF-8")
    assert env["LANG"] == "en_US.UTF-8"
    assert env["HOME"] == "/home/tester"


def test_run_git_merges_streams_and_keeps_exit_code(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, object] = {}

    def fake_run(cmd, **kwargs):
        seen["cmd"] = cmd
        seen.update(kwargs)
        return subprocess.CompletedProcess(cmd, 1, stdout="fatal: nope\n".encode())

    monkeypatch.setattr(runner.subprocess, "run", fake_run)
    result = run_git(["log"], Settings(git_binary="/usr/bin/git", locale="C.UTF-8"))

    assert seen["cmd"] == ["/usr/bin/git", "log", LOG_FORMAT_ARG]
    assert seen["stderr"] == subprocess.STDOUT
    assert seen["env"]["LANG"] == "C.UTF-8"
    assert result.output == "fatal: nope\n"
    assert result.exit_code == 1
    assert result.args == ["log", LOG_FORMAT_ARG]


def test_run_git_replaces_undecodable_bytes(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(cmd, **kwargs):
        return subprocess.CompletedProcess(cmd, 0, stdout=b"caf\xe9\n")

    monkeypatch.setattr(runner.subprocess, "run", fake_run)
    assert run_git(["status"], Settings()).output == "caf�\n"


def test_missing_binary_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(cmd, **kwargs):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(runner.subprocess, "run", fake_run)
    with pytest.raises(GitNotFoundError) as excinfo:
        run_git(["status"], Settings(git_binary="no-such-git"))
    assert excinfo.value.binary == "no-such-git"
