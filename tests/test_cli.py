import importlib

import pytest
from typer.testing import CliRunner

from fit.errors import GitNotFoundError
from fit.runner import GitResult

cli_module = importlib.import_module("fit.cli")


@pytest.fixture(autouse=True)
def _quiet_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FIT_SHOW_BANNER", "false")
    monkeypatch.setenv("FIT_ECHO_COMMAND", "false")
    monkeypatch.setenv("FIT_NO_COLOR", "true")


def _fake_git(output: str, exit_code: int, calls: list[list[str]]):
    def fake_run_git(args, settings):
        calls.append(list(args))
        return GitResult(args=list(args), output=output, exit_code=exit_code)

    return fake_run_git


def test_status_is_rendered_as_table(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[list[str]] = []
    monkeypatch.setattr(cli_module, "run_git", _fake_git("\tmodified:   app.py\n", 0, calls))

    result = CliRunner().invoke(cli_module.app, ["status"])

    assert result.exit_code == 0
    assert calls == [["status"]]
    assert "FILE" in result.output
    assert "app.py" in result.output
    assert "Modified" in result.output


def test_exit_code_is_propagated(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[list[str]] = []
    output = "fatal: not a git repository (or any of the parent directories): .git\n"
    monkeypatch.setattr(cli_module, "run_git", _fake_git(output, 128, calls))

    result = CliRunner().invoke(cli_module.app, ["status"])

    assert result.exit_code == 128
    assert "ERROR" in result.output
    assert "not a git repository" in result.output


def test_options_are_forwarded_to_git(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[list[str]] = []
    monkeypatch.setattr(cli_module, "run_git", _fake_git("usage: git [--version]\n", 1, calls))

    result = CliRunner().invoke(cli_module.app, ["--help"])

    assert calls == [["--help"]]
    assert "usage: fit [--version]" in result.output
    assert result.exit_code == 1


def test_no_arguments_uses_default_formatting(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[list[str]] = []
    monkeypatch.setattr(cli_module, "run_git", _fake_git("hint: try this\n", 1, calls))

    result = CliRunner().invoke(cli_module.app, [])

    assert calls == [[]]
    assert "INFO" in result.output
    assert "try this" in result.output


def test_banner_and_echo(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FIT_SHOW_BANNER", "true")
    monkeypatch.setenv("FIT_ECHO_COMMAND", "true")
    calls: list[list[str]] = []
    monkeypatch.setattr(cli_module, "run_git", _fake_git("", 0, calls))

    result = CliRunner().invoke(cli_module.app, ["diff", "--stat"])

    assert "█████" in result.output
    assert "Running command: git [diff --stat]" in result.output


def test_missing_git_exits_127(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run_git(args, settings):
        raise GitNotFoundError(settings.git_binary)

    monkeypatch.setattr(cli_module, "run_git", fake_run_git)

    result = CliRunner().invoke(cli_module.app, ["status"])

    assert result.exit_code == 127


@pytest.mark.parametrize(
    "argv",
    [
        ["checkout", "-b", "x", "--", "f"],
        ["commit", "-m", "--"],
        ["log", "--", "path/to/file"],
    ],
)
def test_double_dash_is_forwarded(monkeypatch: pytest.MonkeyPatch, argv: list[str]) -> None:
    calls: list[list[str]] = []
    monkeypatch.setattr(cli_module, "run_git", _fake_git("", 0, calls))

    with pytest.raises(SystemExit) as excinfo:
        cli_module.run(argv)

    assert excinfo.value.code == 0
    assert calls == [argv]


def test_run_reads_sys_argv(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[list[str]] = []
    monkeypatch.setattr(cli_module, "run_git", _fake_git("", 3, calls))
    monkeypatch.setattr(cli_module.sys, "argv", ["fit", "diff", "--", "a.py"])

    with pytest.raises(SystemExit) as excinfo:
        cli_module.run()

    assert excinfo.value.code == 3
    assert calls == [["diff", "--", "a.py"]]
