"""End-to-end CLI coverage for the ``lib_pretty_log`` commands.

The CLI writes through its own stdout printer, so these tests double as a
check that the printer renders the same way outside the facade.
"""

from __future__ import annotations

import re
from pathlib import Path

from click.testing import CliRunner

import lib_cli_exit_tools

from lib_pretty_log import cli


def _runner() -> CliRunner:
    """Return a fresh CLI runner so each test starts from a clean state."""

    return CliRunner()


def test_cli_log_prints_logcat_line() -> None:
    result = _runner().invoke(cli.cli, ["--tag", "APP", "log", "warn", "disk low"])
    assert result.exit_code == 0
    assert result.output == "W/APP: disk low\n"


def test_cli_log_with_call_tag_and_header() -> None:
    result = _runner().invoke(cli.cli, ["--tag", "APP", "--method-count", "1", "log", "INFO", "hi", "--call-tag", "net"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 2
    assert re.fullmatch(r"I/APP-net: \(cli\.py:\d+\)=>cli_log \| Thread: .+ \| ", lines[0])
    assert lines[1] == "I/APP-net: hi"


def test_cli_single_line() -> None:
    result = _runner().invoke(cli.cli, ["log", "error", "boom", "--single-line"])
    assert result.exit_code == 0
    assert re.fullmatch(r"E/PRETTYLOGGER: \(cli\.py:\d+\)=>cli_log \| Thread: .+ \| boom\n", result.output)


def test_cli_level_filters_output() -> None:
    assert _runner().invoke(cli.cli, ["--level", "none", "log", "assert", "quiet"]).output == ""
    assert _runner().invoke(cli.cli, ["--level", "warn", "log", "info", "quiet"]).output == ""
    assert _runner().invoke(cli.cli, ["--level", "WARN", "log", "error", "loud"]).output == "E/PRETTYLOGGER: loud\n"


def test_cli_rejects_negative_method_count() -> None:
    result = _runner().invoke(cli.cli, ["--method-count", "-1", "log", "info", "x"])
    assert result.exit_code != 0


def test_cli_json_from_stdin() -> None:
    result = _runner().invoke(cli.cli, ["--tag", "API", "json"], input='{"ok":true}')
    assert result.exit_code == 0
    assert result.output == 'D/API: {\nD/API:     "ok": true\nD/API: }\n'


def test_cli_json_malformed_is_reported_not_raised(tmp_path: Path) -> None:
    payload = tmp_path / "body.json"
    payload.write_text("{oops", encoding="utf-8")
    result = _runner().invoke(cli.cli, ["json", str(payload)])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 2
    assert all(line.startswith("E/PRETTYLOGGER: ") for line in lines)
    assert lines[-1] == "E/PRETTYLOGGER: {oops"


def test_cli_xml_from_file(tmp_path: Path) -> None:
    payload = tmp_path / "feed.xml"
    payload.write_text("<feed><entry>1</entry></feed>", encoding="utf-8")
    result = _runner().invoke(cli.cli, ["--tag", "X", "xml", str(payload)])
    assert result.exit_code == 0
    assert result.output.splitlines() == [
        'D/X: <?xml version="1.0" encoding="UTF-8"?>',
        "D/X: <feed>",
        "D/X:   <entry>1</entry>",
        "D/X: </feed>",
    ]


def test_cli_info_handles_missing_metadata(monkeypatch) -> None:
    """`cli info` must degrade gracefully when package metadata is unavailable."""

    def _raise_pkg_not_found(*_args, **_kwargs):
        raise cli.metadata.PackageNotFoundError()

    monkeypatch.setattr(cli.metadata, "metadata", _raise_pkg_not_found)
    result = _runner().invoke(cli.cli, ["info"])
    assert result.exit_code == 0
    assert "metadata unavailable" in result.output


def test_cli_main_restores_traceback_flag(capsys) -> None:
    """`cli main` should restore lib_cli_exit_tools tracebacks after execution."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    exit_code = cli.main(["--traceback", "--tag", "MAIN", "log", "debug", "hello"], restore_traceback=True)
    assert exit_code == 0
    assert getattr(lib_cli_exit_tools.config, "traceback", False) == previous_traceback
    assert "D/MAIN: hello" in capsys.readouterr().out
