"""CLI adapter for ``lib_pretty_log`` built on ``lib_cli_exit_tools``.

Purpose
-------
Let operators and developers see what the printer produces (headers,
chunking, JSON/XML pretty-printing) from a shell, for example to pretty-print
a captured payload with ``lib_pretty_log json response.json``.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command with traceback handling, tag, and level options.
* :func:`cli_info` – prints distribution metadata for quick diagnostics.
* :func:`cli_log` – logs one message at a chosen severity.
* :func:`cli_json` / :func:`cli_xml` – pretty-print a payload file or stdin.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
The CLI lives in the outermost layer. It builds its own
:class:`~lib_pretty_log.application.printer.Printer` writing through
:class:`~lib_pretty_log.adapters.sinks.default.StreamSink` to stdout and
never touches the process-wide facade printer.
"""

from __future__ import annotations

import sys
from importlib import metadata
from typing import Final, Optional, Sequence, TextIO

import lib_cli_exit_tools
import rich_click as click

from .adapters.sinks.default import StreamSink
from .application.printer import DEFAULT_TAG, Printer
from .domain.settings import LogLevel, Settings, Severity

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

SEVERITY_CHOICES: Final[dict[str, Severity]] = {
    "verbose": Severity.VERBOSE,
    "debug": Severity.DEBUG,
    "info": Severity.INFO,
    "warn": Severity.WARN,
    "error": Severity.ERROR,
    "assert": Severity.ASSERT,
}
LEVEL_CHOICES: Final[tuple[str, ...]] = tuple(level.name.lower() for level in LogLevel)


def _resolve_version() -> str:
    """Return the installed package version, ``"0.0.0"`` for source checkouts."""

    try:
        return metadata.version("lib_pretty_log")
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.group(
    help="Pretty, call-site annotated log output",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name="lib_pretty_log",
    message="lib_pretty_log version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option("--tag", default=DEFAULT_TAG, show_default=True, help="Global tag for emitted lines")
@click.option(
    "--level",
    type=click.Choice(LEVEL_CHOICES, case_sensitive=False),
    default="full",
    show_default=True,
    help="Drop lines below this level ('none' disables output)",
)
@click.option(
    "--method-count",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Call-site frames rendered above each message",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, tag: str, level: str, method_count: int) -> None:
    """Root command storing traceback and printer preferences for subcommands.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    ctx.obj["tag"] = tag
    ctx.obj["settings"] = Settings(log_level=LogLevel.parse(level), method_count=method_count)
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


def _printer(ctx: click.Context) -> Printer:
    """Build a stdout printer from the root command options."""

    return Printer(StreamSink(sys.stdout), tag=ctx.obj["tag"], settings=ctx.obj["settings"])


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print basic distribution metadata so users can confirm installation."""

    try:
        meta = metadata.metadata("lib_pretty_log")
    except metadata.PackageNotFoundError:
        click.echo("lib_pretty_log (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', 'lib_pretty_log')}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.10')}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")


@cli.command("log", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("severity", type=click.Choice(tuple(SEVERITY_CHOICES), case_sensitive=False))
@click.argument("message")
@click.option("--call-tag", default=None, help="Tag appended to the global tag for this line")
@click.option(
    "--single-line/--multi-line",
    default=False,
    help="Prefix a one-frame header instead of printing a header block",
)
@click.pass_context
def cli_log(ctx: click.Context, severity: str, message: str, call_tag: Optional[str], single_line: bool) -> None:
    """Log MESSAGE at SEVERITY through the pretty printer.

    Examples
    --------
    >>> from click.testing import CliRunner
    >>> result = CliRunner().invoke(cli, ["--tag", "APP", "log", "warn", "disk low"])
    >>> result.output
    'W/APP: disk low\\n'
    """

    printer = _printer(ctx)
    resolved = SEVERITY_CHOICES[severity.lower()]
    if single_line:
        printer.single_line(resolved, call_tag or printer.tag, message)
        return
    printer.t(call_tag).log(resolved, message)


@cli.command("json", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.pass_context
def cli_json(ctx: click.Context, source: TextIO) -> None:
    """Pretty-print the JSON in SOURCE (a file path, or stdin when omitted)."""

    _printer(ctx).json(source.read())


@cli.command("xml", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.pass_context
def cli_xml(ctx: click.Context, source: TextIO) -> None:
    """Pretty-print the XML in SOURCE (a file path, or stdin when omitted)."""

    _printer(ctx).xml(source.read())


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name="lib_pretty_log",
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
