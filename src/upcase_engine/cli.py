"""Command line wrapper: upcase the plain code of a source file."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import rich_click as click

from upcase_engine.case import case_table_names
from upcase_engine.config import UpcaseConfig
from upcase_engine.engine import UpcaseEngine
from upcase_engine.runtime import telemetry
from upcase_engine.syntax import check_balance, syntax_names

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.SHOW_ARGUMENTS = True

EXIT_UNBALANCED = 1


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("source", type=click.Path(dir_okay=False, allow_dash=True, path_type=str))
@click.option(
    "--syntax",
    type=click.Choice(syntax_names(), case_sensitive=False),
    default=None,
    help="Syntax table used to find comments and strings [default: lisp].",
)
@click.option(
    "--case-table",
    type=click.Choice(case_table_names(), case_sensitive=False),
    default=None,
    help="Uppercase mapping [default: unicode].",
)
@click.option("--in-place", "-i", is_flag=True, help="Rewrite SOURCE instead of printing.")
@click.option("--check", is_flag=True, help="Only report whether SOURCE is balanced.")
@click.option(
    "--log-preset",
    type=click.Choice(["development", "production", "performance"]),
    default=None,
    help="Telemetry preset.",
)
@click.pass_context
def main(
    ctx: click.Context,
    source: str,
    syntax: Optional[str],
    case_table: Optional[str],
    in_place: bool,
    check: bool,
    log_preset: Optional[str],
) -> None:
    """Upcase everything in SOURCE that is not inside a comment or string.

    Use [bold]-[/bold] to read from stdin. The file is left untouched when its
    brackets, strings or block comments do not balance.
    """

    if log_preset:
        telemetry.configure(preset=log_preset)

    if in_place and source == "-":
        raise click.UsageError("--in-place needs a file, not stdin")

    config = UpcaseConfig.from_env()
    if syntax:
        config.syntax = syntax
    if case_table:
        config.case_table = case_table

    text = _read_source(source)
    engine = UpcaseEngine.from_text(text, config=config)

    if check:
        report = check_balance(engine.buffer, 0, engine.buffer.length(), engine.oracle.table)
        click.echo(report.message, err=not report.balanced)
        ctx.exit(0 if report.balanced else EXIT_UNBALANCED)

    result = engine.upcase_buffer()
    if not result:
        click.echo(f"{source}: {result.message}", err=True)
        ctx.exit(EXIT_UNBALANCED)

    if in_place:
        # newline="" keeps CRLF and lone CR line endings byte for byte.
        Path(source).write_text(engine.text, encoding="utf-8", newline="")
        click.echo(f"{source}: {result.message}", err=True)
    else:
        click.echo(engine.text, nl=False)


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        raise click.BadParameter(f"{source} does not exist", param_hint="SOURCE")
    try:
        return path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as exc:
        raise click.FileError(
            source, hint=f"not valid UTF-8 ({exc.reason} at byte {exc.start})"
        ) from exc


if __name__ == "__main__":  # pragma: no cover
    main()
