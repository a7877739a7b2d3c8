"""
unitable CLI

Prints a per-character Unicode report for stdin or a file.

Examples:
    # Full report for a string
    echo 'héllo' | unitable

    # Selected columns, header every 20 rows
    unitable notes.txt --columns character-index,codepoint,name --header-interval 20

    # Show the available columns
    unitable --list-columns
"""

import os
import sys
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from unitable.contexts.intake import LineBufferedChars, open_text_input, stdin_chars
from unitable.contexts.tabulation import Column, ConfigurationError, render
from unitable.contexts.tabulation.logger import log_config_source, setup_tabulation_logger
from unitable.utils.config import build_table_config, load_table_config

EXIT_IO_ERROR = 1
EXIT_CONFIG_ERROR = 2

app = typer.Typer(
    help="Print one row per Unicode character: index, byte offset, codepoint, UTF-8 bytes, glyph, name",
    add_completion=False,
)


def list_columns_callback(value: bool) -> None:
    """Print available column names and exit."""
    if not value:
        return
    for column in Column:
        typer.echo(f"{column.cli_name:<16} {column.label}")
    raise typer.Exit()


def _split_columns(value: str) -> list:
    """Split a comma-separated column list, ignoring empty entries."""
    return [name.strip() for name in value.split(",") if name.strip()]


def _silence_stdout() -> None:
    # After a broken pipe, point stdout at devnull so the interpreter's final
    # flush does not fail again
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


@app.command()
def main(
    input_file: Annotated[
        Optional[Path],
        typer.Argument(help="File to read (defaults to stdin)", exists=True, dir_okay=False),
    ] = None,
    columns: Annotated[
        Optional[str],
        typer.Option(
            "--columns",
            "-c",
            help="Comma-separated column names (see --list-columns)",
        ),
    ] = None,
    header_interval: Annotated[
        Optional[int],
        typer.Option("--header-interval", "-H", help="Data rows between header lines"),
    ] = None,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", help="YAML config file (defaults to $UNITABLE_CONFIG)"),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Also write a DEBUG log file to this directory"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log progress to stderr"),
    ] = False,
    list_columns: Annotated[
        bool,
        typer.Option(
            "--list-columns",
            help="List available columns and exit",
            callback=list_columns_callback,
            is_eager=True,
        ),
    ] = False,
):
    """
    Print the character report.

    Examples:\n

        $ echo 'héllo' | unitable

        $ unitable notes.txt -c character-index,codepoint,name
    """
    try:
        config = load_table_config(config_path)
        source = config.source
        config = build_table_config(
            columns=_split_columns(columns) if columns is not None else [c.cli_name for c in config.columns],
            header_interval=header_interval if header_interval is not None else config.header_interval,
            log_dir=log_dir if log_dir is not None else config.log_dir,
        )
        config.source = source
    except ConfigurationError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=EXIT_CONFIG_ERROR)

    setup_tabulation_logger(
        log_dir=config.log_dir,
        level="INFO" if verbose else "WARNING",
        columns=config.columns,
    )
    log_config_source(config.source)

    output = sys.stdout.buffer
    try:
        if input_file is None:
            render(config.columns, stdin_chars(), output, config.header_interval)
        else:
            with open_text_input(input_file) as stream:
                render(config.columns, LineBufferedChars(stream), output, config.header_interval)
        output.flush()
    except BrokenPipeError:
        _silence_stdout()
        raise typer.Exit(code=EXIT_IO_ERROR)
    except OSError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=EXIT_IO_ERROR)


if __name__ == "__main__":
    app()
