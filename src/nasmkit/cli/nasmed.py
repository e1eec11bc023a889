"""
nasmed - NASM Source Editing Command-Line Interface
===================================================

This module implements the ``nasmed`` command, which applies the nasmkit
engines to whole files from the terminal.

Usage Examples
--------------
Re-indent to stdout:
    $ nasmed indent boot.asm

Re-indent in place with a 4-column offset:
    $ nasmed indent --basic-offset 4 --in-place boot.asm

List labels and macro definitions:
    $ nasmed outline boot.asm

Dump classified regions:
    $ nasmed highlight boot.asm

Settings not given on the command line come from the NASMKIT_*
environment variables (see nasmkit.config).
"""

import dataclasses
import logging
from pathlib import Path
from typing import Optional

import click

from nasmkit import __version__
from nasmkit.cli.errors import handle_cli_exception
from nasmkit.config import EditorConfig
from nasmkit.editor import IndentationEngine, TextBuffer
from nasmkit.errors import SourceFileError
from nasmkit.syntax import LineClassifier, build_outline

logger = logging.getLogger(__name__)


def read_source(path: Path) -> str:
    """
    Read an assembly source file as text.

    Raises:
        SourceFileError: If the file is not valid UTF-8
    """
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise SourceFileError(str(path), f"cannot decode as UTF-8 ({e.reason})") from None


# =============================================================================
# CLI Definition
# =============================================================================

@click.group()
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Log engine decisions to stderr",
)
@click.version_option(version=__version__, prog_name="nasmed")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """
    Classify and re-indent NASM x86 assembly source.

    \b
    Examples:
        nasmed indent boot.asm            # Re-indented source on stdout
        nasmed indent -i boot.asm         # Re-indent in place
        nasmed outline boot.asm           # Labels and definitions
        nasmed highlight boot.asm         # Classified regions
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@main.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the result to a file instead of stdout",
)
@click.option(
    "-i", "--in-place",
    is_flag=True,
    help="Rewrite INPUT_FILE",
)
@click.option(
    "--basic-offset",
    type=int,
    default=None,
    help="Indentation column for instruction lines (default: 8)",
)
@click.option(
    "--tabs/--spaces",
    default=None,
    help="Indent with tab characters or spaces (default: spaces)",
)
@click.pass_context
def indent(
    ctx: click.Context,
    input_file: Path,
    output: Optional[Path],
    in_place: bool,
    basic_offset: Optional[int],
    tabs: Optional[bool],
) -> None:
    """
    Re-indent every line of INPUT_FILE.

    Directives, preprocessor directives, [bracketed] directives, ;;
    comments and labels go to column 0; all other lines to the basic
    offset.
    """
    verbose = ctx.obj["verbose"]
    if output is not None and in_place:
        raise click.UsageError("-o/--output and -i/--in-place are mutually exclusive")

    try:
        config = EditorConfig.from_env()
        overrides = {}
        if basic_offset is not None:
            overrides["basic_offset"] = basic_offset
        if tabs is not None:
            overrides["indent_tabs"] = tabs
        if overrides:
            config = dataclasses.replace(config, **overrides)

        buffer = TextBuffer(read_source(input_file), tab_width=config.tab_width)
        changed = IndentationEngine(config).reindent_all(buffer)

        destination = input_file if in_place else output
        if destination is None:
            click.echo(buffer.text, nl=False)
        else:
            destination.write_text(buffer.text, encoding="utf-8")

        if verbose:
            click.echo(f"Re-indented {changed} of {buffer.line_count} lines", err=True)

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


@main.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.pass_context
def outline(ctx: click.Context, input_file: Path) -> None:
    """
    List the labels and %define/%macro definitions of INPUT_FILE.

    Each line is ROW:COLUMN, kind and name, tab separated; rows and
    columns are 1-based.
    """
    try:
        lines = read_source(input_file).split("\n")
        for entry in build_outline(lines):
            click.echo(f"{entry.row + 1}:{entry.column + 1}\t{entry.kind}\t{entry.name}")
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.obj["verbose"])


@main.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.pass_context
def highlight(ctx: click.Context, input_file: Path) -> None:
    """
    Print the classified regions of every line of INPUT_FILE.

    Each line is ROW:START-END, category and text, tab separated; rows
    are 1-based, START and END are 0-based character offsets.
    """
    try:
        classifier = LineClassifier()
        lines = read_source(input_file).split("\n")
        for row, line in enumerate(lines, start=1):
            for region in classifier.regions(line):
                click.echo(
                    f"{row}:{region.start}-{region.end}\t"
                    f"{region.category.value}\t{region.text(line)}"
                )
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.obj["verbose"])


if __name__ == "__main__":
    main()
