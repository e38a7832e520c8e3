"""Typer app factory for the mdreflink command."""

import sys
from pathlib import Path
from typing import NoReturn

import typer

from mdreflink.api.config.get_package_version import get_package_version
from mdreflink.api.reflink.cmd_reflink import cmd_reflink
from mdreflink.cli.display.CLIDisplay import CLIDisplay
from mdreflink.utils.get_logger import get_logger

logger = get_logger("cli")


# Blank-line separated so help formatting keeps one example per line.
EXAMPLES = "\n\n".join(
    [
        "EXAMPLES:",
        "mdreflink document.md              # Output to stdout",
        "mdreflink -w document.md           # Modify file in-place",
        "cat file.md | mdreflink            # Process stdin",
        "mdreflink --stats document.md      # Show statistics",
        "mdreflink --help                   # Show this help",
    ]
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(get_package_version())
        raise typer.Exit()


def _fail(display: CLIDisplay, message: str) -> NoReturn:
    display.error(message)
    raise typer.Exit(1)


def _create_app() -> typer.Typer:
    """Create and configure the mdreflink Typer app."""
    app = typer.Typer(
        name="mdreflink",
        help="Convert inline Markdown links to shortcut reference links.",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )

    @app.command(epilog=EXAMPLES)
    def reflink_cmd(
        files: list[str] | None = typer.Argument(
            None,
            metavar="[FILE]",
            help="Markdown file to process; omit or use '-' to read standard input",
            show_default=False,
        ),
        write_in_place: bool = typer.Option(
            False, "--write-in-place", "-w", help="Overwrite FILE instead of printing to standard output"
        ),
        stats: bool = typer.Option(False, "--stats", help="Print statistics to standard error"),
        column_width: int | None = typer.Option(
            None, "--column-width", help="Wrap long link text so references stay within this column"
        ),
        version: bool = typer.Option(  # noqa: ARG001
            False, "--version", "-v", callback=_version_callback, is_eager=True, help="Show the version and exit"
        ),
    ) -> None:
        """Rewrite [text](url) links as [text] plus [text]: url definitions.

        Definitions are placed at the end of the section where a link is first
        used. Link texts used with different URLs stay inline.
        """
        display = CLIDisplay()

        paths = files or []
        if len(paths) > 1:
            _fail(display, "Only one file may be specified.")
        path = paths[0] if paths and paths[0] != "-" else None
        if write_in_place and path is None:
            _fail(display, "The -w flag cannot be used with standard input.")

        try:
            text = sys.stdin.read() if path is None else Path(path).read_text(encoding="utf-8")
        except FileNotFoundError:
            _fail(display, f"File not found at '{path}'.")
        except OSError as exc:
            _fail(display, f"Cannot read '{path}': {exc}")

        result = cmd_reflink(text, column_width=column_width, path=path, write_in_place=write_in_place)
        logger.debug(result.announce)
        for progress, message in result.run():
            logger.debug(f"{message} ({progress:.0%})")

        output = result.output
        if not result.success:
            for error in output["errors"]:
                display.error(error)
            raise typer.Exit(1)

        logger.info(result.result)
        for warning in output["warnings"]:
            display.warning(warning)
        if not write_in_place:
            typer.echo(output["markdown"], nl=False)
        if stats:
            display.info(f"Links converted: {output['links_converted']}")
            display.info(f"Conflicts found: {output['conflicts_found']}")
            display.info(f"Definitions added: {output['definitions_added']}")

    return app
