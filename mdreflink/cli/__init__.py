"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    from mdreflink.cli._create_app import _create_app
    from mdreflink.utils.configure_logging import configure_logging

    configure_logging()

    if argv is None:
        argv = sys.argv[1:]

    app = _create_app()
    try:
        app(argv, prog_name="mdreflink")
    except SystemExit as e:
        # Standalone mode reports usage errors itself and always exits.
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    return 0
