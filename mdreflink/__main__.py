"""Entry point for ``python -m mdreflink``."""

import sys

from mdreflink.cli import main

if __name__ == "__main__":
    sys.exit(main())
