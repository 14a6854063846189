"""Main entry point for the coffeedoc CLI."""

import sys

from coffeedoc.cli.commands import main as cli_main


def main() -> int:
    """Execute the coffeedoc CLI application.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    cli_main()
    return 0


if __name__ == "__main__":
    sys.exit(main())
