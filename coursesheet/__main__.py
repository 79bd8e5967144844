"""
Package entry point.

Allows running the application via:

    python -m coursesheet

This simply forwards execution to coursesheet.cli.main().
"""

from coursesheet.cli import main

if __name__ == "__main__":
    main()
