"""Module entry point for running with python -m livetoc."""

import sys

from livetoc.cli import main

if __name__ == "__main__":
    sys.exit(main())
