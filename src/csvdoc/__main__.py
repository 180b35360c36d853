"""Entry point for ``python -m csvdoc``."""

import sys

from csvdoc.cli import main

if __name__ == "__main__":
    sys.exit(main())
