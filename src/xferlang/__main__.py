"""Allow ``python -m xferlang``."""

import sys

from xferlang.cli import main

if __name__ == "__main__":
    sys.exit(main())
