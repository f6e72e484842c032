"""Allow running as ``python -m git_signing_key``."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
