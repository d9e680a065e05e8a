"""Allow running gitversion as ``python -m gitversion``."""

import sys

from gitversion.cli import main

if __name__ == "__main__":
	sys.exit(main())
