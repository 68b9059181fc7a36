"""Allow ``python -m videosource``."""

from __future__ import annotations

import sys

from videosource.cli import main

if __name__ == "__main__":
    sys.exit(main())
