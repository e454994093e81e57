"""Allow ``python -m visiontac`` to summarize track-log files."""

from __future__ import annotations

import sys

from visiontac.cli import main

if __name__ == "__main__":
    sys.exit(main())
