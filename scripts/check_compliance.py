"""Standalone script: Schengen compliance check for a trips CSV (see schengen.cli)."""
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from schengen.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
