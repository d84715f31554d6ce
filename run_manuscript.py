#!/usr/bin/env python3
"""Command-line runner for a manuscript build without installing the package."""

import os
import sys

# Add the src directory to the path so we can import our package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "src")))

from manuscript.main import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
