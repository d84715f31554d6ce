#!/usr/bin/env python3
"""Format and lint the manuscript sources with Ruff (settings in ruff.toml)."""

import argparse
import glob
import os
import subprocess
import sys
from typing import List

DEFAULT_PATHS = ["src", "tests", "run_manuscript.py", "run_tests.py", "setup.py", "lint.py"]


def collect_python_files(paths: List[str]) -> List[str]:
    """Expand directories and glob patterns into a sorted list of .py files."""
    found = []
    for path in paths:
        if os.path.isdir(path):
            found.extend(glob.glob(os.path.join(path, "**", "*.py"), recursive=True))
        else:
            found.extend(glob.glob(path, recursive=True))
    return sorted({f for f in found if os.path.isfile(f) and f.endswith(".py")})


def run_ruff(command: List[str]) -> int:
    print(f"Running: {' '.join(command)}")
    result = subprocess.run(command, capture_output=True, text=True)
    if result.stdout:
        print(result.stdout)
    if result.stderr:
        print(result.stderr, file=sys.stderr)
    return result.returncode


def main():
    """Parse arguments, then run ruff format followed by ruff check --fix."""
    parser = argparse.ArgumentParser(description="Run Ruff formatter and linter on the codebase")
    parser.add_argument(
        "--paths", nargs="+", default=DEFAULT_PATHS, help="Files, directories or globs to lint"
    )
    parser.add_argument(
        "--statistics", action="store_true", help="Show statistics during check phase"
    )
    args = parser.parse_args()

    files = collect_python_files(args.paths)
    if not files:
        print("No Python files found to format or lint.")
        return 0

    print("\n--- Ruff format ---")
    if run_ruff(["ruff", "format"] + files) != 0:
        # Formatting problems still get reported by the check below
        print("Formatter failed.", file=sys.stderr)

    print("\n--- Ruff check ---")
    check_command = ["ruff", "check", "--fix"] + files
    if args.statistics:
        check_command.append("--statistics")
    if run_ruff(check_command) != 0:
        print("Ruff check found errors that could not be fixed.", file=sys.stderr)
        return 1

    print("Ruff format and check passed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
