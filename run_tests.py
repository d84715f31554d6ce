#!/usr/bin/env python3
"""Lint the code base and run the manuscript test suite."""

import argparse
import os
import subprocess
import sys
import unittest


def run_lint(paths=None) -> int:
    """Run lint.py (Ruff format + check); returns its exit code."""
    print("Running Ruff (format and check)...")
    command = [sys.executable, "lint.py"]
    if paths:
        command += ["--paths"] + paths
    return subprocess.call(command)


def run_tests(verbosity=1) -> int:
    """Discover and run every test module under tests/."""
    root = os.path.dirname(os.path.abspath(__file__))
    sys.path.insert(0, os.path.join(root, "src"))

    suite = unittest.TestLoader().discover(os.path.join(root, "tests"))
    result = unittest.TextTestRunner(verbosity=verbosity).run(suite)
    return 0 if result.wasSuccessful() else 1


def parse_args():
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Run manuscript tests")
    parser.add_argument("-v", "--verbose", action="store_true", help="Increase output verbosity")
    parser.add_argument("--skip-lint", action="store_true", help="Skip linting before running tests")
    parser.add_argument("--lint-only", action="store_true", help="Run only linting, skip tests")
    parser.add_argument("--lint-paths", nargs="+", help="Specific paths to lint")
    return parser.parse_args()


def main():
    """Run linting and tests based on command-line arguments."""
    args = parse_args()

    if not args.skip_lint:
        lint_result = run_lint(args.lint_paths)
        if lint_result != 0 or args.lint_only:
            if lint_result != 0:
                print("Ruff format/check failed. Fix the issues or use --skip-lint.")
            return lint_result

    return run_tests(verbosity=2 if args.verbose else 1)


if __name__ == "__main__":
    sys.exit(main())
