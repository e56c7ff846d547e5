#!/usr/bin/env python3
# Copyright 2026 Vilex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the local CI pipeline for vilex: format, lint, tests, and build."""

import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["ruff", "format", "--check", "src/", "tests/"]),
    ("Lint", ["ruff", "check", "src/", "tests/"]),
    ("Tests", ["pytest", "--cov=vilex", "--cov-report=term-missing"]),
    ("Build", [sys.executable, "-m", "build"]),
]


def main() -> int:
    """Run every CI step, print a summary, and return the exit status."""
    results: list[tuple[str, bool, float]] = []
    for name, cmd in STEPS:
        _print_banner(name)
        start = time.monotonic()
        proc = subprocess.run(cmd, cwd=_REPO_ROOT)
        results.append((name, proc.returncode == 0, time.monotonic() - start))

    _print_banner("Summary")
    for name, passed, elapsed in results:
        paint = chalk.green if passed else chalk.red
        status = "PASS" if passed else "FAIL"
        print(paint(f"  {status}  {name} ({elapsed:.1f}s)"))
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################

_REPO_ROOT = Path(__file__).resolve().parent.parent


def _print_banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue(f"  {title}"))
    print(sep)


if __name__ == "__main__":
    sys.exit(main())
