#!/usr/bin/env python3
"""
Run pylint over the grab package and its tests.

Usage:
    python scripts/lint.py [PYLINT_ARGS...]

Extra arguments are passed to pylint, e.g. --disable=missing-docstring
"""

import subprocess
import sys
from pathlib import Path

TARGETS = ("grab", "tests")


def build_command(project_root: Path, extra_args: list[str]) -> list[str]:
    targets = [str(project_root / target) for target in TARGETS if (project_root / target).is_dir()]
    return [sys.executable, "-m", "pylint", *targets, "--output-format=colorized", *extra_args]


def main() -> int:
    project_root = Path(__file__).resolve().parent.parent
    cmd = build_command(project_root, sys.argv[1:])
    print(f"$ {' '.join(cmd)}")
    try:
        return subprocess.run(cmd, cwd=project_root, check=False).returncode
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
