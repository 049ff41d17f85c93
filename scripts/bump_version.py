"""Bump the pathprobe version in pyproject.toml and src/pathprobe/__init__.py.

Usage:
    uv run python scripts/bump_version.py --patch   # 0.1.0 → 0.1.1
    uv run python scripts/bump_version.py --minor   # 0.1.1 → 0.2.0
    uv run python scripts/bump_version.py --major   # 0.2.0 → 1.0.0
    uv run python scripts/bump_version.py --patch --dry-run
"""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
PYPROJECT = ROOT / "pyproject.toml"
INIT_PY = ROOT / "src" / "pathprobe" / "__init__.py"

VERSION_RE = re.compile(r'^(version\s*=\s*")(\d+\.\d+\.\d+)(")', re.MULTILINE)
INIT_VERSION_RE = re.compile(r'^(__version__\s*=\s*")(\d+\.\d+\.\d+)(")', re.MULTILINE)


def parse_version(text: str, pattern: re.Pattern[str] = VERSION_RE) -> tuple[int, int, int]:
    match = pattern.search(text)
    if match is None:
        raise ValueError("no version string found")
    major, minor, patch = (int(p) for p in match.group(2).split("."))
    return major, minor, patch


def bump(version: tuple[int, int, int], part: str) -> tuple[int, int, int]:
    major, minor, patch = version
    if part == "major":
        return major + 1, 0, 0
    if part == "minor":
        return major, minor + 1, 0
    return major, minor, patch + 1


def format_version(version: tuple[int, int, int]) -> str:
    return ".".join(str(p) for p in version)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Bump the pathprobe version")
    group = parser.add_mutually_exclusive_group(required=True)
    for part in ("major", "minor", "patch"):
        group.add_argument(f"--{part}", action="store_const", const=part, dest="part")
    parser.add_argument("--dry-run", action="store_true", help="print the new version only")
    args = parser.parse_args(argv)

    text = PYPROJECT.read_text()
    try:
        old = parse_version(text)
    except ValueError:
        print("error: could not find version in pyproject.toml", file=sys.stderr)
        return 1
    new = format_version(bump(old, args.part))

    if not args.dry_run:
        PYPROJECT.write_text(VERSION_RE.sub(rf"\g<1>{new}\3", text, count=1))
        init_text = INIT_PY.read_text()
        if INIT_VERSION_RE.search(init_text):
            INIT_PY.write_text(INIT_VERSION_RE.sub(rf"\g<1>{new}\3", init_text))
        else:
            print("warning: __version__ not found in __init__.py, skipping", file=sys.stderr)

    print(f"{format_version(old)} → {new}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
