#!/usr/bin/env python3
"""Keep modules small: warn past a soft cap, fail past a hard cap.

Caps count lines of code (blank and comment-only lines excluded):
    Source (src/skillmem/**/*.py): soft 300, hard 500
    Tests  (tests/**/*.py):        soft 400, hard 700
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, TypeAlias

Level: TypeAlias = Literal["warning", "error"]


@dataclass(frozen=True)
class SizeCap:
    label: str
    relative_dir: str
    soft: int
    hard: int


@dataclass(frozen=True)
class Violation:
    level: Level
    label: str
    path: Path
    loc: int
    cap: int

    def render(self) -> str:
        kind = "HARD-CAP" if self.level == "error" else "SOFT-CAP"
        return f"{kind}  {self.label} {self.path}: {self.loc} LOC (cap {self.cap})"


CAPS: tuple[SizeCap, ...] = (
    SizeCap(label="src", relative_dir="src/skillmem", soft=300, hard=500),
    SizeCap(label="test", relative_dir="tests", soft=400, hard=700),
)


def count_loc(path: Path) -> int:
    return sum(
        1
        for line in path.read_text(encoding="utf-8").splitlines()
        if line.strip() and not line.strip().startswith("#")
    )


def find_violations(repo_root: Path, caps: tuple[SizeCap, ...] = CAPS) -> list[Violation]:
    """Return every module under the capped directories that exceeds its soft or hard cap."""
    violations: list[Violation] = []
    for cap in caps:
        directory = repo_root / cap.relative_dir
        if not directory.is_dir():
            continue
        for module in sorted(directory.rglob("*.py")):
            if module.name == "__init__.py":
                continue
            loc = count_loc(module)
            relative = module.relative_to(repo_root)
            if loc > cap.hard:
                violations.append(Violation("error", cap.label, relative, loc, cap.hard))
            elif loc > cap.soft:
                violations.append(Violation("warning", cap.label, relative, loc, cap.soft))
    return violations


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--root",
        type=Path,
        default=Path(__file__).resolve().parent.parent,
        help="Repository root (default: parent of scripts/)",
    )
    args = parser.parse_args(argv)

    violations = find_violations(args.root)
    errors = [violation for violation in violations if violation.level == "error"]
    for violation in violations:
        prefix = "ERROR:  " if violation.level == "error" else "WARNING:"
        print(f"{prefix} {violation.render()}")

    if errors:
        print(f"\n{len(errors)} hard-cap violation(s) found.")
        return 1
    if violations:
        print(f"\n{len(violations)} soft-cap warning(s) (no hard-cap violations).")
    else:
        print("All files within size caps.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
