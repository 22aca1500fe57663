#!/usr/bin/env python3
"""
Runs every tutorial program and reports which ones completed.

Notes:
- Each tutorial's main() is executed in-process with the project root on
  sys.path, so the logging configured here applies to the tutorials too.
- A tutorial passes when main() returns without raising; the seeded-replay
  tutorial additionally fails if its output reports a mismatch.
"""

from __future__ import annotations

import argparse
import io
import logging
import runpy
import sys
from contextlib import redirect_stdout
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional


REPO_ROOT = Path(__file__).resolve().parents[1]
TUTORIALS_DIR = REPO_ROOT / "tutorials"
MISMATCH_MARKER = "different (uh oh, please report bug)"


@dataclass
class TutorialResult:
    name: str
    status: str  # PASS/FAIL
    error: Optional[str] = None


def find_tutorials(only: Optional[str] = None) -> List[Path]:
    paths = sorted(TUTORIALS_DIR.glob("[0-9][0-9]_*.py"))
    if only:
        paths = [p for p in paths if only in p.name]
    return paths


def run_tutorial(path: Path, verbose: bool = False) -> TutorialResult:
    logging.debug(f"Running {path.name}")
    buffer = io.StringIO()
    sys_path_added = False
    try:
        if str(REPO_ROOT) not in sys.path:
            sys.path.insert(0, str(REPO_ROOT))
            sys_path_added = True
        namespace = runpy.run_path(str(path))
        with redirect_stdout(buffer):
            namespace["main"]()
    except Exception as exc:  # noqa: BLE001 - report any tutorial failure
        return TutorialResult(path.name, "FAIL", f"{type(exc).__name__}: {exc}")
    finally:
        if sys_path_added:
            try:
                sys.path.remove(str(REPO_ROOT))
            except ValueError:
                pass
        if verbose:
            print(buffer.getvalue())
    if MISMATCH_MARKER in buffer.getvalue():
        return TutorialResult(path.name, "FAIL", "seeded runs did not replay identically")
    return TutorialResult(path.name, "PASS")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the tutorial programs")
    parser.add_argument("--only", default=None, help="Run only tutorials whose file name contains this text")
    parser.add_argument("--verbose", action="store_true", help="Echo tutorial output and enable debug logging")
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level)
    logging.getLogger().setLevel(level)

    paths = find_tutorials(args.only)
    if not paths:
        print("No tutorials matched")
        return 1

    results = [run_tutorial(p, verbose=args.verbose) for p in paths]

    print("=== Tutorial Runs ===")
    passed = sum(1 for r in results if r.status == "PASS")
    failed = sum(1 for r in results if r.status == "FAIL")
    print(f"Tutorials: PASS={passed} FAIL={failed} (total={len(results)})")
    for r in results:
        msg = f"[{r.status}] {r.name}"
        if r.error:
            msg += f": {r.error}"
        print(msg)

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
