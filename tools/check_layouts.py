#!/usr/bin/env python3
"""
Check a layout fixture file against the rules engine.

The file is made of 9-line cases: a 'nofail' or 'fail' line, then an 8x8 grid
using X, O, - and the '*' move marker. Every grid is parsed with validation;
'nofail' cases must parse, 'fail' cases must be rejected.

Usage:
  python tools/check_layouts.py tests/resources/games.txt
"""
from __future__ import annotations

import os
import sys

# Ensure we can import the local package when run from a checkout
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from reversi_core.errors import ReversiError  # noqa: E402
from reversi_core.layout import iter_layout_cases, parse_game  # noqa: E402


def check(path: str) -> int:
    """Returns the number of cases whose outcome differs from the fixture's expectation."""
    with open(path, 'r', encoding='utf-8') as fh:
        text = fh.read()
    bad = 0
    total = 0
    for n, (should_fail, layout) in enumerate(iter_layout_cases(text), start=1):
        total = n
        try:
            parse_game(layout, validate=True)
            failed, reason = False, ''
        except ReversiError as exc:
            failed, reason = True, str(exc)
        ok = failed == should_fail
        status = 'ok' if ok else 'MISMATCH'
        print(f"case {n}: expected {'fail' if should_fail else 'nofail'} -> {status}" + (f" ({reason})" if reason else ''))
        if not ok:
            bad += 1
    print(f"Checked {total} cases, mismatches={bad}")
    return bad


def main() -> None:
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(2)
    sys.exit(1 if check(sys.argv[1]) else 0)


if __name__ == '__main__':
    main()
