"""Interpreter limits: integer text size and nesting depth.

Numbers are arbitrary precision, so decimal conversions lift CPython's
int/str digit limit while they run. Reading, evaluating and rendering recurse
once per nesting level; they run with extra recursion headroom so nesting is
bounded by NESTING_FRAMES rather than the interpreter default.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator

# Python frames available to one read/evaluate/render call
NESTING_FRAMES = 100_000


@contextmanager
def unlimited_int_digits() -> Iterator[None]:
    # set_int_max_str_digits only exists on interpreters that enforce a limit
    if not hasattr(sys, "set_int_max_str_digits"):
        yield
        return
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(0)
    try:
        yield
    finally:
        sys.set_int_max_str_digits(previous)


@contextmanager
def recursion_headroom(frames: int = NESTING_FRAMES) -> Iterator[None]:
    previous = sys.getrecursionlimit()
    if previous < frames:
        sys.setrecursionlimit(frames)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


def decimal_to_int(digits: str) -> int:
    with unlimited_int_digits():
        return int(digits)


def int_to_decimal(n: int) -> str:
    with unlimited_int_digits():
        return str(n)
