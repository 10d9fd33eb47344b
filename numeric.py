# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Tensorlab — Tensor Programming Toolkit                              ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Sequence-level numeric helpers: folds, inner product, transform."""
from __future__ import annotations

import functools
import itertools
import operator
from typing import Callable, Iterable, Sequence

from .errors import PreconditionViolation


def inner_product(x: Sequence[float], y: Sequence[float],
                  init: float = 0.0) -> float:
    """``init + sum(x[k] * y[k])``.  Both sequences must be the same length."""
    if len(x) != len(y):
        raise PreconditionViolation(
            f"inner_product needs equal lengths, got {len(x)} and {len(y)}")
    return accumulate(map(operator.mul, x, y), init)


def accumulate(values: Iterable[float], init: float = 0.0,
               op: Callable[[float, float], float] = operator.add) -> float:
    """Left fold: ``op(...op(op(init, v0), v1)..., vn)``."""
    total = init
    for v in values:
        total = op(total, v)
    return total


def product(values: Iterable[float]) -> float:
    return accumulate(values, 1.0, operator.mul)


def reduce(values: Iterable[float], init: float,
           op: Callable[[float, float], float] = operator.add) -> float:
    """Fold with an associative ``op``; grouping is unspecified."""
    return functools.reduce(op, values, init)


def running(values: Iterable[float],
            op: Callable[[float, float], float] = operator.add) -> list[float]:
    """Prefix folds (``[v0, op(v0, v1), ...]``)."""
    return list(itertools.accumulate(values, op))


def square(x: float) -> float:
    return x * x


def transform(values: Iterable[float], fn: Callable[[float], float] = square) -> list[float]:
    return [fn(v) for v in values]


COMPARATORS: dict[str, Callable[[float, float], bool]] = {
    'less': operator.lt,
    'less_equal': operator.le,
    'greater': operator.gt,
    'greater_equal': operator.ge,
}


def compare_all(x: float, y: float) -> dict[str, bool]:
    return {name: cmp(x, y) for name, cmp in COMPARATORS.items()}
