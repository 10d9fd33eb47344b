# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Tensorlab — Tensor Programming Toolkit                              ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""tensorlab.config — process-wide settings.

Two knobs, both readable from the environment at import time:

    TENSORLAB_DEFAULT_DTYPE   — dtype for factory functions (default float32)
    TENSORLAB_SEED            — integer seed for the random generator

Change them at runtime through the ``config`` singleton::

    from tensorlab.config import config
    config.default_dtype = tensorlab.float64
    config.seed = 42
"""
from __future__ import annotations

import logging
import os

import numpy as np

from .dtype import dtype as Dtype

logger = logging.getLogger(__name__)


def _env_dtype() -> Dtype:
    raw = os.environ.get('TENSORLAB_DEFAULT_DTYPE', '')
    if not raw:
        return Dtype.float32
    return Dtype.parse(raw)


def _env_seed() -> int | None:
    raw = os.environ.get('TENSORLAB_SEED', '').strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"TENSORLAB_SEED must be an integer, got {raw!r}") from None


class _TensorlabConfig:
    """Module-level configuration singleton."""
    __slots__ = ('_default_dtype', '_seed', '_generator')

    def __init__(self, default_dtype: Dtype = Dtype.float32,
                 seed: int | None = None):
        self._default_dtype = default_dtype
        self._seed = seed
        self._generator = np.random.default_rng(seed)

    # ── default_dtype ──
    @property
    def default_dtype(self) -> Dtype:
        return self._default_dtype

    @default_dtype.setter
    def default_dtype(self, value: Dtype | str):
        if isinstance(value, str):
            value = Dtype.parse(value)
        if not isinstance(value, Dtype):
            raise TypeError(f"default_dtype must be a tensorlab dtype, got {type(value).__name__}")
        self._default_dtype = value

    # ── seed ──
    @property
    def seed(self) -> int | None:
        return self._seed

    @seed.setter
    def seed(self, value: int | None):
        self._seed = value
        self._generator = np.random.default_rng(value)
        logger.debug("random generator reseeded with %r", value)

    # ── generator ──
    @property
    def generator(self) -> np.random.Generator:
        return self._generator

    def __repr__(self) -> str:
        return (f"TensorlabConfig(default_dtype={self._default_dtype!r}, "
                f"seed={self._seed!r})")


config = _TensorlabConfig(_env_dtype(), _env_seed())
