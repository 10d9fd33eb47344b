# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Tensorlab — Tensor Programming Toolkit                              ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Momentum accumulator — exponentially weighted sum of gradients."""
from __future__ import annotations

import logging
import numpy as np
from typing import Sequence

from ..errors import PreconditionViolation
from ..tensor import Tensor

logger = logging.getLogger(__name__)


class Momentum:
    """Turns raw gradients into momentum-adjusted weight updates.

    Keeps one velocity vector ``V``.  Each call to :meth:`update` does::

        V[k] = beta * V[k] + gradient[k]

    and returns a copy of ``V``.  ``V`` is created (all zeros) on the first
    call and takes that gradient's length; every later gradient must have
    the same length.

    An instance is not safe to update from several threads at once.
    """

    def __init__(self, beta: float = 0.7):
        self.beta = _check_beta(beta)
        self._v: np.ndarray | None = None
        self._step = 0

    @property
    def steps(self) -> int:
        return self._step

    @property
    def state(self) -> list[float]:
        if self._v is None:
            return []
        return self._v.tolist()

    def update(self, gradient: Sequence[float] | np.ndarray | Tensor) -> list[float]:
        grad = _as_vector(gradient)
        if self._v is None:
            self._v = np.zeros(grad.shape[0], dtype=np.float64)
            logger.debug("momentum state initialised with length %d", grad.shape[0])
        elif grad.shape[0] != self._v.shape[0]:
            raise PreconditionViolation(
                f"Expected gradient of length {self._v.shape[0]}, got {grad.shape[0]}")

        self._v *= self.beta
        self._v += grad
        self._step += 1
        return self._v.tolist()

    __call__ = update

    def reset(self) -> None:
        self._v = None
        self._step = 0
        logger.debug("momentum state reset")

    def state_dict(self) -> dict:
        return {
            'state': {
                'step': self._step,
                'v': None if self._v is None else self._v.copy(),
            },
            'beta': self.beta,
        }

    def load_state_dict(self, state_dict: dict):
        # Validate everything before touching the current state.
        beta = _check_beta(state_dict.get('beta', self.beta))
        st = state_dict.get('state', {})
        v = st.get('v')
        v = None if v is None else _as_vector(v).copy()
        self._v = v
        self._step = st.get('step', 0)
        self.beta = beta

    def __repr__(self) -> str:
        length = 0 if self._v is None else self._v.shape[0]
        return f"Momentum(beta={self.beta}, length={length}, steps={self._step})"


def _check_beta(beta: float) -> float:
    if not 0.0 <= beta < 1.0:
        raise ValueError(f"beta must be in [0, 1), got {beta}")
    return beta


def _as_vector(gradient) -> np.ndarray:
    if isinstance(gradient, Tensor):
        gradient = gradient._data
    grad = np.asarray(gradient, dtype=np.float64)
    if grad.ndim != 1:
        raise PreconditionViolation(
            f"Expected a 1-D gradient, got shape {grad.shape}")
    return grad
