# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Tensorlab — Tensor Programming Toolkit                              ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""
Tensorlab — small tensor-programming toolkit on top of NumPy.

A minimal dense :class:`Tensor` (construction, element access, element-wise
expressions, reductions, reshape, broadcast, convolution) plus two routines
built on it: a numerically stable depth-axis softmax and a momentum
gradient accumulator.

Usage::

    import tensorlab as tl
    import tensorlab.nn.functional as F
    from tensorlab.optim import Momentum

    probs = F.softmax(tl.rand(2, 4, 3))
    step = Momentum(beta=0.7).update([1., 0., 1.])
"""
from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Pictofeed, LLC"

# ── Core tensor class & factory functions ──
from .tensor import (
    Tensor,
    tensor,
    zeros, zeros_like,
    ones,
    full,
    rand, randn,
    arange,
    from_buffer,
    matmul, convolve, exp,
    equal, allclose,
    manual_seed,
)

# ── Dtype constants ──
from .dtype import (
    dtype,
    float32, float64, double,
    int32, int64, long,
)
# Override bool carefully (don't shadow builtin at module level for internal use)
from .dtype import bool as bool

from . import config
from .errors import PreconditionViolation

# ── Sub-packages ──
from . import nn
from . import optim
from . import numeric

__all__ = [
    "__version__",
    "__author__",

    # Tensor
    'Tensor', 'tensor',
    'zeros', 'zeros_like', 'ones', 'full',
    'rand', 'randn', 'arange', 'from_buffer',
    'matmul', 'convolve', 'exp', 'equal', 'allclose',
    'manual_seed',
    # Dtypes
    'dtype', 'float32', 'float64', 'double',
    'int32', 'int64', 'long', 'bool',
    # Config & errors
    'config', 'PreconditionViolation',
    # Sub-packages
    'nn', 'optim', 'numeric',
]
