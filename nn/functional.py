# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Tensorlab — Tensor Programming Toolkit                              ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""tensorlab.nn.functional — stateless tensor functions."""
from __future__ import annotations

import logging

import numpy as np

from ..tensor import Tensor

logger = logging.getLogger(__name__)

# Axis that softmax normalises over in a [batches, instances, depth] tensor.
DEPTH_DIM = 2


# ──────────────────────── Softmax ─────────────────────────────────────

def softmax(z: Tensor) -> Tensor:
    """Numerically stable softmax over the depth axis of a rank-3 tensor.

    ``z`` is shaped ``[batches, instances_per_batch, instance_length]``.
    Every ``(batch, instance)`` row is normalised on its own: the row
    maximum is subtracted before exponentiation so the largest exponent is
    ``exp(0)``, then each row is divided by its sum.

    Non-finite inputs are not rejected; a row containing ``NaN`` (or only
    ``-inf``) comes out as ``NaN``.
    """
    if z.ndim != 3:
        raise ValueError(
            f"softmax expects a [batches, instances, depth] tensor, got shape {z.shape}")
    batches, instances_per_batch, instance_length = z.shape
    if instance_length == 0:
        # Empty depth slices have no maximum to subtract.
        return z.clone()

    if not np.isfinite(z._data).all():
        logger.warning("softmax input of shape %s contains non-finite values", z.shape)

    reshape_dim = (batches, instances_per_batch, 1)
    bcast = (1, 1, instance_length)

    z_max = z.max(dim=DEPTH_DIM)
    max_values = z_max.reshape(reshape_dim).broadcast(bcast)

    with np.errstate(invalid='ignore'):
        diff = z - max_values
        expo = diff.exp()
        expo_sums = expo.sum(dim=DEPTH_DIM)
        sums = expo_sums.reshape(reshape_dim).broadcast(bcast)
        return expo / sums
