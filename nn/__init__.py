# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Tensorlab — Tensor Programming Toolkit                              ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""tensorlab.nn — neural-network building blocks."""
from __future__ import annotations

# Functional API (accessible as nn.functional or F)
from . import functional
from .functional import softmax

__all__ = ['functional', 'softmax']
