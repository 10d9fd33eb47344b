# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Tensorlab — Tensor Programming Toolkit                              ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Exception types raised by tensorlab."""
from __future__ import annotations


class PreconditionViolation(ValueError):
    """A caller broke an input contract (e.g. inconsistent gradient length).

    Subclasses :class:`ValueError` so generic ``except ValueError`` handlers
    still catch it.
    """
