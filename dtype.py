# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Tensorlab — Tensor Programming Toolkit                              ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Element types understood by :class:`tensorlab.Tensor`."""
from __future__ import annotations

import enum
import numpy as np


class dtype(enum.Enum):
    """Tensorlab data types — thin names over NumPy dtypes."""
    float32 = "float32"
    float64 = "float64"
    int32 = "int32"
    int64 = "int64"
    bool = "bool"

    def to_numpy(self) -> np.dtype:
        """Convert to numpy dtype."""
        _map = {
            dtype.float32: np.float32,
            dtype.float64: np.float64,
            dtype.int32: np.int32,
            dtype.int64: np.int64,
            dtype.bool: np.bool_,
        }
        return np.dtype(_map[self])

    @staticmethod
    def from_numpy(np_dtype: np.dtype) -> 'dtype':
        """Convert numpy dtype to tensorlab dtype.

        NumPy types with no tensorlab name (``float16``, ``uint8``, ``int8``
        ...) report as ``float64``.  Only the reported name falls back; the
        wrapped array keeps its real NumPy dtype.
        """
        _map = {
            np.dtype(np.float32): dtype.float32,
            np.dtype(np.float64): dtype.float64,
            np.dtype(np.int32): dtype.int32,
            np.dtype(np.int64): dtype.int64,
            np.dtype(np.bool_): dtype.bool,
        }
        return _map.get(np.dtype(np_dtype), dtype.float64)

    @staticmethod
    def parse(name: str) -> 'dtype':
        """Look up a dtype by name, e.g. ``'float32'``."""
        try:
            return dtype(name.strip().lower())
        except ValueError:
            valid = ', '.join(d.value for d in dtype)
            raise ValueError(f"Unknown dtype {name!r}; expected one of: {valid}") from None

    def __repr__(self) -> str:
        return f"tensorlab.{self.name}"


# Convenience aliases (tensorlab.float32, tensorlab.long, etc.)
float32 = dtype.float32
float64 = dtype.float64
double = dtype.float64
int32 = dtype.int32
int64 = dtype.int64
long = dtype.int64
bool = dtype.bool
