# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Tensorlab — Tensor Programming Toolkit                              ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Core Tensor class backed by NumPy."""
from __future__ import annotations

import math
import numpy as np
from typing import Any, Callable, Sequence

from .config import config as _config
from .dtype import dtype as Dtype


class Tensor:
    """Dense N-dimensional array with a fixed shape and mutable contents.

    Wraps a :class:`numpy.ndarray`.  Every operation that produces a new
    shape (reduction, reshape, broadcast, shuffle) returns a new tensor;
    the in-place methods (``set_constant``, ``set_values``, ``add_`` ...)
    only ever change element values.
    """

    __slots__ = ('_data', '_version')

    # ------------------------------------------------------------------ #
    #  Construction                                                      #
    # ------------------------------------------------------------------ #

    def __init__(self, data: Any, dtype: Dtype | np.dtype | None = None):
        if isinstance(data, Tensor):
            arr = data._data.copy()
        elif isinstance(data, np.ndarray):
            arr = data
        else:
            arr = np.asarray(data)

        if dtype is not None:
            if isinstance(dtype, Dtype):
                arr = arr.astype(dtype.to_numpy())
            else:
                arr = arr.astype(dtype)

        self._data: np.ndarray = arr
        self._version: int = 0

    # ------------------------------------------------------------------ #
    #  Properties                                                        #
    # ------------------------------------------------------------------ #

    @property
    def shape(self) -> tuple:
        return self._data.shape

    @property
    def ndim(self) -> int:
        return self._data.ndim

    @property
    def dtype(self) -> Dtype:
        return Dtype.from_numpy(self._data.dtype)

    # ------------------------------------------------------------------ #
    #  Basic info methods                                                 #
    # ------------------------------------------------------------------ #

    def size(self, dim: int | None = None):
        s = self.shape
        if dim is not None:
            return s[dim]
        return s

    def dim(self) -> int:
        return self.ndim

    def numel(self) -> int:
        return self._data.size

    def item(self) -> float | int:
        return self._data.item()

    def __len__(self) -> int:
        return self.shape[0]

    def __repr__(self) -> str:
        return "tensor(" + repr(self._data) + ")"

    def __str__(self) -> str:
        return str(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __int__(self) -> int:
        return int(self._data)

    def __float__(self) -> float:
        return float(self._data)

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self._data
        return self._data.astype(dtype)

    def __reduce__(self):
        return (Tensor, (self._data,))

    @staticmethod
    def _wrap(data: np.ndarray) -> 'Tensor':
        t = Tensor.__new__(Tensor)
        if isinstance(data, np.generic):
            data = np.array(data)
        t._data = data
        t._version = 0
        return t

    # ------------------------------------------------------------------ #
    #  Arithmetic operators                                               #
    # ------------------------------------------------------------------ #

    def __add__(self, other):
        return Tensor._wrap(self._data + _unwrap(other))

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        return Tensor._wrap(self._data - _unwrap(other))

    def __rsub__(self, other):
        return Tensor._wrap(_unwrap(other) - self._data)

    def __mul__(self, other):
        return Tensor._wrap(self._data * _unwrap(other))

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        return Tensor._wrap(self._data / _unwrap(other))

    def __rtruediv__(self, other):
        return Tensor._wrap(_unwrap(other) / self._data)

    def __neg__(self):
        return Tensor._wrap(-self._data)

    def __pow__(self, other):
        return Tensor._wrap(np.power(self._data, _unwrap(other)))

    def __rpow__(self, other):
        return Tensor._wrap(np.power(_unwrap(other), self._data))

    def __matmul__(self, other):
        return matmul(self, other)

    # Comparison operators (element-wise, like NumPy)
    def __gt__(self, other):
        return Tensor._wrap(self._data > _unwrap(other))

    def __ge__(self, other):
        return Tensor._wrap(self._data >= _unwrap(other))

    def __lt__(self, other):
        return Tensor._wrap(self._data < _unwrap(other))

    def __le__(self, other):
        return Tensor._wrap(self._data <= _unwrap(other))

    def __eq__(self, other):
        return Tensor._wrap(self._data == _unwrap(other))

    def __ne__(self, other):
        return Tensor._wrap(self._data != _unwrap(other))

    __hash__ = None

    # Indexing
    def __getitem__(self, key):
        result = self._data[_unwrap_key(key)]
        if isinstance(result, np.generic):
            return result.item()
        return Tensor._wrap(result)

    def __setitem__(self, key, value):
        self._data[_unwrap_key(key)] = _unwrap(value)
        self._version += 1

    # ------------------------------------------------------------------ #
    #  Element-wise math                                                  #
    # ------------------------------------------------------------------ #

    def exp(self) -> 'Tensor':
        return Tensor._wrap(np.exp(self._data))

    def log(self) -> 'Tensor':
        return Tensor._wrap(np.log(self._data))

    def sqrt(self) -> 'Tensor':
        return Tensor._wrap(np.sqrt(self._data))

    def sin(self) -> 'Tensor':
        return Tensor._wrap(np.sin(self._data))

    def cos(self) -> 'Tensor':
        return Tensor._wrap(np.cos(self._data))

    def abs(self) -> 'Tensor':
        return Tensor._wrap(np.abs(self._data))

    def pow(self, exp) -> 'Tensor':
        return self.__pow__(exp)

    def matmul(self, other: 'Tensor') -> 'Tensor':
        return matmul(self, other)

    def unary_expr(self, fn: Callable) -> 'Tensor':
        """Apply ``fn`` to every element.

        NumPy ufuncs and array-aware callables run vectorised.  Plain scalar
        callables (e.g. ``math.cos``) are retried element by element.
        """
        try:
            result = np.asarray(fn(self._data))
            if result.shape != self.shape:
                raise ValueError
        except (TypeError, ValueError):
            result = np.vectorize(fn)(self._data)
        return Tensor._wrap(_match_float(result, self._data))

    def binary_expr(self, other, fn: Callable) -> 'Tensor':
        """Combine ``self`` and ``other`` element by element with ``fn(a, b)``."""
        b = _unwrap(other)
        try:
            result = np.asarray(fn(self._data, b))
            if result.shape != np.broadcast_shapes(self.shape, np.shape(b)):
                raise ValueError
        except (TypeError, ValueError):
            result = np.vectorize(fn)(self._data, b)
        return Tensor._wrap(_match_float(result, self._data))

    # ---- Reduction methods ----

    def _reduce(self, np_fn, dim, keepdim: bool) -> 'Tensor':
        axis = tuple(dim) if isinstance(dim, (list, tuple)) else dim
        return Tensor._wrap(np_fn(self._data, axis=axis, keepdims=keepdim))

    def sum(self, dim=None, keepdim=False) -> 'Tensor':
        return self._reduce(np.sum, dim, keepdim)

    def max(self, dim=None, keepdim=False) -> 'Tensor':
        return self._reduce(np.max, dim, keepdim)

    def min(self, dim=None, keepdim=False) -> 'Tensor':
        return self._reduce(np.min, dim, keepdim)

    def mean(self, dim=None, keepdim=False) -> 'Tensor':
        return self._reduce(np.mean, dim, keepdim)

    def prod(self, dim=None, keepdim=False) -> 'Tensor':
        return self._reduce(np.prod, dim, keepdim)

    # Eigen-flavoured aliases
    maximum = max
    minimum = min

    # ---- Shape methods ----

    def reshape(self, *shape) -> 'Tensor':
        if len(shape) == 1 and isinstance(shape[0], (tuple, list)):
            shape = tuple(shape[0])
        if -1 not in shape and math.prod(shape) != self.numel():
            raise ValueError(
                f"Cannot reshape tensor of shape {self.shape} "
                f"({self.numel()} elements) into {tuple(shape)}")
        return Tensor._wrap(self._data.reshape(shape))

    def view(self, *shape) -> 'Tensor':
        return self.reshape(*shape)

    def broadcast(self, *factors) -> 'Tensor':
        """Replicate the tensor ``factors[i]`` times along axis ``i``.

        A ``[2, 3, 1]`` tensor broadcast by ``(1, 1, 4)`` becomes
        ``[2, 3, 4]``.
        """
        if len(factors) == 1 and isinstance(factors[0], (tuple, list)):
            factors = tuple(factors[0])
        if len(factors) != self.ndim:
            raise ValueError(
                f"Expected {self.ndim} broadcast factors, got {len(factors)}")
        if any(int(f) < 1 for f in factors):
            raise ValueError(f"Broadcast factors must be >= 1, got {tuple(factors)}")
        return Tensor._wrap(np.tile(self._data, factors))

    def expand(self, *sizes) -> 'Tensor':
        """Replicate size-1 axes so the tensor takes the shape ``sizes``."""
        if len(sizes) == 1 and isinstance(sizes[0], (tuple, list)):
            sizes = tuple(sizes[0])
        try:
            expanded = np.broadcast_to(self._data, sizes)
        except ValueError:
            raise ValueError(
                f"Cannot expand tensor of shape {self.shape} to {tuple(sizes)}") from None
        return Tensor._wrap(expanded.copy())

    def shuffle(self, *dims) -> 'Tensor':
        """Reorder axes: output axis ``i`` is input axis ``dims[i]``."""
        if len(dims) == 1 and isinstance(dims[0], (tuple, list)):
            dims = tuple(dims[0])
        return Tensor._wrap(np.transpose(self._data, dims))

    permute = shuffle

    def transpose(self, dim0: int = 0, dim1: int = 1) -> 'Tensor':
        return Tensor._wrap(np.swapaxes(self._data, dim0, dim1))

    @property
    def T(self) -> 'Tensor':
        return Tensor._wrap(self._data.T)

    def flatten(self) -> 'Tensor':
        return Tensor._wrap(self._data.reshape(-1))

    # ---- In-place operations ----

    def set_constant(self, value) -> 'Tensor':
        self._data.fill(value)
        self._version += 1
        return self

    fill_ = set_constant

    def set_values(self, values) -> 'Tensor':
        """Write nested ``values`` into the leading corner of the tensor.

        ``values`` may be smaller than the tensor along any axis; elements
        it does not cover are left as they were.
        """
        src = np.asarray(_unwrap(values))
        if src.ndim != self.ndim:
            raise ValueError(
                f"Expected values of rank {self.ndim}, got rank {src.ndim}")
        if any(s > d for s, d in zip(src.shape, self.shape)):
            raise ValueError(
                f"Values of shape {src.shape} do not fit in tensor of shape {self.shape}")
        self._data[tuple(slice(0, s) for s in src.shape)] = src
        self._version += 1
        return self

    def set_random(self) -> 'Tensor':
        """Fill with uniform samples from ``[0, 1)``."""
        sample = _config.generator.random(self.shape)
        self._data[...] = sample.astype(self._data.dtype, copy=False)
        self._version += 1
        return self

    def zero_(self) -> 'Tensor':
        return self.set_constant(0)

    def copy_(self, src) -> 'Tensor':
        np.copyto(self._data, _unwrap(src))
        self._version += 1
        return self

    def add_(self, other, alpha: float = 1.0) -> 'Tensor':
        self._data += alpha * _unwrap(other)
        self._version += 1
        return self

    def mul_(self, other) -> 'Tensor':
        self._data *= _unwrap(other)
        self._version += 1
        return self

    # ---- Conversion ----

    def numpy(self) -> np.ndarray:
        return self._data.copy()

    def tolist(self):
        return self._data.tolist()

    def clone(self) -> 'Tensor':
        return Tensor._wrap(self._data.copy())

    def astype(self, dtype) -> 'Tensor':
        return Tensor._wrap(self._data.astype(_resolve_dtype(dtype)))

    def float(self) -> 'Tensor':
        return Tensor._wrap(self._data.astype(np.float32))

    def double(self) -> 'Tensor':
        return Tensor._wrap(self._data.astype(np.float64))


# ====================================================================
# Module-level factory functions
# ====================================================================

def _resolve_dtype(dtype) -> np.dtype:
    if dtype is None:
        return _config.default_dtype.to_numpy()
    if isinstance(dtype, Dtype):
        return dtype.to_numpy()
    return np.dtype(dtype)


def _size_args(size) -> tuple:
    if len(size) == 1 and isinstance(size[0], (tuple, list)):
        return tuple(size[0])
    return tuple(size)


def tensor(data, dtype=None) -> Tensor:
    if dtype is None and isinstance(data, (Tensor, np.ndarray)):
        return Tensor(data)
    return Tensor(data, _resolve_dtype(dtype))


def zeros(*size, dtype=None) -> Tensor:
    return Tensor._wrap(np.zeros(_size_args(size), dtype=_resolve_dtype(dtype)))


def zeros_like(input: Tensor, dtype=None) -> Tensor:
    dt = _resolve_dtype(dtype) if dtype is not None else input._data.dtype
    return Tensor._wrap(np.zeros(input.shape, dtype=dt))


def ones(*size, dtype=None) -> Tensor:
    return Tensor._wrap(np.ones(_size_args(size), dtype=_resolve_dtype(dtype)))


def full(size, fill_value, dtype=None) -> Tensor:
    if isinstance(size, int):
        size = (size,)
    return Tensor._wrap(np.full(tuple(size), fill_value, dtype=_resolve_dtype(dtype)))


def rand(*size, dtype=None) -> Tensor:
    arr = _config.generator.random(_size_args(size))
    return Tensor._wrap(arr.astype(_resolve_dtype(dtype)))


def randn(*size, dtype=None) -> Tensor:
    arr = _config.generator.standard_normal(_size_args(size))
    return Tensor._wrap(arr.astype(_resolve_dtype(dtype)))


def arange(*args, dtype=None) -> Tensor:
    return Tensor._wrap(np.arange(*args, dtype=_resolve_dtype(dtype)))


def from_buffer(storage, *shape, dtype=None) -> Tensor:
    """Build a tensor that aliases ``storage`` instead of copying it.

    ``storage`` is a NumPy array or any writable buffer-protocol object
    (``array.array``, ``bytearray`` ...).  Elements are laid out row-major
    in ``shape``.  Writes through the tensor show up in ``storage`` and
    vice versa; the tensor never owns the memory.
    """
    shape = _size_args(shape)
    if memoryview(storage).readonly:
        raise ValueError(
            f"from_buffer requires writable storage, got read-only {type(storage).__name__}")
    if isinstance(storage, np.ndarray):
        flat = storage.reshape(-1)
        if not np.shares_memory(flat, storage):
            raise ValueError("from_buffer requires contiguous storage")
        if dtype is not None:
            flat = flat.view(_resolve_dtype(dtype))
    else:
        if dtype is None:
            fmt = getattr(storage, 'typecode', None)
            dt = np.dtype(fmt) if fmt else _resolve_dtype(None)
        else:
            dt = _resolve_dtype(dtype)
        flat = np.frombuffer(storage, dtype=dt)
    if math.prod(shape) != flat.size:
        raise ValueError(
            f"Storage holds {flat.size} elements, cannot view it as {shape}")
    return Tensor._wrap(flat.reshape(shape))


# ====================================================================
# Tensor operations
# ====================================================================

def matmul(a: Tensor, b: Tensor) -> Tensor:
    return Tensor._wrap(np.matmul(_unwrap(a), _unwrap(b)))


def convolve(input: Tensor, kernel: Tensor, dims: Sequence[int]) -> Tensor:
    """Slide ``kernel`` over the axes ``dims`` of ``input`` ("valid" mode).

    The kernel is not flipped, so this is a cross-correlation, matching
    Eigen's ``Tensor::convolve``.  Each convolved axis shrinks to
    ``in - k + 1``; all other axes keep their extent and order.
    """
    x = _unwrap(input)
    k = _unwrap(kernel)
    dims = [d % x.ndim for d in dims]
    if k.ndim != len(dims):
        raise ValueError(
            f"Expected kernel of rank {len(dims)}, got rank {k.ndim}")
    if len(set(dims)) != len(dims):
        raise ValueError(f"Convolution dims must be distinct, got {dims}")
    for d, ks in zip(dims, k.shape):
        if ks > x.shape[d]:
            raise ValueError(
                f"Kernel extent {ks} exceeds input extent {x.shape[d]} on axis {d}")
    windows = np.lib.stride_tricks.sliding_window_view(x, k.shape, axis=dims)
    # Window axes are appended at the end in the order of ``dims``.
    n = k.ndim
    result = np.tensordot(windows, k, axes=(list(range(-n, 0)), list(range(n))))
    return Tensor._wrap(result.astype(np.result_type(x, k), copy=False))


def equal(a, b) -> bool:
    """True iff ``a`` and ``b`` have the same shape and the same elements."""
    return bool(np.array_equal(_unwrap(a), _unwrap(b)))


def allclose(a, b, rtol: float = 1e-5, atol: float = 1e-8) -> bool:
    x, y = np.asarray(_unwrap(a)), np.asarray(_unwrap(b))
    return x.shape == y.shape and bool(np.allclose(x, y, rtol=rtol, atol=atol))


def exp(input: Tensor) -> Tensor:
    return input.exp()


# ====================================================================
# Utility functions
# ====================================================================

def manual_seed(seed: int) -> None:
    _config.seed = seed


def _unwrap(x):
    if isinstance(x, Tensor):
        return x._data
    return x


def _unwrap_key(key):
    if isinstance(key, Tensor):
        return key._data
    if isinstance(key, tuple):
        return tuple(_unwrap(k) for k in key)
    return key


def _match_float(result: np.ndarray, like: np.ndarray) -> np.ndarray:
    # Float inputs keep their precision; integer inputs may promote.
    if np.issubdtype(like.dtype, np.floating) and np.issubdtype(result.dtype, np.number):
        return result.astype(like.dtype, copy=False)
    return result
