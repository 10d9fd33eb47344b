"""Tests for the Tensor type and module-level tensor operations."""
import array
import math

import numpy as np
import pytest

import tensorlab as tl


# ── Construction ──────────────────────────────────────────────────────

def test_constant_tensor():
    t = tl.zeros(2, 3, 4, dtype=tl.int32).set_constant(42)
    assert t.shape == (2, 3, 4)
    assert t.numel() == 24
    assert t.dtype == tl.int32
    assert (t.numpy() == 42).all()


def test_set_values_fills_leading_corner():
    t = tl.zeros(2, 3, 4, dtype=tl.int32).set_constant(42)
    t.set_values([[[1, 2, 3, 4], [5, 6, 7, 8]]])
    assert t[0, 0].tolist() == [1, 2, 3, 4]
    assert t[0, 1].tolist() == [5, 6, 7, 8]
    assert t[0, 2].tolist() == [42] * 4
    assert (t[1].numpy() == 42).all()


def test_set_values_rejects_oversized_input():
    t = tl.zeros(2, 2)
    with pytest.raises(ValueError):
        t.set_values([[1., 2., 3.]])
    with pytest.raises(ValueError):
        t.set_values([1., 2.])


def test_set_random_in_unit_interval():
    tl.manual_seed(7)
    k = tl.zeros(3, 3).set_random()
    arr = k.numpy()
    assert ((arr >= 0.) & (arr < 1.)).all()
    assert k.dtype == tl.float32


def test_default_dtype_is_float32():
    assert tl.tensor([1, 2, 3]).dtype == tl.float32
    assert tl.ones(2).dtype == tl.float32


def test_element_access_and_mutation():
    t = tl.zeros(2, 2)
    t[1, 0] = 5.
    assert t[1, 0] == 5.
    assert isinstance(t[1, 0], float)
    assert t.tolist() == [[0., 0.], [5., 0.]]


# ── Views over external storage ───────────────────────────────────────

def test_from_buffer_aliases_array_storage():
    storage = array.array('f', range(1, 13))
    view = tl.from_buffer(storage, 4, 3)
    assert view.shape == (4, 3)
    assert view[1, 1] == 5.

    storage[4] = -1.
    assert view[1, 1] == -1.

    view[2, 1] = -8.
    assert storage[7] == -8.


def test_from_buffer_aliases_numpy_storage():
    storage = np.arange(1., 13., dtype=np.float32)
    view = tl.from_buffer(storage, 4, 3)
    view[0, 0] = 99.
    assert storage[0] == 99.
    storage[11] = -3.
    assert view[3, 2] == -3.


def test_from_buffer_count_mismatch():
    with pytest.raises(ValueError):
        tl.from_buffer(array.array('d', [1., 2., 3.]), 2, 2)


def test_from_buffer_rejects_read_only_storage():
    with pytest.raises(ValueError, match="writable"):
        tl.from_buffer(bytes(16), 4, dtype=tl.float32)
    frozen = np.zeros(4, dtype=np.float32)
    frozen.flags.writeable = False
    with pytest.raises(ValueError, match="writable"):
        tl.from_buffer(frozen, 2, 2)


def test_from_buffer_accepts_bytearray():
    storage = bytearray(16)
    view = tl.from_buffer(storage, 4, dtype=tl.float32)
    view[0] = 1.
    assert storage[:4] == np.float32(1.).tobytes()


# ── Dtypes ────────────────────────────────────────────────────────────

def test_unnamed_numpy_dtype_reports_float64():
    assert tl.dtype.from_numpy(np.uint8) is tl.float64
    assert tl.dtype.from_numpy(np.float16) is tl.float64
    assert tl.dtype.from_numpy(np.int32) is tl.int32


# ── Element-wise ops ──────────────────────────────────────────────────

def test_unary_and_binary_expressions():
    tl.manual_seed(0)
    a = tl.rand(2, 3)
    b = tl.rand(2, 3)
    c = 2. * a + b.exp()
    np.testing.assert_allclose(c.numpy(), 2. * a.numpy() + np.exp(b.numpy()), rtol=1e-6)

    d = a.unary_expr(math.cos)
    np.testing.assert_allclose(d.numpy(), np.cos(a.numpy()), rtol=1e-6)
    assert d.dtype == tl.float32

    e = a.binary_expr(b, lambda x, y: 2. * x + y)
    np.testing.assert_allclose(e.numpy(), 2. * a.numpy() + b.numpy(), rtol=1e-6)


def test_unary_expr_with_ufunc():
    a = tl.tensor([[0., 1.], [4., 9.]])
    assert a.unary_expr(np.sqrt).tolist() == [[0., 1.], [2., 3.]]


def test_binary_expr_scalar_callable():
    a = tl.tensor([1., 2., 3.])
    b = tl.tensor([3., 2., 1.])
    assert a.binary_expr(b, max).tolist() == [3., 2., 3.]


def test_reflected_arithmetic():
    a = tl.tensor([1., 2., 4.])
    assert (1. - a).tolist() == [0., -1., -3.]
    assert (4. / a).tolist() == [4., 2., 1.]
    assert (-a).tolist() == [-1., -2., -4.]


def test_equality_by_value():
    a = tl.tensor([[1., 2.], [3., 4.]])
    b = tl.tensor([[1., 2.], [3., 4.]])
    assert tl.equal(a, b)
    assert not tl.equal(a, b.reshape(4))
    assert (a == b).numpy().all()
    assert tl.allclose(a, b + 1e-9)


# ── Geometry ──────────────────────────────────────────────────────────

def test_shuffle_transposes():
    t = tl.arange(12).reshape(3, 4)
    tt = t.shuffle(1, 0)
    assert tt.shape == (4, 3)
    np.testing.assert_array_equal(tt.numpy(), t.numpy().T)
    assert tl.equal(t.transpose(), tt)


def test_reshape_and_broadcast():
    m = tl.tensor([[1., 2.], [3., 4.]])
    r = m.reshape(2, 2, 1)
    assert r.shape == (2, 2, 1)
    b = r.broadcast(1, 1, 3)
    assert b.shape == (2, 2, 3)
    assert b[1, 0].tolist() == [3., 3., 3.]


def test_reshape_rejects_count_mismatch():
    with pytest.raises(ValueError):
        tl.zeros(2, 3).reshape(4, 2)


def test_broadcast_rejects_bad_factors():
    t = tl.zeros(2, 1)
    with pytest.raises(ValueError):
        t.broadcast(1, 1, 3)
    with pytest.raises(ValueError):
        t.broadcast(1, 0)


def test_expand_replicates_singleton_axes():
    t = tl.tensor([[1.], [2.]])
    e = t.expand(2, 3)
    assert e.tolist() == [[1., 1., 1.], [2., 2., 2.]]
    with pytest.raises(ValueError):
        t.expand(3, 3)


# ── Reductions ────────────────────────────────────────────────────────

def test_full_reductions():
    x = tl.arange(1, 7, dtype=tl.float64).reshape(1, 2, 3)
    assert x.sum().item() == 21.
    assert x.max().item() == 6.
    assert x.min().item() == 1.
    assert x.prod().item() == 720.
    assert x.sum().ndim == 0


def test_axis_reductions():
    x = tl.tensor([[[1., 5., 2.], [0., -1., 3.]]])
    assert x.max(dim=2).tolist() == [[5., 3.]]
    assert x.maximum(dim=2).shape == (1, 2)
    assert x.sum(dim=2, keepdim=True).shape == (1, 2, 1)
    assert x.sum(dim=(0, 1)).tolist() == [1., 4., 5.]


# ── Matmul & convolution ──────────────────────────────────────────────

def test_matmul():
    a = tl.tensor([[2., 3.], [-2., 1.]])
    b = tl.tensor([[1., 2., -1.], [1., 2., 1.]])
    c = tl.matmul(a, b)
    assert c.tolist() == [[5., 10., 1.], [-1., -2., 3.]]
    assert tl.equal(a @ b, c)


def test_convolve_shape():
    inp = tl.rand(1, 6, 6, 3)
    kernel = tl.rand(3, 3)
    out = tl.convolve(inp, kernel, (1, 2))
    assert out.shape == (1, 4, 4, 3), f"Expected (1,4,4,3), got {out.shape}"


def test_convolve_values():
    inp = tl.arange(16, dtype=tl.float64).reshape(4, 4)
    kernel = tl.tensor([[1., 0.], [0., -1.]], dtype=tl.float64)
    out = tl.convolve(inp, kernel, (0, 1))
    # Each output is x[i, j] - x[i + 1, j + 1] == -5 for a row-major ramp.
    assert out.shape == (3, 3)
    assert (out.numpy() == -5.).all()


def test_convolve_matches_direct_loop():
    rng = np.random.default_rng(3)
    x = rng.normal(size=(2, 5, 4))
    k = rng.normal(size=(3, 2))
    out = tl.convolve(tl.tensor(x), tl.tensor(k), (1, 2)).numpy()
    expected = np.zeros((2, 3, 3))
    for b in range(2):
        for i in range(3):
            for j in range(3):
                expected[b, i, j] = (x[b, i:i + 3, j:j + 2] * k).sum()
    np.testing.assert_allclose(out, expected, rtol=1e-6, atol=1e-8)


def test_convolve_rejects_oversized_kernel():
    with pytest.raises(ValueError):
        tl.convolve(tl.zeros(2, 2), tl.zeros(3, 3), (0, 1))
    with pytest.raises(ValueError):
        tl.convolve(tl.zeros(4, 4), tl.zeros(3), (0, 1))
