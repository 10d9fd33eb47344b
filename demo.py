# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Tensorlab — Tensor Programming Toolkit                              ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Console walkthrough of tensorlab.

Run:  python -m tensorlab.demo
"""
from __future__ import annotations

import array
import logging
import math

from . import numeric
from .tensor import Tensor, convolve, from_buffer, rand, tensor, zeros
from .nn import functional as F
from .optim import Momentum

SEP = "-" * 72

SOFTMAX_INPUT = [
    [[0.1, 1., -2.], [10., 2., 5.], [5., -5., 0.], [2., 3., 2.]],
    [[100., 1000., -500.], [3., 3., 3.], [-1., 1., -1.], [-11., -0.2, -.1]],
]


def inner_product_case() -> float:
    x = [1., 2., 3., 4., 5., 6.]
    y = [1., 1., 0., 1., 0., 1.]
    return numeric.inner_product(x, y)


def accumulate_case() -> dict[str, float]:
    v = [1., 2., 3., 4., 5.]
    return {
        'sum': numeric.accumulate(v),
        'product': numeric.product(v),
        'reduction': numeric.reduce(v, 1.0, lambda a, b: a * b),
    }


def transform_case() -> list[float]:
    return numeric.transform([1., 2., 3., 4., 5.], numeric.square)


def comparators_case() -> dict[str, bool]:
    return numeric.compare_all(10., 10.)


def momentum_case(steps: int = 3) -> list[list[float]]:
    optimizer = Momentum()
    current_grads = [1., 0., 1., 1., 0., 1.]
    return [optimizer.update(current_grads) for _ in range(steps)]


def matmul_case() -> Tensor:
    a = tensor([[2., 3.], [-2., 1.]], dtype='float64')
    b = tensor([[1., 2., -1.], [1., 2., 1.]], dtype='float64')
    return a @ b


def tensor_case() -> Tensor:
    my_tensor = zeros(2, 3, 4, dtype='int32').set_constant(42)
    return my_tensor.set_values([[[1, 2, 3, 4], [5, 6, 7, 8]]])


def tensor_map_case() -> tuple[list[float], Tensor]:
    storage = array.array('f', range(1, 13))
    view = from_buffer(storage, 4, 3)
    storage[4] = -1.
    view[2, 1] = -8
    return list(storage), view


def unary_binary_case() -> dict[str, Tensor]:
    a = rand(2, 3)
    b = rand(2, 3)
    return {
        'C': 2. * a + b.exp(),
        'D': a.unary_expr(math.cos),
        'E': a.binary_expr(b, lambda x, y: 2. * x + y),
    }


def transpose_case() -> Tensor:
    return rand(3, 4).shuffle(1, 0)


def reduction_case() -> tuple[float, float]:
    x = rand(5, 2, 3)
    return x.sum().item(), x.max().item()


def convolution_case() -> Tensor:
    inp = rand(1, 6, 6, 3)
    kernel = rand(3, 3)
    return convolve(inp, kernel, (1, 2))


def softmax_case() -> Tensor:
    return F.softmax(tensor(SOFTMAX_INPUT))


CASES = {
    'inner product': inner_product_case,
    'accumulate and reduce': accumulate_case,
    'transform': transform_case,
    'comparators': comparators_case,
    'momentum': momentum_case,
    'matmul': matmul_case,
    'tensor': tensor_case,
    'tensor map': tensor_map_case,
    'unary and binary': unary_binary_case,
    'transpose': transpose_case,
    'reduction': reduction_case,
    'convolution': convolution_case,
    'softmax': softmax_case,
}


def main() -> None:
    for name, case in CASES.items():
        print(SEP)
        print(f"[tensorlab] {name}")
        result = case()
        if isinstance(result, dict):
            for key, value in result.items():
                print(f"  {key}:\n{value}")
        elif isinstance(result, (list, tuple)):
            for item in result:
                print(item)
        else:
            print(result)
    print(SEP)


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    main()
