"""
Tolerance tiers for numerical validation.

Defines precision expectations per element type when comparing Matrix
results against a numpy reference computed in float64:
- float64 (reference): machine precision match
- float32: relaxed for single-precision arithmetic
- float16: relaxed further for half precision

Used by the test suite.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-14,
    name='fp64',
    description='double precision — matches numpy float64 reference',
)

FP32 = ToleranceTier(
    rtol=1e-6,
    atol=1e-7,
    name='fp32',
    description='single precision',
)

FP16 = ToleranceTier(
    rtol=1e-3,
    atol=1e-3,
    name='fp16',
    description='half precision',
)


def select_tolerance(dtype: Any) -> ToleranceTier:
    """Select appropriate tolerance tier for a given element dtype."""
    itemsize = np.dtype(dtype).itemsize
    if itemsize <= 2:
        return FP16
    if itemsize <= 4:
        return FP32
    return FP64
