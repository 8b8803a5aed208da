# perc/engines/activation.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

import numpy as np

f32 = np.float32

ONE = f32(1.0)
ZERO = f32(0.0)


class Convention(str, Enum):
    """布尔值 → 浮点数映射"""

    UNIPOLAR = "unipolar"  # false → 0.0, true → 1.0
    BIPOLAR = "bipolar"    # false → -1.0, true → 1.0

    @classmethod
    def from_flag(cls, bipolar: bool) -> "Convention":
        return cls.BIPOLAR if bipolar else cls.UNIPOLAR

    @property
    def false_value(self) -> np.float32:
        return f32(-1.0) if self is Convention.BIPOLAR else ZERO

    @property
    def true_value(self) -> np.float32:
        return ONE

    def to_float(self, value: bool) -> np.float32:
        return self.true_value if value else self.false_value


@dataclass(frozen=True)
class Model:
    """
    (w1, w2, bias)，单精度浮点。
    不检查 NaN / Inf。
    """

    w1: np.float32
    w2: np.float32
    bias: np.float32

    def __post_init__(self):
        object.__setattr__(self, "w1", f32(self.w1))
        object.__setattr__(self, "w2", f32(self.w2))
        object.__setattr__(self, "bias", f32(self.bias))

    @classmethod
    def from_array(cls, weights) -> "Model":
        w1, w2, bias = weights
        return cls(w1, w2, bias)

    def to_array(self) -> np.ndarray:
        return np.array([self.w1, self.w2, self.bias], dtype=np.float32)

    def as_tuple(self) -> tuple:
        return (self.w1, self.w2, self.bias)


class Example(NamedTuple):
    x1: np.float32
    x2: np.float32
    y: np.float32


def net(model: Model, x1, x2) -> np.float32:
    return model.bias + model.w1 * f32(x1) + model.w2 * f32(x2)


def activate(model: Model, x1, x2, convention: Convention) -> np.float32:
    # strict >: net == 0.0 maps to the false value
    if net(model, x1, x2) > ZERO:
        return ONE
    return convention.false_value


def format_f32(value) -> str:
    """Shortest text that round-trips the float32 value."""
    return str(f32(value))
