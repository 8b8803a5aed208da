from __future__ import annotations

import numpy as np
import pytest

from perc.engines.activation import Convention, Model, activate, format_f32, net

f32 = np.float32


# ============================================================
# 1. net：bias + w1*x1 + w2*x2（float32，自左向右）
# ============================================================
@pytest.mark.parametrize(
    "weights, x1, x2",
    [
        ((0.3, -0.7, 0.1), 1.0, 0.0),
        ((1.5, 2.25, -3.0), -1.0, 1.0),
        ((0.1, 0.2, 0.3), 0.7, -0.9),
    ],
)
def test_net_matches_float32_formula(weights, x1, x2):
    m = Model(*weights)
    expected = m.bias + m.w1 * f32(x1) + m.w2 * f32(x2)

    out = net(m, x1, x2)

    assert isinstance(out, np.float32)
    assert out == expected


def test_model_coerces_to_float32():
    m = Model(0.1, 2, -3.5)
    assert all(isinstance(w, np.float32) for w in m.as_tuple())
    assert m.w1 == f32(0.1)


def test_model_array_roundtrip():
    m = Model(0.25, -1.0, 4.0)
    arr = m.to_array()
    assert arr.dtype == np.float32
    assert Model.from_array(arr) == m


# ============================================================
# 2. activate：严格 >，net == 0 取 false 值
# ============================================================
@pytest.mark.parametrize(
    "convention, false_value",
    [(Convention.UNIPOLAR, 0.0), (Convention.BIPOLAR, -1.0)],
)
def test_activation_boundary(convention, false_value):
    zero = Model(1.0, 1.0, -2.0)   # net(1,1) == 0
    assert net(zero, 1.0, 1.0) == 0.0
    assert activate(zero, 1.0, 1.0, convention) == false_value

    negative = Model(1.0, 1.0, -3.0)
    assert activate(negative, 1.0, 1.0, convention) == false_value

    positive = Model(1.0, 1.0, -1.5)
    assert activate(positive, 1.0, 1.0, convention) == 1.0


def test_convention_to_float():
    assert Convention.UNIPOLAR.to_float(False) == 0.0
    assert Convention.UNIPOLAR.to_float(True) == 1.0
    assert Convention.BIPOLAR.to_float(False) == -1.0
    assert Convention.BIPOLAR.to_float(True) == 1.0
    assert Convention.from_flag(True) is Convention.BIPOLAR
    assert Convention.from_flag(False) is Convention.UNIPOLAR


def test_format_f32_round_trips():
    for v in (0.1, -2.5, 1e-8, 123456.789):
        text = format_f32(v)
        assert f32(float(text)) == f32(v)


def test_convention_behaves_as_str():
    """Convention 仍是 str：encode / 参数化 id 不受影响"""
    assert Convention.BIPOLAR.encode("utf-8") == b"bipolar"
    assert Convention.UNIPOLAR.encode("unicode_escape") == b"unipolar"
    assert Convention.BIPOLAR.value == "bipolar"
