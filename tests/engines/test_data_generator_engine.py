from __future__ import annotations

import itertools

import numpy as np
import pytest

from perc.config.generate_config import GenerateConfig, NoiseConfig
from perc.engines.data_generator_engine import DataGeneratorEngine, LogicFunction
from perc.engines.random_source import NumpyRandomSource

f32 = np.float32


@pytest.mark.parametrize(
    "func, table",
    [
        (LogicFunction.AND, {(0, 0): 0, (0, 1): 0, (1, 0): 0, (1, 1): 1}),
        (LogicFunction.OR, {(0, 0): 0, (0, 1): 1, (1, 0): 1, (1, 1): 1}),
        (LogicFunction.XOR, {(0, 0): 0, (0, 1): 1, (1, 0): 1, (1, 1): 0}),
    ],
)
def test_logic_function_truth_table(func, table):
    for (a, b), y in table.items():
        assert func.apply(bool(a), bool(b)) == bool(y)


# ============================================================
# 1. 抽样顺序：x1, x2, 噪声判定（总是抽），噪声 x1, x2
# ============================================================
def test_or_unipolar_without_noise(fake_rng):
    # per sample: x1, x2, noise decision
    rng = fake_rng(uniforms=[0.1, 0.9, 0.5,
                             0.9, 0.9, 0.5,
                             0.1, 0.1, 0.5,
                             0.9, 0.1, 0.5])
    engine = DataGeneratorEngine(GenerateConfig(samples=4), rng=rng)

    samples = [tuple(s) for s in engine.generate(LogicFunction.OR)]

    assert samples == [(1.0, 0.0, 1.0), (0.0, 0.0, 0.0), (1.0, 1.0, 1.0), (0.0, 1.0, 1.0)]
    assert rng.calls == ["uniform"] * 12


def test_noise_applied_to_inputs_only(fake_rng):
    rng = fake_rng(uniforms=[0.1, 0.9, 0.3], gaussians=[0.2, -0.4])
    cfg = GenerateConfig(samples=1, bipolar=True, noise=NoiseConfig(amount=0.5, sigma=0.5))

    (x1, x2, y), = list(DataGeneratorEngine(cfg, rng=rng).generate(LogicFunction.AND))

    assert x1 == f32(1.0) + f32(0.5 * 0.2)
    assert x2 == f32(-1.0) + f32(0.5 * -0.4)
    assert y == -1.0
    assert rng.calls == ["uniform", "uniform", "uniform", "gaussian", "gaussian"]


def test_noise_decision_not_fired(fake_rng):
    rng = fake_rng(uniforms=[0.1, 0.1, 0.7])
    cfg = GenerateConfig(samples=1, noise=NoiseConfig(amount=0.5, sigma=3.0))

    (sample,) = list(DataGeneratorEngine(cfg, rng=rng).generate(LogicFunction.XOR))

    assert tuple(sample) == (1.0, 1.0, 0.0)
    assert "gaussian" not in rng.calls


# ============================================================
# 2. 惰性 + 不可重启
# ============================================================
def test_generation_is_lazy(fake_rng):
    rng = fake_rng(uniforms=[0.1, 0.1, 0.5])
    samples = DataGeneratorEngine(GenerateConfig(samples=3), rng=rng).generate(LogicFunction.AND)

    assert rng.calls == []
    first = next(samples)
    assert tuple(first) == (1.0, 1.0, 1.0)
    assert len(rng.calls) == 3


def test_generation_is_not_restartable():
    engine = DataGeneratorEngine(GenerateConfig(samples=5), rng=NumpyRandomSource(seed=3))
    samples = engine.generate(LogicFunction.OR)

    assert len(list(samples)) == 5
    assert list(samples) == []


def test_zero_samples(fake_rng):
    engine = DataGeneratorEngine(GenerateConfig(samples=0), rng=fake_rng())
    assert list(engine.generate(LogicFunction.OR)) == []


# ============================================================
# 3. 真随机源：noise=0 时只产生 4 个真值表点
# ============================================================
def test_or_points_with_real_source():
    engine = DataGeneratorEngine(GenerateConfig(samples=200), rng=NumpyRandomSource(seed=11))

    points = set()
    for x1, x2, y in engine.generate(LogicFunction.OR):
        assert y == float(bool(x1) or bool(x2))
        points.add((float(x1), float(x2), float(y)))

    allowed = {(a, b, float(a or b)) for a, b in itertools.product((0.0, 1.0), repeat=2)}
    assert points <= allowed
    assert len(points) == 4


def test_same_seed_same_samples():
    cfg = GenerateConfig(samples=20, noise=NoiseConfig(amount=0.5, sigma=0.1))
    a = list(DataGeneratorEngine(cfg, rng=NumpyRandomSource(seed=8)).generate("xor"))
    b = list(DataGeneratorEngine(cfg, rng=NumpyRandomSource(seed=8)).generate("xor"))
    assert a == b
