# tests/conftest.py
from __future__ import annotations

from typing import Iterable, List

import numpy as np
import pytest
from loguru import logger

from perc.engines.activation import Example


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield


class FakeRandomSource:
    """
    确定性随机源：按给定顺序返回 uniform / gaussian，用完即报错。
    calls 记录消耗顺序，用于断言抽样顺序。
    """

    def __init__(self, uniforms: Iterable[float] = (), gaussians: Iterable[float] = ()):
        self._uniforms = list(uniforms)
        self._gaussians = list(gaussians)
        self.calls: List[str] = []

    def next_uniform(self) -> float:
        if not self._uniforms:
            raise AssertionError("FakeRandomSource: uniform draws exhausted")
        self.calls.append("uniform")
        return self._uniforms.pop(0)

    def next_gaussian(self) -> float:
        if not self._gaussians:
            raise AssertionError("FakeRandomSource: gaussian draws exhausted")
        self.calls.append("gaussian")
        return self._gaussians.pop(0)


@pytest.fixture
def fake_rng():
    """工厂：fake_rng(uniforms=[...], gaussians=[...])"""
    return FakeRandomSource


class RecordingReporter:
    def __init__(self):
        self.examples = []
        self.epochs = []
        self.converged_at = None

    def on_example(self, record):
        self.examples.append(record)

    def on_epoch(self, record):
        self.epochs.append(record)

    def on_converged(self, epoch):
        self.converged_at = epoch


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


def _examples(rows):
    f32 = np.float32
    return [Example(f32(x1), f32(x2), f32(y)) for x1, x2, y in rows]


@pytest.fixture
def and_unipolar():
    return _examples([(0, 0, 0), (0, 1, 0), (1, 0, 0), (1, 1, 1)])


@pytest.fixture
def xor_bipolar():
    return _examples([(-1, -1, -1), (-1, 1, 1), (1, -1, 1), (1, 1, -1)])


@pytest.fixture
def xor_unipolar():
    return _examples([(0, 0, 0), (0, 1, 1), (1, 0, 1), (1, 1, 0)])
