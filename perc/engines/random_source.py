# perc/engines/random_source.py
from __future__ import annotations

import time
from typing import Optional, Protocol

import numpy as np


class RandomSource(Protocol):
    def next_uniform(self) -> float:
        """Uniform draw in [0, 1)."""
        ...

    def next_gaussian(self) -> float:
        """Standard normal draw."""
        ...


class NumpyRandomSource:
    """
    单一可变随机流（numpy Generator）

    seed 为空时用纳秒时间戳作为种子；实际使用的种子保存在 self.seed，
    便于日志中记录并复现。
    """

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = time.time_ns()
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def next_uniform(self) -> float:
        return float(self._rng.random())

    def next_gaussian(self) -> float:
        return float(self._rng.standard_normal())
