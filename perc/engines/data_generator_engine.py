# perc/engines/data_generator_engine.py
from __future__ import annotations

import operator
from enum import Enum
from typing import Iterator

import numpy as np

from perc import logs
from perc.config.generate_config import GenerateConfig
from perc.engines.activation import Convention, Example
from perc.engines.random_source import RandomSource

f32 = np.float32


class LogicFunction(str, Enum):
    AND = "and"
    OR = "or"
    XOR = "xor"

    def apply(self, a: bool, b: bool) -> bool:
        return _LOGIC_OPS[self](a, b)


_LOGIC_OPS = {
    LogicFunction.AND: operator.and_,
    LogicFunction.OR: operator.or_,
    LogicFunction.XOR: operator.xor,
}


class DataGeneratorEngine:
    """
    逻辑函数样本生成

    每个样本的随机数消耗顺序（固定）：
        1) x1 : next_uniform() < 0.5
        2) x2 : next_uniform() < 0.5
        3) 是否加噪 : next_uniform() < noise.amount（总是抽取）
        4) 加噪时：x1 噪声、x2 噪声各一次 next_gaussian()
    标签永远不加噪。
    """

    def __init__(self, cfg: GenerateConfig, *, rng: RandomSource):
        self.cfg = cfg
        self.rng = rng
        self.convention = Convention.from_flag(cfg.bipolar)

    def generate(self, func: LogicFunction) -> Iterator[Example]:
        func = LogicFunction(func)
        logs.info(
            f"[Generate] func={func.value} samples={self.cfg.samples} "
            f"convention={self.convention.value} noise={self.cfg.noise.amount} sigma={self.cfg.noise.sigma}"
        )
        return self._samples(func)

    def _samples(self, func: LogicFunction) -> Iterator[Example]:
        to_float = self.convention.to_float
        noise_amt = self.cfg.noise.amount
        sigma = self.cfg.noise.sigma

        for _ in range(self.cfg.samples):
            a = self.rng.next_uniform() < 0.5
            b = self.rng.next_uniform() < 0.5

            x1 = to_float(a)
            x2 = to_float(b)
            y = to_float(func.apply(a, b))

            if self.rng.next_uniform() < noise_amt:
                x1 = x1 + f32(sigma * self.rng.next_gaussian())
                x2 = x2 + f32(sigma * self.rng.next_gaussian())

            yield Example(x1, x2, y)
