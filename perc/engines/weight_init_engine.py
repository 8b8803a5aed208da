# perc/engines/weight_init_engine.py
from __future__ import annotations

from perc import logs
from perc.config.distribution_config import DistributionSpec
from perc.engines.activation import Model
from perc.engines.random_source import RandomSource


class WeightInitEngine:
    """
    初始权重：w1, w2, bias 依次从同一分布独立采样三次。

    分布参数在 DistributionSpec 构造时已校验，这里不再检查。
    """

    def __init__(self, dist: DistributionSpec):
        self.dist = dist

    def init_weights(self, rng: RandomSource) -> Model:
        w1 = self.dist.sample(rng)
        w2 = self.dist.sample(rng)
        bias = self.dist.sample(rng)

        model = Model(w1, w2, bias)
        logs.debug(f"[WeightInit] {self.dist} -> {model.as_tuple()}")
        return model
