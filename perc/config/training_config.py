# perc/config/training_config.py
from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from perc.config.distribution_config import (
    DistributionSpec,
    NormalDistribution,
    parse_distribution,
)


class TrainingConfig(BaseModel):
    """
    TrainingConfig

    - rate        : learning rate (alpha)
    - max_epochs  : upper bound on epochs; training may stop earlier
    - threshold   : ADALINE termination threshold (ignored in perceptron mode)
    - bipolar     : output convention
    - init_dist   : initial weight distribution, object or "name,p1,p2"
    """

    rate: float = 0.1
    max_epochs: int = Field(default=5, ge=0)
    threshold: float = 1.0
    bipolar: bool = False
    init_dist: DistributionSpec = Field(default_factory=NormalDistribution)

    @field_validator("init_dist", mode="before")
    @classmethod
    def _parse_text(cls, v):
        if isinstance(v, str):
            return parse_distribution(v)
        return v
