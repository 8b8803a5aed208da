# perc/config/generate_config.py
from __future__ import annotations

from pydantic import BaseModel, Field


class NoiseConfig(BaseModel):
    """
    amount: 每个样本加噪的概率 [0, 1]
    sigma : 零均值高斯噪声的标准差
    """

    amount: float = Field(default=0.0, ge=0.0, le=1.0)
    sigma: float = Field(default=0.0, ge=0.0)


class GenerateConfig(BaseModel):
    samples: int = Field(default=100, ge=0)
    bipolar: bool = False
    noise: NoiseConfig = Field(default_factory=NoiseConfig)
