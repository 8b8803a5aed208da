from .app_config import AppConfig
from .distribution_config import (
    DistributionSpec,
    NormalDistribution,
    UniformDistribution,
    parse_distribution,
)
from .generate_config import GenerateConfig, NoiseConfig
from .log_config import LogConfig
from .training_config import TrainingConfig

__all__ = [
    "AppConfig",
    "DistributionSpec",
    "NormalDistribution",
    "UniformDistribution",
    "parse_distribution",
    "GenerateConfig",
    "NoiseConfig",
    "LogConfig",
    "TrainingConfig",
]
