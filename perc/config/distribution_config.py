# perc/config/distribution_config.py
from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from perc.engines.random_source import RandomSource
from perc.utils.errors import ConfigurationError


class NormalDistribution(BaseModel):
    """Normal(mean, stddev)，stddev >= 0"""

    model_config = ConfigDict(frozen=True)

    kind: Literal["normal"] = "normal"
    mean: float = 0.0
    stddev: float = Field(default=1.0, ge=0.0)

    def sample(self, rng: RandomSource) -> float:
        return self.mean + self.stddev * rng.next_gaussian()

    def __str__(self) -> str:
        return f"normal,{self.mean},{self.stddev}"


class UniformDistribution(BaseModel):
    """Uniform[low, high)，low <= high"""

    model_config = ConfigDict(frozen=True)

    kind: Literal["uniform"] = "uniform"
    low: float
    high: float

    @model_validator(mode="after")
    def _check_bounds(self) -> "UniformDistribution":
        if self.low > self.high:
            raise ValueError(
                f"malformed uniform distribution specified: min {self.low} > max {self.high}"
            )
        return self

    def sample(self, rng: RandomSource) -> float:
        return self.low + (self.high - self.low) * rng.next_uniform()

    def __str__(self) -> str:
        return f"uniform,{self.low},{self.high}"


DistributionSpec = Annotated[
    Union[NormalDistribution, UniformDistribution],
    Field(discriminator="kind"),
]


def parse_distribution(text: str) -> NormalDistribution | UniformDistribution:
    """
    Parse ``name,param1,param2``.

    normal,mean,stddev  /  uniform,min,max
    """
    tokens = [t.strip() for t in text.split(",")]
    if len(tokens) != 3:
        raise ConfigurationError(
            f"distribution must be 'name,param1,param2', got {text!r}"
        )

    name, p1, p2 = tokens
    if name not in ("normal", "uniform"):
        raise ConfigurationError(f"distribution name malformed: {name!r}")

    params = []
    for idx, tok in enumerate((p1, p2), start=1):
        try:
            params.append(float(tok))
        except ValueError:
            raise ConfigurationError(
                f"distribution parameter {idx} malformed: {tok!r}"
            ) from None

    try:
        if name == "normal":
            return NormalDistribution(mean=params[0], stddev=params[1])
        return UniformDistribution(low=params[0], high=params[1])
    except ValidationError as e:
        raise ConfigurationError(
            f"malformed {name} distribution specified: {text!r}"
        ) from e
