# perc/engines/train_result.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

from perc.engines.activation import Model


class TrainStatus(str, Enum):
    CONVERGED = "converged"
    MAX_EPOCHS_REACHED = "max_epochs_reached"


@dataclass(frozen=True)
class ExampleTrace:
    """一次权重更新：输出、标签、平方误差"""

    out: np.float32
    label: np.float32
    err: np.float32


@dataclass(frozen=True)
class EpochSummary:
    """一个 epoch 结束后的权重快照与总误差"""

    epoch: int
    model: Model
    total_err: np.float32


@dataclass(frozen=True)
class TrainResult:
    """
    TrainResult

    语义：
    - 一次完整训练的纯内存态结果
    - Converged / MaxEpochsReached 都返回最终权重，不回滚
    - 不包含任何 I/O 语义
    """

    model: Model
    status: TrainStatus
    epochs: int
    total_err: np.float32 | None

    @property
    def converged(self) -> bool:
        return self.status is TrainStatus.CONVERGED
