# perc/engines/train_engine.py
from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Optional, Sequence

import numpy as np

from perc import logs
from perc.config.training_config import TrainingConfig
from perc.engines.activation import Convention, Example, Model, activate, net
from perc.engines.random_source import RandomSource
from perc.engines.train_result import (
    EpochSummary,
    ExampleTrace,
    TrainResult,
    TrainStatus,
)
from perc.engines.weight_init_engine import WeightInitEngine
from perc.observability.progress import LogTrainReporter, TrainReporter

f32 = np.float32


class TrainMode(str, Enum):
    PERCEPTRON = "perceptron"
    ADALINE = "adaline"


OutputRule = Callable[[Model, np.float32, np.float32, Convention], np.float32]

# mode → 计算 out 的函数；更新公式两种模式完全相同
_OUTPUT_RULES: Dict[TrainMode, OutputRule] = {
    TrainMode.PERCEPTRON: activate,
    TrainMode.ADALINE: lambda model, x1, x2, convention: net(model, x1, x2),
}


class TrainEngine:
    """
    Single-neuron online trainer.

    State machine
    -------------
    Initializing -> Epoch(k) -> {Epoch(k+1), Converged, MaxEpochsReached}

    Each epoch:
    1) update phase, examples in their original order:
           err   = (y - out) ** 2
           w1   += rate * err * x1
           w2   += rate * err * x2
           bias += rate * err
       The same squared error feeds all three components.
    2) evaluation phase: total_err over the whole set with the
       updated weights and the same output rule.
    3) termination: (adaline and |total_err| < threshold) or total_err == 0.0

    The engine owns the weight vector for the duration of train().
    """

    def __init__(
        self,
        cfg: TrainingConfig,
        *,
        mode: TrainMode,
        rng: RandomSource,
        reporter: Optional[TrainReporter] = None,
    ):
        self.cfg = cfg
        self.mode = TrainMode(mode)
        self.rng = rng
        self.reporter = reporter if reporter is not None else LogTrainReporter()

        self.convention = Convention.from_flag(cfg.bipolar)
        self._output = _OUTPUT_RULES[self.mode]

    def train(self, examples: Sequence[Example]) -> TrainResult:
        initial = WeightInitEngine(self.cfg.init_dist).init_weights(self.rng)
        return self.train_from(initial, examples)

    def train_from(self, initial: Model, examples: Sequence[Example]) -> TrainResult:
        """Run the epoch loop starting from explicit weights."""
        weights = initial.to_array()
        rate = f32(self.cfg.rate)
        threshold = f32(self.cfg.threshold)
        adaline = self.mode is TrainMode.ADALINE

        logs.info(
            f"[Train] mode={self.mode.value} convention={self.convention.value} "
            f"rate={self.cfg.rate} max_epochs={self.cfg.max_epochs} examples={len(examples)}"
        )

        examples = [Example(f32(x1), f32(x2), f32(y)) for x1, x2, y in examples]

        total_err = None
        for epoch in range(self.cfg.max_epochs):
            # ---------- update phase ----------
            for x1, x2, y in examples:
                out = self._output(Model.from_array(weights), x1, x2, self.convention)
                diff = y - out
                err = diff * diff
                self.reporter.on_example(ExampleTrace(out=out, label=y, err=err))

                weights[0] += rate * err * x1
                weights[1] += rate * err * x2
                weights[2] += rate * err

            # ---------- evaluation phase ----------
            snapshot = Model.from_array(weights)
            total_err = self._total_error(snapshot, examples)
            self.reporter.on_epoch(
                EpochSummary(epoch=epoch, model=snapshot, total_err=total_err)
            )

            # ---------- termination ----------
            if (adaline and abs(total_err) < threshold) or total_err == 0.0:
                self.reporter.on_converged(epoch)
                return TrainResult(
                    model=snapshot,
                    status=TrainStatus.CONVERGED,
                    epochs=epoch + 1,
                    total_err=total_err,
                )

        logs.info(f"[Train] max epochs reached ({self.cfg.max_epochs}), total error {total_err}")
        return TrainResult(
            model=Model.from_array(weights),
            status=TrainStatus.MAX_EPOCHS_REACHED,
            epochs=self.cfg.max_epochs,
            total_err=total_err,
        )

    def _total_error(self, model: Model, examples: Sequence[Example]) -> np.float32:
        total = f32(0.0)
        for x1, x2, y in examples:
            diff = y - self._output(model, x1, x2, self.convention)
            total += diff * diff
        return total
