#!filepath: perc/observability/progress.py
from __future__ import annotations

from typing import Callable, Protocol

from perc import logs
from perc.engines.activation import format_f32
from perc.engines.train_result import EpochSummary, ExampleTrace

CONVERGED_LINE = "Model cannot be improved; terminating."


def format_example(record: ExampleTrace) -> str:
    return f"{format_f32(record.out)}, {format_f32(record.label)}, {format_f32(record.err)}"


def format_epoch(record: EpochSummary) -> str:
    weights = ", ".join(format_f32(w) for w in record.model.as_tuple())
    return f"Epoch {record.epoch}: [{weights}], total error {format_f32(record.total_err)}."


class TrainReporter(Protocol):
    def on_example(self, record: ExampleTrace) -> None: ...

    def on_epoch(self, record: EpochSummary) -> None: ...

    def on_converged(self, epoch: int) -> None: ...


class LogTrainReporter:
    """
    最轻量 trace：只写 DEBUG 日志（不会影响 pytest、CI 的 stdout）
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def on_example(self, record: ExampleTrace) -> None:
        if not self.enabled:
            return
        logs.debug(f"[Train] {format_example(record)}")

    def on_epoch(self, record: EpochSummary) -> None:
        if not self.enabled:
            return
        logs.debug(f"[Train] {format_epoch(record)}")

    def on_converged(self, epoch: int) -> None:
        if not self.enabled:
            return
        logs.info(f"[Train] converged after epoch {epoch}")


class ConsoleTrainReporter(LogTrainReporter):
    """
    CLI trace：每个样本一行、每个 epoch 一行、收敛时一行，写到 stdout。
    同时保留 DEBUG 日志。
    """

    def __init__(self, echo: Callable[[str], None], enabled: bool = True):
        super().__init__(enabled=enabled)
        self.echo = echo

    def on_example(self, record: ExampleTrace) -> None:
        super().on_example(record)
        if self.enabled:
            self.echo(format_example(record))

    def on_epoch(self, record: EpochSummary) -> None:
        super().on_epoch(record)
        if self.enabled:
            self.echo(format_epoch(record))

    def on_converged(self, epoch: int) -> None:
        super().on_converged(epoch)
        if self.enabled:
            self.echo(CONVERGED_LINE)
