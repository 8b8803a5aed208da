#!filepath: perc/cli.py
from functools import wraps
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from perc import __version__, logs
from perc.artifacts.model_artifact import format_model, read_model, write_model
from perc.config import AppConfig, GenerateConfig, LogConfig, TrainingConfig
from perc.dataloader.example_loader import load_examples
from perc.engines.activation import Convention, format_f32
from perc.engines.data_generator_engine import DataGeneratorEngine, LogicFunction
from perc.engines.evaluate_engine import evaluate, validate
from perc.engines.random_source import NumpyRandomSource
from perc.engines.train_engine import TrainEngine, TrainMode
from perc.observability.progress import ConsoleTrainReporter
from perc.utils.errors import ConfigurationError, UserInputError

app = typer.Typer(help="Single-neuron perceptron / ADALINE trainer")

BIPOLAR_HELP = "Use bipolar or unipolar logic (config file value, else unipolar)"

err_console = Console(stderr=True, soft_wrap=True)


def _report(e: UserInputError) -> None:
    err_console.print(f"[red]error:[/red] {escape(str(e))}")


def fail_fast(func):
    """
    UserInputError → 红色错误信息 + exit 1，不打印 traceback
    其他异常照常抛出（logs.catch 记录完整 traceback）
    """

    logged = logs.catch(msg=f"{func.__name__} failed", reraise_quietly=(UserInputError,))(func)

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return logged(*args, **kwargs)
        except UserInputError as e:
            _report(e)
            raise typer.Exit(code=1)

    return wrapper


def _app_config(ctx: typer.Context) -> AppConfig:
    return ctx.obj["config"]


def _rng(ctx: typer.Context) -> NumpyRandomSource:
    rng = NumpyRandomSource(seed=_app_config(ctx).seed)
    logs.info(f"[Random] seed={rng.seed}")
    return rng


def _convention(ctx: typer.Context, bipolar: Optional[bool]) -> Convention:
    # --bipolar / --unipolar 未给出时沿用配置文件
    if bipolar is None:
        bipolar = _app_config(ctx).train.bipolar
    return Convention.from_flag(bipolar)


def _merge(model_cls, base, **overrides):
    """CLI 显式给出的参数覆盖配置文件中的值"""
    values = base.model_dump()
    values.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return model_cls(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid {model_cls.__name__}: {e}") from e


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for the random stream (time based if not given)"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level for stderr"),
    log_dir: Optional[str] = typer.Option(None, "--log-dir", help="Also write logs to this directory"),
):
    try:
        cfg = AppConfig.load(str(config) if config is not None else None)
        updates = {"log": _merge(LogConfig, cfg.log, level=log_level, dir=log_dir)}
    except UserInputError as e:
        _report(e)
        raise typer.Exit(code=1)

    if seed is not None:
        updates["seed"] = seed
    cfg = cfg.model_copy(update=updates)

    logs.configure(cfg.log)
    ctx.obj = {"config": cfg}


@app.command()
def version():
    typer.echo(__version__)


def _train(
    ctx: typer.Context,
    input: Path,
    output: Optional[Path],
    mode: TrainMode,
    **overrides,
):
    # 配置先校验，再读文件
    cfg = _merge(TrainingConfig, _app_config(ctx).train, **overrides)
    examples = load_examples(input)

    engine = TrainEngine(
        cfg,
        mode=mode,
        rng=_rng(ctx),
        reporter=ConsoleTrainReporter(echo=typer.echo),
    )
    result = engine.train(examples)
    logs.info(
        f"[Train] {result.status.value} after {result.epochs} epochs: {format_model(result.model)}"
    )

    if output is None:
        typer.echo(format_model(result.model))
    else:
        write_model(result.model, output)


@app.command()
@fail_fast
def train(
    ctx: typer.Context,
    input: Path = typer.Argument(..., help="Path to file with training set"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Path to output file with trained model (stdout if not given)"),
    init_dist: Optional[str] = typer.Option(None, "--init-dist", help="Distribution of the initial weights: 'normal,mean,stddev' or 'uniform,min,max' [default: normal,0.0,1.0]"),
    alpha: Optional[float] = typer.Option(None, "--alpha", "-a", help="Training rate [default: 0.1]"),
    epochs: Optional[int] = typer.Option(None, "--epochs", "-e", help="Maximum number of epochs [default: 5]"),
    bipolar: Optional[bool] = typer.Option(None, "--bipolar/--unipolar", help=BIPOLAR_HELP),
):
    """
    Train a perceptron (thresholded output)
    """
    _train(
        ctx, input, output, TrainMode.PERCEPTRON,
        init_dist=init_dist, rate=alpha, max_epochs=epochs, bipolar=bipolar,
    )


@app.command("train-ada")
@fail_fast
def train_ada(
    ctx: typer.Context,
    input: Path = typer.Argument(..., help="Path to file with training set"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Path to output file with trained model (stdout if not given)"),
    init_dist: Optional[str] = typer.Option(None, "--init-dist", help="Distribution of the initial weights: 'normal,mean,stddev' or 'uniform,min,max' [default: normal,0.0,1.0]"),
    alpha: Optional[float] = typer.Option(None, "--alpha", "-a", help="Training rate [default: 0.1]"),
    epochs: Optional[int] = typer.Option(None, "--epochs", "-e", help="Maximum number of epochs [default: 5]"),
    threshold: Optional[float] = typer.Option(None, "--threshold", "-t", help="Error at which training is allowed to terminate [default: 1.0]"),
    bipolar: Optional[bool] = typer.Option(None, "--bipolar/--unipolar", help=BIPOLAR_HELP),
):
    """
    Train an ADALINE (raw net output)
    """
    _train(
        ctx, input, output, TrainMode.ADALINE,
        init_dist=init_dist, rate=alpha, max_epochs=epochs, threshold=threshold,
        bipolar=bipolar,
    )


@app.command("eval")
@fail_fast
def eval_(
    ctx: typer.Context,
    model_path: Path = typer.Argument(..., metavar="MODEL", help="Path to model being evaluated"),
    x1: float = typer.Argument(..., help="First input"),
    x2: float = typer.Argument(..., help="Second input"),
    bipolar: Optional[bool] = typer.Option(None, "--bipolar/--unipolar", help=BIPOLAR_HELP),
):
    """
    Evaluate a model on one input pair
    """
    convention = _convention(ctx, bipolar)
    model = read_model(model_path)
    typer.echo(format_f32(evaluate(model, x1, x2, convention)))


@app.command()
@fail_fast
def gen(
    ctx: typer.Context,
    func: LogicFunction = typer.Argument(..., help="Logical function to be generated"),
    samples: Optional[int] = typer.Argument(None, help="Number of samples to be generated [default: 100]"),
    noise_amt: Optional[float] = typer.Option(None, "--noise-amt", help="Amount of noise as fraction of all samples [default: 0.0]"),
    sigma: Optional[float] = typer.Option(None, "--sigma", "-s", help="Standard deviation of the input noise [default: 0.0]"),
    bipolar: Optional[bool] = typer.Option(None, "--bipolar/--unipolar", help=BIPOLAR_HELP),
):
    """
    Generate labeled samples of AND / OR / XOR
    """
    base = _app_config(ctx).generate
    noise = base.noise.model_dump()
    if noise_amt is not None:
        noise["amount"] = noise_amt
    if sigma is not None:
        noise["sigma"] = sigma
    cfg = _merge(GenerateConfig, base, samples=samples, noise=noise, bipolar=bipolar)

    engine = DataGeneratorEngine(cfg, rng=_rng(ctx))
    for x1, x2, y in engine.generate(func):
        typer.echo(f"{format_f32(x1)} {format_f32(x2)} {format_f32(y)}")


@app.command("validate")
@fail_fast
def validate_(
    ctx: typer.Context,
    model_path: Path = typer.Argument(..., metavar="MODEL", help="Model to be validated"),
    input: Path = typer.Argument(..., help="Validation data"),
    bipolar: Optional[bool] = typer.Option(None, "--bipolar/--unipolar", help=BIPOLAR_HELP),
):
    """
    Count misclassified examples
    """
    convention = _convention(ctx, bipolar)
    examples = load_examples(input)
    model = read_model(model_path)

    errors = validate(model, examples, convention)
    logs.info(f"[Validate] {errors}/{len(examples)} misclassified")
    typer.echo(f"{errors} errors.")


if __name__ == "__main__":
    app()

# python -m perc.cli train data/and.txt -e 20
