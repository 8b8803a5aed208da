# perc/artifacts/model_artifact.py
from __future__ import annotations

from pathlib import Path

from perc import fs, logs
from perc.engines.activation import Model, format_f32
from perc.utils.errors import DataFormatError


# ============================================================
# Model text format:  "w1 w2 bias"
# ============================================================
def format_model(model: Model) -> str:
    return " ".join(format_f32(w) for w in model.as_tuple())


def parse_model(text: str, source: str = "<model>") -> Model:
    """
    Any whitespace between tokens is accepted; exactly 3 float tokens.
    """
    tokens = text.split()
    if len(tokens) != 3:
        raise DataFormatError(
            f"{source}: model must hold exactly 3 values, got {len(tokens)}"
        )

    try:
        values = [float(tok) for tok in tokens]
    except ValueError as e:
        raise DataFormatError(f"{source}: malformed model value ({e})") from e

    return Model(*values)


def read_model(path: str | Path) -> Model:
    model = parse_model(fs.read_text(path), source=str(path))
    logs.debug(f"[ModelArtifact] loaded {path}: {format_model(model)}")
    return model


def write_model(model: Model, path: str | Path) -> None:
    """Overwrites any existing file."""
    fs.safe_write_text(path, format_model(model) + "\n")
    logs.info(f"[ModelArtifact] wrote {path}")
