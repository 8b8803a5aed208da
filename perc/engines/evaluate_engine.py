# perc/engines/evaluate_engine.py
from __future__ import annotations

from typing import Iterable

import numpy as np

from perc.engines.activation import Convention, Example, Model, activate


def evaluate(model: Model, x1, x2, convention: Convention) -> np.float32:
    return activate(model, x1, x2, convention)


def validate(model: Model, examples: Iterable[Example], convention: Convention) -> int:
    """
    Number of examples whose activation differs from the label.
    Exact float comparison, no tolerance.
    """
    errors = 0
    for x1, x2, y in examples:
        if activate(model, x1, x2, convention) != np.float32(y):
            errors += 1
    return errors
