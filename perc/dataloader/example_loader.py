#!filepath: perc/dataloader/example_loader.py
from __future__ import annotations

import csv
from pathlib import Path
from typing import List

import numpy as np
import pandas as pd

from perc import logs
from perc.engines.activation import Example
from perc.utils.errors import DataFormatError, FileAccessError

COLUMNS = ["x1", "x2", "y"]


def load_examples(path: str | Path) -> List[Example]:
    """
    读取训练 / 验证文件：每行 `x1 x2 label`，空白分隔。

    - 空行跳过
    - 空文件 → 空列表
    - 任一行不是 3 个数值 → DataFormatError（整个文件作废）
    - nan / inf 与模型文件一样按浮点数接受
    """
    path = Path(path)

    try:
        # 不做 NA 识别、不去引号：每个 token 原样参与浮点解析
        raw = pd.read_csv(
            path,
            sep=r"\s+",
            header=None,
            dtype=str,
            keep_default_na=False,
            na_filter=False,
            quoting=csv.QUOTE_NONE,
        )
    except pd.errors.EmptyDataError:
        logs.info(f"[ExampleLoader] {path} is empty")
        return []
    except pd.errors.ParserError as e:
        raise DataFormatError(f"{path}: every line must hold exactly 3 values ({e})") from e
    except OSError as e:
        raise FileAccessError(f"couldn't open {path}: {e.strerror or e}") from e

    if raw.shape[1] != len(COLUMNS):
        raise DataFormatError(
            f"{path}: expected 3 values per line, got {raw.shape[1]}"
        )

    missing = (raw.isna() | (raw == "")).any(axis=1)
    if missing.any():
        row = int(np.flatnonzero(missing.to_numpy())[0])
        raise DataFormatError(f"{path}: row {row + 1} does not hold 3 numeric values")

    raw.columns = COLUMNS
    try:
        # astype 按 float() 解析，与 parse_model 一致
        values = raw.astype(np.float64).to_numpy(dtype=np.float32)
    except (ValueError, TypeError) as e:
        raise DataFormatError(f"{path}: malformed value ({e})") from e

    examples = [Example(x1, x2, y) for x1, x2, y in values]
    logs.debug(f"[ExampleLoader] {path}: {len(examples)} examples")
    return examples
