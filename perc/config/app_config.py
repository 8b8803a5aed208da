#!filepath: perc/config/app_config.py
import os
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from .log_config import LogConfig
from .training_config import TrainingConfig
from .generate_config import GenerateConfig
from perc.utils.errors import ConfigurationError
from perc import logs


ENV_SEED = "PERC_SEED"
ENV_LOG_LEVEL = "PERC_LOG_LEVEL"


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    train: TrainingConfig = Field(default_factory=TrainingConfig)
    generate: GenerateConfig = Field(default_factory=GenerateConfig)
    seed: Optional[int] = None

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - path 为空时只使用默认值 + 环境变量
        - 优先级：环境变量 > YAML > 默认值
        """
        # 1) 先加载 .env（当前工作目录），不覆盖已有环境变量
        load_dotenv(os.path.join(os.getcwd(), ".env"))

        # 2) 读取 YAML
        raw: dict = {}
        if path is not None:
            if not os.path.exists(path):
                raise ConfigurationError(f"Config file not found: {path}")
            with open(path, "r", encoding="utf-8") as f:
                try:
                    raw = yaml.safe_load(f) or {}
                except yaml.YAMLError as e:
                    raise ConfigurationError(f"Config file {path} is not valid YAML: {e}") from e
            if not isinstance(raw, dict):
                raise ConfigurationError(f"Config file {path} must contain a mapping")
            logs.debug(f"[AppConfig] loaded {path}")

        # 3) 环境变量覆盖
        if os.getenv(ENV_SEED):
            raw["seed"] = os.getenv(ENV_SEED)
        if os.getenv(ENV_LOG_LEVEL):
            raw["log"] = {**(raw.get("log") or {}), "level": os.getenv(ENV_LOG_LEVEL)}

        try:
            return cls(**raw)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
