#!filepath: perc/__init__.py

from .utils.logger import Logging, logs

__version__ = "0.1.0"

from .utils.filesystem import FileSystem

# alias 简化调用
fs = FileSystem

__all__ = [
    "logs", "Logging",
    "fs",
    "__version__",
]
