# perc/utils/errors.py
class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided input (flags, config, data files).
    Should NOT print traceback.
    """


class ConfigurationError(UserInputError):
    """
    配置错误：分布定义、数值参数、配置文件。
    在任何文件 I/O 和计算之前抛出。
    """


class FileAccessError(UserInputError):
    """File cannot be opened, created, read or written."""


class DataFormatError(UserInputError):
    """
    数据格式错误：
    - 训练/验证文件某行不是 3 个数值
    - 模型文件不是 3 个数值
    """
