#!filepath: perc/utils/filesystem.py
from pathlib import Path

from perc import logs
from perc.utils.errors import FileAccessError


class FileSystem:
    """
    统一文件系统工具
    - 自动创建目录
    - 安全写入文件（临时文件 → replace）
    - 读取文本，OSError 统一转换为 FileAccessError
    """

    @staticmethod
    def ensure_dir(path: str | Path) -> Path:
        """
        创建目录（如果不存在）
        """
        p = Path(path)
        if not p.exists():
            p.mkdir(parents=True, exist_ok=True)
            logs.debug(f"[FS] 创建目录: {p}")
        return p

    @staticmethod
    def read_text(path: str | Path) -> str:
        p = Path(path)
        try:
            return p.read_text(encoding="utf-8")
        except OSError as e:
            raise FileAccessError(f"couldn't read {p}: {e.strerror or e}") from e

    @staticmethod
    def safe_write_text(path: str | Path, text: str) -> None:
        """
        原子写入（避免部分写入导致文件损坏）
        写入步骤：
            1) 先写入 tmp 文件
            2) replace → 正式文件（覆盖已有内容）
        """
        path = Path(path)
        tmp_path = path.with_name(path.name + ".tmp")

        try:
            FileSystem.ensure_dir(path.parent)
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(text)
                logs.debug(f"[FS] 写入临时文件: {tmp_path}")
            tmp_path.replace(path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise FileAccessError(
                f"couldn't open file {path} for writing: {e.strerror or e}"
            ) from e

        logs.debug(f"[FS] 原子写入完成: {path}")
