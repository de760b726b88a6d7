"""
日志模块（rps_basic）

多等级文件日志，按 debug/info/warning/error 分别写入独立文件。
"""

import logging
import os
from logging.handlers import RotatingFileHandler

DEFAULT_LOG_NAME = "rps_basic"

_LEVEL_FORMATS = (
    ("debug", logging.DEBUG, "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"),
    ("info", logging.INFO, "%(asctime)s - %(levelname)s - %(message)s"),
    ("warning", logging.WARNING, "%(asctime)s - %(levelname)s - %(message)s"),
    ("error", logging.ERROR, "%(asctime)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"),
)


class SafeRotatingFileHandler(RotatingFileHandler):
    """
    安全的日志轮转处理器

    在 Windows 上，如果日志文件被其他进程占用，轮转可能会失败。
    这个类会捕获轮转异常，继续写当前文件。
    """

    def doRollover(self) -> None:
        try:
            super().doRollover()
        except (PermissionError, OSError):
            # 文件被占用时放弃本次轮转
            pass


class Logger:
    """
    日志管理器。

    - 按等级输出到不同日志文件（debug/info/warning/error）。
    - logger 名称统一为 "rps_basic"。
    """

    def __init__(self, log_dir: str = "logs", name: str = DEFAULT_LOG_NAME, level: str = "DEBUG") -> None:
        """
        初始化日志管理器。

        Args:
            log_dir: 日志输出目录，默认 "logs"。
            name: 日志名称前缀，默认 "rps_basic"。
            level: logger 本身的最低等级，例如 "DEBUG"、"INFO"。
        """
        self.log_dir = log_dir
        self.name = name

        os.makedirs(log_dir, exist_ok=True)

        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.upper())

        # 避免重复添加 handler
        if not self.logger.handlers:
            self._setup_handlers()

    def _setup_handlers(self) -> None:
        """设置不同级别的日志处理器。"""
        for suffix, level, fmt in _LEVEL_FORMATS:
            handler = SafeRotatingFileHandler(
                os.path.join(self.log_dir, f"{self.name}_{suffix}.log"),
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5,
                encoding="utf-8",
            )
            handler.setLevel(level)
            handler.setFormatter(logging.Formatter(fmt))
            self.logger.addHandler(handler)

    def get_logger(self) -> logging.Logger:
        """获取底层 logger 实例。"""
        return self.logger

    def close(self) -> None:
        """
        关闭所有日志处理器。

        在程序退出或切换日志目录前调用，确保日志文件被正确关闭。
        """
        for handler in list(self.logger.handlers):
            handler.flush()
            handler.close()
            self.logger.removeHandler(handler)


_LOGGER_INSTANCE: Logger | None = None


def get_logger(log_dir: str = "logs", name: str = DEFAULT_LOG_NAME, level: str = "DEBUG") -> logging.Logger:
    """
    获取全局 logger 实例（单例）。

    只有第一次调用时的参数生效；要切换目录请先调用 close_logger()。

    Args:
        log_dir: 日志输出目录。
        name: 日志名称前缀。
        level: 最低日志等级。
    """
    global _LOGGER_INSTANCE
    if _LOGGER_INSTANCE is None:
        _LOGGER_INSTANCE = Logger(log_dir, name, level)
    return _LOGGER_INSTANCE.get_logger()


def close_logger() -> None:
    """
    关闭全局 logger 实例。

    在长时间运行的进程退出前调用，确保日志文件句柄释放。
    """
    global _LOGGER_INSTANCE
    if _LOGGER_INSTANCE is not None:
        _LOGGER_INSTANCE.close()
        _LOGGER_INSTANCE = None
