"""
Logging — настройка логирования и адаптер TextSink → logging

setup_logging() ставит один stream handler на root logger (повторный вызов
не дублирует handlers). LoggingTextSink реализует порт TextSink поверх
logging.Logger: одна строка = одна запись лога.
"""

import logging
import sys
from typing import Optional

from c_hex.config import LoggingConfig


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """Настройка root logger (один раз при старте приложения)."""
    config = config or LoggingConfig()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(config.fmt, datefmt=config.datefmt))

    root = logging.getLogger()
    if not root.handlers:
        root.addHandler(handler)
    root.setLevel(config.level)


def get_logger(name: str, config: Optional[LoggingConfig] = None) -> logging.Logger:
    """Логгер в namespace пакета (например, 'c_hex.user')."""
    namespace = (config or LoggingConfig()).namespace
    return logging.getLogger(f"{namespace}.{name}")


class LoggingTextSink:
    """
    Адаптер TextSink → logging.Logger.

    Args:
        logger: целевой логгер (по умолчанию get_logger("user"))
        level: уровень записей (по умолчанию LoggingConfig.sink_level)
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        level: Optional[int] = None,
        config: Optional[LoggingConfig] = None,
    ):
        config = config or LoggingConfig()
        self.logger = logger or get_logger("user", config)
        self.level = config.sink_level if level is None else level

    def __call__(self, line: str) -> None:
        self.logger.log(self.level, line)

    def __repr__(self) -> str:
        return f"LoggingTextSink(logger={self.logger.name!r}, level={logging.getLevelName(self.level)})"
