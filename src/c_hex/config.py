"""Конфигурация c_hex (Pydantic BaseSettings).

Единственная настраиваемая часть пакета: логирование
(формат, уровень, namespace логгеров, уровень строк TextSink).

Переменные окружения с префиксом C_HEX_LOG_:
- C_HEX_LOG_LEVEL: уровень root logger (DEBUG, INFO, WARNING, ... или число)
- C_HEX_LOG_SINK_LEVEL: уровень строк LoggingTextSink
- C_HEX_LOG_NAMESPACE: префикс имён логгеров
"""

import logging
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseSettings):
    """Конфигурация логирования.

    Неизвестное имя уровня → logging.INFO.
    """

    level: int = Field(default=logging.INFO, description="Уровень root logger")
    fmt: str = Field(
        default="%(asctime)s | %(levelname)-8s | %(name)-30s | %(message)s",
        description="Формат записей stream handler",
    )
    datefmt: str = Field(default="%Y-%m-%d %H:%M:%S", description="Формат даты")
    namespace: str = Field(default="c_hex", description="Префикс имён логгеров пакета")
    sink_level: int = Field(
        default=logging.INFO, description="Уровень, с которым LoggingTextSink пишет строки"
    )

    model_config = SettingsConfigDict(env_prefix="C_HEX_LOG_", frozen=True, extra="ignore")

    @field_validator("level", "sink_level", mode="before")
    @classmethod
    def parse_level(cls, v: Any) -> Any:
        """Имя уровня ('debug', 'INFO') или число → int"""
        if not isinstance(v, str):
            return v
        name = v.strip().upper()
        if name.isdigit():
            return int(name)
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.INFO
