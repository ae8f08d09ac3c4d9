"""
Настройки приложения.

Значения читаются из переменных окружения в ``Settings.from_env``;
для всех полей заданы значения по умолчанию.
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    """Настройки платформы."""

    project_name: str = "User Booking Platform"
    api_version: str = "1.0.0"
    log_level: str = Field(default="INFO", description="Уровень логирования")
    log_file: Optional[str] = Field(
        default=None, description="Файл для логов; если не задан, только консоль"
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Неизвестный уровень логирования: {v}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Создает настройки из переменных окружения."""
        env = os.environ if environ is None else environ
        values = {
            "project_name": env.get("PROJECT_NAME"),
            "api_version": env.get("API_VERSION"),
            "log_level": env.get("LOG_LEVEL"),
            "log_file": env.get("LOG_FILE") or None,
        }
        return cls(**{key: value for key, value in values.items() if value is not None})
