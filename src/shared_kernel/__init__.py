"""
Общее ядро (Shared Kernel) платформы пользователей и бронирований.

Содержит общие типы данных, ошибки и утилиты, используемые в ограниченных контекстах.
"""

from .config import Settings
from .domain import (
    # Исключения
    DomainException,
    # Базовые типы
    EntityId,
    Failure,
    NotFound,
    Result,
    # Результаты
    Success,
    UserNotFound,
    ValidationError,
    generate_id,
)
from .infrastructure import StandardLogger, setup_logging
from .interfaces import ILogger

__all__ = [
    # Базовые типы
    "EntityId",
    "generate_id",
    # Результаты
    "Success",
    "Failure",
    "Result",
    # Исключения
    "DomainException",
    "ValidationError",
    "NotFound",
    "UserNotFound",
    # Логирование и настройки
    "ILogger",
    "StandardLogger",
    "setup_logging",
    "Settings",
]
