"""
Инфраструктура общего ядра: настройка логирования и адаптер логгера.

Компоненты контекстов пишут логи через порт ``ILogger`` и получают
реализацию через конструктор. ``StandardLogger`` направляет сообщения
в модуль ``logging`` стандартной библиотеки.
"""

import logging
from pathlib import Path
from typing import Any, Optional

from .interfaces import ILogger

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Настраивает корневой логгер.

    Если у корневого логгера уже есть обработчики, повторная настройка
    не выполняется (например, при многократном вызове ``create_app`` в тестах).

    Args:
        level: Имя уровня логирования (``"DEBUG"``, ``"INFO"``...), без учета регистра.
        logfile: Путь к файлу для записи логов. Если не задан, пишем только в консоль.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)


class StandardLogger(ILogger):
    """Логгер поверх ``logging``; контекст выводится парами key=value."""

    def __init__(self, name: str = "platform"):
        self._logger = logging.getLogger(name)

    @staticmethod
    def _format(message: str, context: dict) -> str:
        if not context:
            return message
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{message} [{pairs}]"

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(self._format(message, kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(self._format(message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(self._format(message, kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(self._format(message, kwargs))
