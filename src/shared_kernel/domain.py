"""
Основные доменные типы и утилиты общего ядра.
"""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union
from uuid import UUID, uuid4

# Общие типы идентификаторов
EntityId = UUID

T = TypeVar("T")


def generate_id() -> UUID:
    """Генерирует новый UUID."""
    return uuid4()


# Общие исключения
class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class ValidationError(DomainException):
    """Исключение при нарушении бизнес-правил (например, возрастного ограничения)."""

    pass


class NotFound(DomainException):
    """Запрошенная сущность не найдена."""

    pass


class UserNotFound(NotFound):
    """Пользователь, на которого ссылается операция, не существует."""

    pass


# Результат выполнения сценария
@dataclass(frozen=True)
class Success(Generic[T]):
    """Успешный результат операции."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """Неуспешный результат операции, несущий доменную ошибку."""

    error: DomainException

    @property
    def is_success(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return str(self.error)

    def unwrap(self) -> NoReturn:
        raise self.error


Result = Union[Success[T], Failure]


