"""
Интерфейсы (порты) для контекста управления пользователями.
"""

from __future__ import annotations

from typing import Any, List, Optional, Protocol

from .domain import User


class IUserRepository(Protocol):
    """Интерфейс репозитория для пользователей."""

    def add(self, user: User) -> None: ...
    def get(self, name: str) -> Optional[User]: ...
    def update(self, user: User) -> None: ...
    def delete(self, name: str) -> None: ...
    def list(self) -> List[User]: ...


class IUserUnitOfWork(Protocol):
    """Интерфейс Unit of Work для контекста управления пользователями."""

    @property
    def users(self) -> IUserRepository: ...

    def __enter__(self) -> IUserUnitOfWork: ...
    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> bool: ...
    def commit(self) -> None: ...
    def rollback(self) -> None: ...
