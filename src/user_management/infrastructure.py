"""
Инфраструктурный слой контекста управления пользователями.

Содержит реализации репозиториев и Unit of Work, хранящие данные в памяти процесса.
"""

from __future__ import annotations

import threading
from typing import List, Optional

from shared_kernel import ILogger, StandardLogger

from . import interfaces as ports
from .domain import User


class InMemoryUserRepository(ports.IUserRepository):
    """Реализация репозитория пользователей в памяти.

    Пользователи хранятся в списке в порядке добавления. Поиск по имени
    линейный и возвращает первое совпадение; одинаковые имена допускаются.
    """

    def __init__(self):
        self._users: List[User] = []

    def add(self, user: User) -> None:
        self._users.append(user)

    def get(self, name: str) -> Optional[User]:
        return next((user for user in self._users if user.name == name), None)

    def update(self, user: User) -> None:
        for index, stored in enumerate(self._users):
            if stored.id == user.id:
                self._users[index] = user
                return
        raise KeyError(f"User with id {user.id} not found")

    def delete(self, name: str) -> None:
        user = self.get(name)
        if user is not None:
            self._users.remove(user)

    def list(self) -> List[User]:
        return list(self._users)


class UserUnitOfWork(ports.IUserUnitOfWork):
    """Единица работы для контекста управления пользователями.

    На время сценария удерживает блокировку, поэтому обращения из разных
    потоков выполняются последовательно.
    """

    def __init__(
        self,
        users_repo: Optional[ports.IUserRepository] = None,
        logger: Optional[ILogger] = None,
        lock: Optional[threading.RLock] = None,
    ):
        self._users = users_repo or InMemoryUserRepository()
        self._logger = logger or StandardLogger("user_management")
        self._lock = lock or threading.RLock()
        self._committed = False

    @property
    def users(self) -> ports.IUserRepository:
        return self._users

    def commit(self) -> None:
        """Фиксирует все изменения."""
        # Данные живут в памяти, фиксировать нечего, кроме факта успеха
        self._committed = True
        self._logger.debug("UserUnitOfWork committed")

    def rollback(self) -> None:
        """Откатывает все изменения."""
        self._committed = False
        self._logger.debug("UserUnitOfWork rolled back")

    def __enter__(self):
        self._lock.acquire()
        self._committed = False
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
        finally:
            self._lock.release()
        return False  # Пробрасываем исключение дальше, если оно было
