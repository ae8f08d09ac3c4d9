"""
Прикладной слой контекста управления пользователями.

Сервис приложения проверяет входные данные до любых изменений хранилища
и возвращает результат операции (``Success``/``Failure``) вместо исключений.
"""

from typing import List, Optional

from pydantic import BaseModel, Field
from shared_kernel import (
    DomainException,
    EntityId,
    Failure,
    ILogger,
    NotFound,
    Result,
    StandardLogger,
    Success,
)

from . import interfaces as ports
from .domain import User, UserPolicy

# DTO (Data Transfer Objects) для входящих данных


class RegisterUserRequest(BaseModel):
    """Запрос на регистрацию пользователя."""

    name: str = Field(..., min_length=1)
    age: int


class UpdateUserAgeRequest(BaseModel):
    """Запрос на изменение возраста пользователя."""

    name: str = Field(..., min_length=1)
    age: int


# DTO для исходящих данных


class UserDTO(BaseModel):
    """DTO для представления пользователя."""

    id: EntityId
    name: str
    age: int

    @classmethod
    def from_domain(cls, user: User) -> "UserDTO":
        """Создает DTO из доменной модели."""
        return cls(id=user.id, name=user.name, age=user.age)


# Сервисы приложения


class UserApplicationService:
    """Сервис приложения для работы с каталогом пользователей."""

    def __init__(self, uow: ports.IUserUnitOfWork, logger: Optional[ILogger] = None):
        """Инициализирует сервис."""
        self._uow = uow
        self._logger = logger or StandardLogger("user_management")

    def register_user(self, request: RegisterUserRequest) -> Result[UserDTO]:
        """Регистрирует нового пользователя."""
        try:
            with self._uow:
                # Политика проверяется при создании сущности, до добавления в репозиторий
                user = User.register(name=request.name, age=request.age)
                self._uow.users.add(user)
        except DomainException as e:
            self._logger.warning(
                "User registration rejected", name=request.name, reason=str(e)
            )
            return Failure(e)

        self._logger.info("User registered", name=user.name, user_id=user.id)
        return Success(UserDTO.from_domain(user))

    def get_user(self, name: str) -> Result[UserDTO]:
        """Возвращает первого пользователя с указанным именем."""
        with self._uow:
            user = self._uow.users.get(name)
            if user is None:
                return Failure(NotFound(f"Пользователь {name} не найден"))
            return Success(UserDTO.from_domain(user))

    def update_user_age(self, request: UpdateUserAgeRequest) -> Result[UserDTO]:
        """Изменяет возраст пользователя."""
        try:
            UserPolicy.validate_age(request.age)
            with self._uow:
                user = self._uow.users.get(request.name)
                if user is None:
                    raise NotFound(f"Пользователь {request.name} не найден")
                user.update_age(request.age)
                self._uow.users.update(user)
                dto = UserDTO.from_domain(user)
        except DomainException as e:
            self._logger.warning(
                "User age update rejected", name=request.name, reason=str(e)
            )
            return Failure(e)

        self._logger.info("User age updated", name=dto.name, age=dto.age)
        return Success(dto)

    def delete_user(self, name: str) -> Result[None]:
        """Удаляет первого пользователя с указанным именем, если он есть."""
        with self._uow:
            self._uow.users.delete(name)
        self._logger.info("User deleted", name=name)
        return Success(None)

    def list_users(self) -> Result[List[UserDTO]]:
        """Возвращает всех пользователей в порядке регистрации."""
        with self._uow:
            users = self._uow.users.list()
        return Success([UserDTO.from_domain(user) for user in users])
