"""
Маршруты каталога пользователей.

Регистрация, поиск по имени, изменение возраста и удаление. Ошибки
проверки возраста возвращаются как 400, отсутствие пользователя как 404.
"""

from typing import List

from fastapi import APIRouter, Body, Depends, Path, status
from user_management.application import (
    RegisterUserRequest,
    UpdateUserAgeRequest,
    UserApplicationService,
    UserDTO,
)

from ..dependencies import get_user_service, unwrap_or_raise

router = APIRouter()


@router.post("/register", response_model=UserDTO)
def register_user(
    request: RegisterUserRequest,
    service: UserApplicationService = Depends(get_user_service),
) -> UserDTO:
    """Зарегистрировать пользователя (возраст не меньше 18 лет)."""
    return unwrap_or_raise(service.register_user(request))


@router.get("/users", response_model=List[UserDTO])
def list_users(
    service: UserApplicationService = Depends(get_user_service),
) -> List[UserDTO]:
    return unwrap_or_raise(service.list_users())


@router.get("/user/{name}", response_model=UserDTO)
def get_user(
    name: str = Path(..., description="Имя пользователя"),
    service: UserApplicationService = Depends(get_user_service),
) -> UserDTO:
    """Найти первого пользователя с указанным именем."""
    return unwrap_or_raise(
        service.get_user(name), status_code=status.HTTP_404_NOT_FOUND
    )


@router.put("/user/{name}/age", response_model=UserDTO)
def update_user_age(
    name: str = Path(..., description="Имя пользователя"),
    age: int = Body(..., embed=True),
    service: UserApplicationService = Depends(get_user_service),
) -> UserDTO:
    """Изменить возраст пользователя."""
    result = service.update_user_age(UpdateUserAgeRequest(name=name, age=age))
    return unwrap_or_raise(result, not_found_status=status.HTTP_404_NOT_FOUND)


@router.delete("/user/{name}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    name: str = Path(..., description="Имя пользователя"),
    service: UserApplicationService = Depends(get_user_service),
) -> None:
    unwrap_or_raise(service.delete_user(name))
