"""
Доменная модель контекста управления пользователями.

Содержит сущность пользователя и политику допустимого возраста.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from shared_kernel import EntityId, ValidationError, generate_id


class UserPolicy:
    """Политики и бизнес-правила для пользователей."""

    MINIMUM_AGE = 18

    @classmethod
    def validate_age(cls, age: int) -> None:
        """Проверяет, что возраст не меньше минимально допустимого."""
        if age < cls.MINIMUM_AGE:
            raise ValidationError(
                f"Пользователь должен быть не младше {cls.MINIMUM_AGE} лет"
            )


class User(BaseModel):
    """Пользователь платформы."""

    model_config = ConfigDict(validate_assignment=True)

    id: EntityId = Field(default_factory=generate_id)
    name: str = Field(..., min_length=1)
    age: int = Field(..., ge=0)

    @field_validator("age")
    @classmethod
    def age_meets_policy(cls, v: int) -> int:
        # ValidationError не является ValueError, поэтому pydantic пробрасывает его как есть
        UserPolicy.validate_age(v)
        return v

    @classmethod
    def register(cls, name: str, age: int) -> "User":
        """Регистрирует нового пользователя."""
        UserPolicy.validate_age(age)
        return cls(name=name, age=age)

    def update_age(self, new_age: int) -> None:
        """Изменяет возраст с повторной проверкой политики."""
        UserPolicy.validate_age(new_age)
        self.age = new_age
