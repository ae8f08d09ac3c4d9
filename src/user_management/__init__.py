"""
Модуль контекста управления пользователями (User Management Context).

Отвечает за каталог пользователей платформы, включая:
- Регистрацию пользователя с проверкой минимального возраста
- Поиск пользователя по имени
- Изменение возраста и удаление пользователя
"""

from . import domain, application, infrastructure, interfaces

__all__ = [
    'domain',
    'application',
    'infrastructure',
    'interfaces',
]
