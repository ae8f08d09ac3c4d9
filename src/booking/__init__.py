"""
Модуль контекста бронирования (Booking Context).

Отвечает за журнал бронирований, включая:
- Создание бронирования для существующего пользователя
- Получение списка бронирований пользователя
"""

from . import domain, application, infrastructure, interfaces

__all__ = [
    'domain',
    'application',
    'infrastructure',
    'interfaces',
]
