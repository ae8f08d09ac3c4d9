"""
Корневой маршрутизатор HTTP-интерфейса.
"""

from fastapi import APIRouter

from .endpoints import bookings, users

router = APIRouter()

router.include_router(users.router, tags=["users"])
router.include_router(bookings.router, tags=["bookings"])
