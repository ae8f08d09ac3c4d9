"""
Конфигурация тестов для pytest.
Добавляет каталог src в PYTHONPATH и предоставляет фикстуры с чистыми хранилищами.
"""
import sys
from pathlib import Path

import pytest

# Добавляем каталог с исходным кодом в PYTHONPATH
root_dir = str(Path(__file__).parent.parent / "src")
if root_dir not in sys.path:
    sys.path.insert(0, root_dir)

from bootstrap import bootstrap_app  # noqa: E402
from shared_kernel import Settings  # noqa: E402


@pytest.fixture
def container():
    """Полностью собранное приложение с пустыми хранилищами."""
    return bootstrap_app(Settings())


@pytest.fixture
def user_service(container):
    return container["user_service"]


@pytest.fixture
def booking_service(container):
    return container["booking_service"]
