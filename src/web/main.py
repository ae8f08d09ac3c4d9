"""
Точка входа HTTP-интерфейса.

``create_app`` настраивает логирование, собирает компоненты через
``bootstrap_app`` и подключает маршруты. Экземпляр ``app`` создается
при импорте, чтобы ASGI-сервер мог его найти::

    uvicorn web.main:app --reload
"""

from typing import Optional

from bootstrap import bootstrap_app
from fastapi import FastAPI
from shared_kernel import Settings, setup_logging

from .router import router


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Создает и настраивает приложение FastAPI.

    Каждый вызов получает собственные хранилища, поэтому состояние
    не разделяется между приложениями.
    """
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.container = bootstrap_app(settings)
    app.include_router(router)
    return app


app = create_app()
