"""
HTTP-интерфейс платформы (FastAPI).

Маршруты переводят результаты сервисов приложения в ответы HTTP.
"""
