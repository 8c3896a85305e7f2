# api/index.py
# Точка входа для serverless-платформы: она импортирует модуль на каждый запрос к /api/*
# и берет ASGI-приложение из переменной `app`. Вся маршрутизация внутри FastAPI.

from app.main import create_app

app = create_app()
