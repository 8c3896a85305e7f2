# app/core/middleware.py

import logging
import time
from typing import List

from fastapi import FastAPI, Request, Response
from starlette.routing import Match

from app.core.errors import unhandled_exception_handler

logger = logging.getLogger(__name__)

ALLOWED_HEADERS = (
    "X-CSRF-Token, X-Requested-With, Accept, Accept-Version, Content-Length, "
    "Content-MD5, Content-Type, Date, X-Api-Version"
)
# Методы, которые могут обслуживать обработчики (OPTIONS отвечает middleware)
ROUTABLE_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


def routed_methods(app: FastAPI, request: Request) -> List[str]:
    """
    Возвращает методы, которые реально обслуживаются по пути запроса.
    Для каждого метода роутер спрашивается так же, как при диспетчеризации:
    подходит только полное совпадение (Match.FULL).
    Пустой список - путь не принадлежит ни одному ресурсу.
    """
    methods = []
    for method in ROUTABLE_METHODS:
        scope = {**request.scope, "method": method}
        if any(route.matches(scope)[0] == Match.FULL for route in app.router.routes):
            methods.append(method)
    if methods:
        methods.append("OPTIONS")
    return methods


def cors_headers(methods: List[str]) -> dict:
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Allow-Methods": ",".join(methods or ["OPTIONS"]),
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
    }


def register_middleware(app: FastAPI):

    @app.middleware("http")
    async def cors_middleware(request: Request, call_next):
        # Preflight отвечаем сами: без тела, без обработчика и без похода в БД
        methods = routed_methods(request.app, request)
        if request.method == "OPTIONS" and methods:
            response = Response(status_code=200)
        else:
            try:
                response = await call_next(request)
            except Exception as exc:
                # Иначе ответ 500 собирается снаружи middleware и уходит без CORS-заголовков
                response = await unhandled_exception_handler(request, exc)
        response.headers.update(cors_headers(methods))
        return response

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
        return response
