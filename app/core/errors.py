# app/core/errors.py

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# Человекочитаемые названия полей для сообщений об ошибках валидации
FIELD_LABELS = {
    "business_id": "Business ID",
    "businessId": "Business ID",
    "customer_id": "Customer ID",
    "reward_id": "Reward ID",
    "id": "ID",
    "name": "Name",
    "type": "Type",
    "points_required": "Points required",
    "points_balance": "Points balance",
    "redemption_limit": "Redemption limit",
    "target_type": "Target type",
    "target_id": "Target ID",
    "qr_data": "QR data",
    "key": "Setting key",
    "value": "Setting value",
    "comment": "Comment text",
    "code": "Code",
    "customerId": "Customer ID",
    "programId": "Program ID",
    "program_id": "Program ID",
    "amount": "Amount",
    "pointsEarned": "Points earned",
    "receiptNumber": "Receipt number",
    "expires_at": "Expiry date",
}

MISSING_ERROR_TYPES = {"missing", "string_too_short", "none_required"}


class ApiError(Exception):
    """
    Ожидаемая ошибка обработчика (400/404/409...).
    Все лишние именованные аргументы попадают в тело ответа как есть.
    """

    def __init__(self, status_code: int, message: str, **extra: Any):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.extra = extra


def error_body(message: str, **extra: Any) -> Dict[str, Any]:
    return {"success": False, "message": message, **extra}


def field_label(name: str) -> str:
    return FIELD_LABELS.get(name, name.replace("_", " ").capitalize())


def describe_validation_error(error: Dict[str, Any]) -> str:
    """
    Превращает одну ошибку pydantic в сообщение вида "Business ID is required".
    Пустая строка и null считаются отсутствующим значением.
    """
    loc = list(error.get("loc", ()))
    source = loc[0] if loc else "body"
    fields = [str(part) for part in loc[1:] if not isinstance(part, int)]

    # у кастомных валидаторов pydantic добавляет префикс "Value error, "
    message = str(error.get("msg", "invalid value")).removeprefix("Value error, ")

    if not fields:
        return "Request body is required" if error.get("type") == "missing" else message

    label = field_label(fields[0])
    # пустой параметр запроса (?businessId=) тоже считается отсутствующим
    is_missing = error.get("type") in MISSING_ERROR_TYPES or (
        "input" in error and error["input"] in (None, "")
    )

    if is_missing:
        if source == "query":
            return f"{label} is required as a query parameter"
        return f"{label} is required"

    return f"{label} is invalid: {message}"


def validation_messages(errors: List[Dict[str, Any]]) -> List[str]:
    messages = []
    for error in errors:
        message = describe_validation_error(error)
        if message not in messages:
            messages.append(message)
    return messages


# --- Обработчики исключений ---

async def api_error_handler(request: Request, exc: ApiError):
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(error_body(exc.message, **exc.extra)),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    messages = validation_messages(exc.errors())
    logger.info(f"Validation failed for {request.method} {request.url.path}: {messages}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(messages[0] if messages else "Validation error", errors=messages),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        message = f"Method {request.method} not allowed"
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(message),
        headers=getattr(exc, "headers", None),
    )


async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error for request: {request.method} {request.url.path}", exc_info=exc)
    settings = request.app.state.settings
    extra = {"error": str(exc.__cause__ or exc)} if settings.expose_error_details else {}
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error", **extra),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    """
    Глобальный обработчик для всех необработанных исключений.
    """
    logger.critical(f"Unhandled exception for request: {request.method} {request.url}", exc_info=exc)
    settings = request.app.state.settings
    extra = {"error": str(exc)} if settings.expose_error_details else {}
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error", **extra),
    )


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
