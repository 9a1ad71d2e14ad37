from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from table_booking.core.constants import (
    REQUIRED_ERROR_TYPES,
    REQUIRED_FIELDS_MESSAGE,
)
from table_booking.utils.http import build_error


def _format_error(detail: Any) -> dict[str, str]:
    """Форматирует сообщение об ошибке в единый вид."""
    if isinstance(detail, dict):
        detail_str = detail.get('error') or detail.get('detail')
        return build_error(detail_str if detail_str else detail)
    if isinstance(detail, list):
        detail = '; '.join(str(item) for item in detail)
    return build_error(detail)


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Перехватывает ошибки валидации и возвращает понятные сообщения."""
    errors = exc.errors()
    if any(error['type'] in REQUIRED_ERROR_TYPES for error in errors):
        message = REQUIRED_FIELDS_MESSAGE
    else:
        messages = [
            error['msg'].replace('Value error, ', '') for error in errors
        ]
        message = '; '.join(messages) if messages else REQUIRED_FIELDS_MESSAGE
    logger.warning(
        f'Ошибка валидации {request.method} {request.url.path}: {message}',
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=build_error(message),
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """Унифицирует формат ответа для HTTP исключений."""
    return JSONResponse(
        status_code=exc.status_code,
        content=_format_error(exc.detail),
        headers=getattr(exc, 'headers', None),
    )
