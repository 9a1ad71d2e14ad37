from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from table_booking.api.endpoints import routers
from table_booking.core.config import settings
from table_booking.core.exception_handler import (
    http_exception_handler,
    validation_exception_handler,
)
from table_booking.core.logging import configure_logging
from table_booking.middleware.http_logging import logging_middleware
from table_booking.services.reservation_store import ReservationStore


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator:
    """Запускает логгер при запуске приложения."""
    configure_logging()
    logger.info(
        f'Хранилище готово: {len(app.state.store.list_tables())} столов',
    )
    yield
    logger.info('Приложение остановлено, бронирования сброшены')


def create_app(store: Optional[ReservationStore] = None) -> FastAPI:
    """Собирает приложение с переданным или новым хранилищем."""
    app = FastAPI(
        title=settings.APP_TITLE,
        description='API для бронирования столов в ресторане',
        version='0.1.0',
        lifespan=lifespan,
    )
    if store is None:
        store = ReservationStore.from_seats(settings.TABLE_SEATS)
    app.state.store = store

    app.add_exception_handler(
        RequestValidationError,
        validation_exception_handler,
    )
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    app.middleware('http')(logging_middleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    for router in routers:
        app.include_router(router)
    return app


app = create_app()


def run() -> None:
    """Запускает uvicorn на адресе из настроек."""
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )


if __name__ == '__main__':
    run()
