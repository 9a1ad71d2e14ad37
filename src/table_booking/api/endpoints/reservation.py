from typing import NoReturn

from fastapi import APIRouter, HTTPException, status
from loguru import logger

from table_booking.core.constants import (
    CANCELLED_MESSAGE,
    INTERNAL_ERROR_MESSAGE,
    RESERVED_MESSAGE,
    UPDATED_MESSAGE,
)
from table_booking.core.dependencies import StoreDep
from table_booking.core.exceptions import ReservationError
from table_booking.schemas.common import ErrorResponse, SuccessResponse
from table_booking.schemas.reservation import (
    ReservationInfo,
    ReservationRequest,
)
from table_booking.utils.http import (
    build_error,
    build_success,
    parse_int_prefix,
)
from table_booking.utils.logging_decorator import event_logger

router = APIRouter(tags=['Бронирования'])


def _raise_http(exc: Exception, action: str) -> NoReturn:
    """Преобразует ошибку хранилища в HTTPException."""
    if isinstance(exc, ReservationError):
        logger.warning(f'Не удалось {action}: {exc}')
        raise HTTPException(
            status_code=exc.status_code,
            detail=build_error(exc),
        )
    logger.error(f'Неожиданная ошибка, не удалось {action}: {str(exc)}')
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=build_error(INTERNAL_ERROR_MESSAGE),
    )


@router.get(
    '/reservations',
    response_model=list[ReservationInfo],
    responses={
        status.HTTP_500_INTERNAL_SERVER_ERROR: {'model': ErrorResponse},
    },
)
async def get_all_reservations(store: StoreDep) -> list[ReservationInfo]:
    """Получает список бронирований в порядке их создания."""
    return store.list_reservations()


@router.post(
    '/reserve',
    response_model=SuccessResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {'model': ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {'model': ErrorResponse},
    },
)
@event_logger('Создана', 'reservations')
async def create_reservation(
    reservation_data: ReservationRequest,
    store: StoreDep,
) -> SuccessResponse:
    """Бронирует первый свободный стол, вмещающий всех гостей.

    Args:
        reservation_data: Имя гостя, количество гостей и время
        store: Хранилище бронирований приложения
    Returns:
        SuccessResponse: Сообщение с номером забронированного стола
    Raises:
        HTTPException: 400 если нет свободного стола на нужное число мест

    """
    try:
        reservation = store.reserve(
            reservation_data.customer_name,
            reservation_data.guest_count,
            reservation_data.time,
        )
    except Exception as e:
        _raise_http(e, 'создать бронирование')
    return build_success(
        RESERVED_MESSAGE.format(
            table_id=reservation.table_id,
            customer_name=reservation.customer_name,
            guest_count=reservation.guest_count,
        ),
    )


@router.put(
    '/update/{reservation_id}',
    response_model=SuccessResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {'model': ErrorResponse},
        status.HTTP_404_NOT_FOUND: {'model': ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {'model': ErrorResponse},
    },
)
@event_logger('Обновлена', 'reservations')
async def update_reservation(
    reservation_id: str,
    reservation_data: ReservationRequest,
    store: StoreDep,
) -> SuccessResponse:
    """Обновляет имя, количество гостей и время бронирования.

    Args:
        reservation_id: Идентификатор бронирования из пути
        reservation_data: Новые данные бронирования
        store: Хранилище бронирований приложения
    Returns:
        SuccessResponse: Сообщение об успешном обновлении
    Raises:
        HTTPException: 404 если бронирование не найдено
        HTTPException: 400 если ни один стол не вмещает новое число гостей

    """
    try:
        store.update(
            parse_int_prefix(reservation_id),
            reservation_data.customer_name,
            reservation_data.guest_count,
            reservation_data.time,
        )
    except Exception as e:
        _raise_http(e, f'обновить бронирование {reservation_id}')
    return build_success(UPDATED_MESSAGE)


@router.delete(
    '/cancel/{reservation_id}',
    response_model=SuccessResponse,
    responses={
        status.HTTP_404_NOT_FOUND: {'model': ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {'model': ErrorResponse},
    },
)
@event_logger('Отменена', 'reservations')
async def cancel_reservation(
    reservation_id: str,
    store: StoreDep,
) -> SuccessResponse:
    """Отменяет бронирование и освобождает стол.

    Raises:
        HTTPException: 404 если бронирование не найдено

    """
    try:
        store.cancel(parse_int_prefix(reservation_id))
    except Exception as e:
        _raise_http(e, f'отменить бронирование {reservation_id}')
    return build_success(CANCELLED_MESSAGE)
