from fastapi import status

from table_booking.core.constants import (
    NO_AVAILABLE_TABLE_MESSAGE,
    RESERVATION_NOT_FOUND_MESSAGE,
)


class ReservationError(Exception):
    """Базовая ошибка операций с бронированиями."""

    status_code: int = status.HTTP_400_BAD_REQUEST


class NoAvailableTableError(ReservationError):
    """Нет свободного стола с достаточным количеством мест."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, guest_count: int) -> None:
        self.guest_count = guest_count
        super().__init__(
            NO_AVAILABLE_TABLE_MESSAGE.format(guest_count=guest_count),
        )


class ReservationNotFoundError(ReservationError):
    """Бронирование с указанным идентификатором не найдено."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, reservation_id: int | None) -> None:
        self.reservation_id = reservation_id
        super().__init__(RESERVATION_NOT_FOUND_MESSAGE)
