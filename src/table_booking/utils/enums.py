from enum import Enum


class ReservationStatus(str, Enum):
    """Enum класс для статусов бронирований."""

    CONFIRMED = 'confirmed'
