from dataclasses import dataclass

from table_booking.utils.enums import ReservationStatus


@dataclass
class Reservation:
    """Бронирование стола за гостем на указанное время."""

    id: int
    table_id: int
    customer_name: str
    guest_count: int
    time: str
    status: ReservationStatus = ReservationStatus.CONFIRMED
