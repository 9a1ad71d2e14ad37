from itertools import count
from typing import Optional

from table_booking.models import Reservation
from table_booking.repositories.base import CRUDBase
from table_booking.utils.enums import ReservationStatus


class ReservationRepository(CRUDBase[Reservation]):
    """Репозиторий для операций с бронированиями."""

    def __init__(self) -> None:
        """Инициализация репозитория бронирований."""
        super().__init__(Reservation)
        self._ids = count(1)

    def get_by_id(self, reservation_id: Optional[int]) -> Optional[Reservation]:
        """Ищет бронирование по полю id."""
        if reservation_id is None:
            return None
        return self.get(id=reservation_id)

    def create_confirmed(
        self,
        table_id: int,
        customer_name: str,
        guest_count: int,
        time: str,
    ) -> Reservation:
        """Создает подтверждённое бронирование со следующим id.

        Идентификаторы не переиспользуются после отмены.
        """
        return self.create(
            id=next(self._ids),
            table_id=table_id,
            customer_name=customer_name,
            guest_count=guest_count,
            time=time,
            status=ReservationStatus.CONFIRMED,
        )
