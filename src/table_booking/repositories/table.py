from typing import Iterable, Optional

from table_booking.models import Table
from table_booking.repositories.base import CRUDBase


class TableRepository(CRUDBase[Table]):
    """Репозиторий для операций со столами."""

    def __init__(self, tables: Iterable[Table] = ()) -> None:
        """Инициализация репозитория столов."""
        super().__init__(Table, tables)

    @classmethod
    def from_seats(cls, seats: Iterable[int]) -> 'TableRepository':
        """Создает столы с идентификаторами 1..N в порядке списка мест."""
        return cls(
            Table(id=table_id, seats=count)
            for table_id, count in enumerate(seats, start=1)
        )

    def find_first_fit(self, guest_count: int) -> Optional[Table]:
        """Возвращает первый свободный стол, вмещающий гостей."""
        return self.get(
            lambda table: table.fits(guest_count),
            available=True,
        )

    def set_available(self, table_id: int, available: bool) -> bool:
        """Меняет доступность стола, False если стол не найден."""
        table = self.get(id=table_id)
        if table is None:
            return False
        self.update_obj(table, available=available)
        return True
