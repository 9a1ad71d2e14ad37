import threading
from copy import copy
from typing import Iterable

from loguru import logger

from table_booking.core.exceptions import (
    NoAvailableTableError,
    ReservationNotFoundError,
)
from table_booking.models import Reservation, Table
from table_booking.repositories import ReservationRepository, TableRepository


class ReservationStore:
    """Хранилище столов и бронирований в памяти процесса.

    Столы создаются один раз из списка мест и далее не добавляются
    и не удаляются. Все изменения выполняются под блокировкой, поэтому
    цепочки чтение-изменение-запись атомарны даже при обработке
    запросов в пуле потоков.
    """

    def __init__(self, tables: TableRepository) -> None:
        """Инициализация хранилища."""
        self.tables = tables
        self.reservations = ReservationRepository()
        self._lock = threading.RLock()

    @classmethod
    def from_seats(cls, seats: Iterable[int]) -> 'ReservationStore':
        """Создает хранилище со столами из списка количества мест."""
        return cls(TableRepository.from_seats(seats))

    def list_tables(self) -> list[Table]:
        """Возвращает снимок всех столов в порядке создания."""
        with self._lock:
            return [copy(table) for table in self.tables.get_multi()]

    def list_reservations(self) -> list[Reservation]:
        """Возвращает снимок всех бронирований в порядке создания."""
        with self._lock:
            return [copy(item) for item in self.reservations.get_multi()]

    def get_reservation(self, reservation_id: int | None) -> Reservation:
        """Возвращает копию бронирования или ReservationNotFoundError."""
        with self._lock:
            return copy(self._get_or_raise(reservation_id))

    def reserve(
        self,
        customer_name: str,
        guest_count: int,
        time: str,
    ) -> Reservation:
        """Бронирует первый подходящий свободный стол.

        Args:
            customer_name: Имя гостя
            guest_count: Количество гостей
            time: Время бронирования, формат не проверяется
        Returns:
            Reservation: Созданное бронирование
        Raises:
            NoAvailableTableError: Нет свободного стола на guest_count мест

        """
        with self._lock:
            table = self.tables.find_first_fit(guest_count)
            if table is None:
                logger.info(f'Нет свободных столов для {guest_count} гостей')
                raise NoAvailableTableError(guest_count)
            self.tables.update_obj(table, available=False)
            reservation = self.reservations.create_confirmed(
                table_id=table.id,
                customer_name=customer_name,
                guest_count=guest_count,
                time=time,
            )
            logger.info(
                f'Бронирование {reservation.id}: стол {table.id} '
                f'для {customer_name} ({guest_count} гостей)',
            )
            return copy(reservation)

    def update(
        self,
        reservation_id: int | None,
        customer_name: str,
        guest_count: int,
        time: str,
    ) -> Reservation:
        """Обновляет имя, количество гостей и время бронирования.

        Если текущий стол больше не вмещает гостей, бронирование
        переносится на первый подходящий свободный стол. Если такого
        стола нет, состояние не меняется.

        Raises:
            ReservationNotFoundError: Бронирование не найдено
            NoAvailableTableError: Нет стола для нового количества гостей

        """
        with self._lock:
            reservation = self._get_or_raise(reservation_id)
            table_id = self._rebind_table(reservation, guest_count)
            self.reservations.update_obj(
                reservation,
                table_id=table_id,
                customer_name=customer_name,
                guest_count=guest_count,
                time=time,
            )
            logger.info(f'Бронирование {reservation.id} обновлено')
            return copy(reservation)

    def cancel(self, reservation_id: int | None) -> Reservation:
        """Отменяет бронирование и освобождает его стол.

        Raises:
            ReservationNotFoundError: Бронирование не найдено

        """
        with self._lock:
            reservation = self._get_or_raise(reservation_id)
            if not self.tables.set_available(reservation.table_id, True):
                logger.warning(
                    f'Стол {reservation.table_id} бронирования '
                    f'{reservation.id} не найден',
                )
            self.reservations.delete(reservation)
            logger.info(f'Бронирование {reservation.id} отменено')
            return reservation

    def _get_or_raise(self, reservation_id: int | None) -> Reservation:
        reservation = self.reservations.get_by_id(reservation_id)
        if reservation is None:
            raise ReservationNotFoundError(reservation_id)
        return reservation

    def _rebind_table(self, reservation: Reservation, guest_count: int) -> int:
        """Возвращает стол, за которым останется бронирование."""
        current = self.tables.get(id=reservation.table_id)
        if current is None or current.fits(guest_count):
            return reservation.table_id
        target = self.tables.find_first_fit(guest_count)
        if target is None:
            raise NoAvailableTableError(guest_count)
        self.tables.update_obj(current, available=True)
        self.tables.update_obj(target, available=False)
        logger.info(
            f'Бронирование {reservation.id} перенесено '
            f'со стола {current.id} на стол {target.id}',
        )
        return target.id
