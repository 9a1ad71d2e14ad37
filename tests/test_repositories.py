import pytest

from table_booking.models import Table
from table_booking.repositories import ReservationRepository, TableRepository


class TestTableRepository:

    def test_from_seats_assigns_sequential_ids(self):
        tables = TableRepository.from_seats([4, 6, 8]).get_multi()

        assert tables == [
            Table(id=1, seats=4),
            Table(id=2, seats=6),
            Table(id=3, seats=8),
        ]

    def test_find_first_fit(self):
        repository = TableRepository.from_seats([2, 6, 6])
        repository.set_available(2, False)

        assert repository.find_first_fit(5).id == 3
        assert repository.find_first_fit(7) is None

    def test_set_available_unknown_table(self):
        repository = TableRepository.from_seats([2])

        assert repository.set_available(5, False) is False

    def test_get_rejects_unknown_field(self):
        repository = TableRepository.from_seats([2])

        with pytest.raises(ValueError):
            repository.get(color='red')


class TestReservationRepository:

    def test_ids_are_monotonic(self):
        repository = ReservationRepository()
        first = repository.create_confirmed(1, 'Ann', 2, '18:00')
        repository.delete(first)

        second = repository.create_confirmed(1, 'Bob', 2, '18:00')

        assert second.id == 2
        assert repository.get_multi() == [second]

    def test_get_by_id(self):
        repository = ReservationRepository()
        repository.create_confirmed(1, 'Ann', 2, '18:00')

        assert repository.get_by_id(1).customer_name == 'Ann'
        assert repository.get_by_id(2) is None
        assert repository.get_by_id(None) is None
