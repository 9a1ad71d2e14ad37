import pytest
from fastapi.testclient import TestClient

from table_booking.main import create_app
from table_booking.services.reservation_store import ReservationStore

DEFAULT_SEATS = [4, 4, 6, 6, 8]


@pytest.fixture
def store() -> ReservationStore:
    """Хранилище со столами по умолчанию."""
    return ReservationStore.from_seats(DEFAULT_SEATS)


@pytest.fixture
def client(store: ReservationStore) -> TestClient:
    """Клиент приложения с отдельным хранилищем на каждый тест."""
    return TestClient(create_app(store))
