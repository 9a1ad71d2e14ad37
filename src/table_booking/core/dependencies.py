from typing import Annotated

from fastapi import Depends, Request

from table_booking.services.reservation_store import ReservationStore


async def get_reservation_store(request: Request) -> ReservationStore:
    """Зависимость для получения хранилища бронирований приложения."""
    return request.app.state.store


StoreDep = Annotated[ReservationStore, Depends(get_reservation_store)]
