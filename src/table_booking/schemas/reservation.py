from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

from table_booking.core.config import settings
from table_booking.core.constants import (
    MAX_GUESTS_MESSAGE,
    REQUIRED_FIELDS_MESSAGE,
)
from table_booking.utils.enums import ReservationStatus


class ReservationRequest(BaseModel):
    """Схема для создания и обновления бронирования.

    Поля принимаются в camelCase, как их отправляет браузерный клиент.
    Тип имени, формат времени и положительность количества гостей
    не проверяются, имя приводится к строке.
    """

    customer_name: Any = None
    guest_count: Optional[int] = None
    time: Optional[str] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @model_validator(mode='after')
    def validate_required(self) -> 'ReservationRequest':
        """Проверяет заполненность полей и лимит гостей."""
        if not (self.customer_name and self.guest_count and self.time):
            raise ValueError(REQUIRED_FIELDS_MESSAGE)
        self.customer_name = str(self.customer_name)
        max_guests = settings.MAX_GUESTS_PER_RESERVATION
        if self.guest_count > max_guests:
            raise ValueError(MAX_GUESTS_MESSAGE.format(max_guests=max_guests))
        return self


class ReservationInfo(BaseModel):
    """Схема бронирования в ответах API."""

    id: int
    table_id: int
    customer_name: str
    guest_count: int
    time: str
    status: ReservationStatus

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
