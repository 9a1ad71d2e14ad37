"""Модуль схем Pydantic для валидации и сериализации данных.

Содержит схемы для сущностей системы:
- Столы (Table)
- Бронирования (Reservation)
- Ответы об успехе и ошибке

Поля бронирований сериализуются в camelCase.
"""

from .common import ErrorResponse, HealthInfo, SuccessResponse
from .reservation import ReservationInfo, ReservationRequest
from .table import TableInfo

__all__ = [
    'ErrorResponse',
    'HealthInfo',
    'SuccessResponse',
    'ReservationInfo',
    'ReservationRequest',
    'TableInfo',
]
