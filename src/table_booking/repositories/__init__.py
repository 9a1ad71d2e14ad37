from .base import CRUDBase
from .reservation import ReservationRepository
from .table import TableRepository

__all__ = [
    'CRUDBase',
    'ReservationRepository',
    'TableRepository',
]
