from .reservation import Reservation
from .table import Table

__all__ = [
    'Reservation',
    'Table',
]
