from .healthcheck import router as healthcheck_router
from .reservation import router as reservation_router
from .table import router as table_router

__all__ = [
    'healthcheck_router',
    'reservation_router',
    'table_router',
]

routers = [
    table_router,
    reservation_router,
    healthcheck_router,
]
