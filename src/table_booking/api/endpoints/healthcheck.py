from fastapi import APIRouter

from table_booking.core.dependencies import StoreDep
from table_booking.schemas.common import HealthInfo

router = APIRouter(prefix='/healthcheck', tags=['Healthcheck'])


@router.get('', response_model=HealthInfo)
async def healthcheck(store: StoreDep) -> HealthInfo:
    """Проверка состояния сервиса и размеров коллекций."""
    return HealthInfo(
        status='ok',
        tables=len(store.list_tables()),
        reservations=len(store.list_reservations()),
    )
