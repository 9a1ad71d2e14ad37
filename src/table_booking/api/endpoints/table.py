from fastapi import APIRouter, status

from table_booking.core.dependencies import StoreDep
from table_booking.schemas.common import ErrorResponse
from table_booking.schemas.table import TableInfo

router = APIRouter(prefix='/tables', tags=['Столы'])


@router.get(
    '',
    response_model=list[TableInfo],
    responses={
        status.HTTP_500_INTERNAL_SERVER_ERROR: {'model': ErrorResponse},
    },
)
async def get_all_tables(store: StoreDep) -> list[TableInfo]:
    """Получает список всех столов в порядке их создания.

    Args:
        store: Хранилище бронирований приложения

    Returns:
        list[TableInfo]: Столы с признаком доступности

    """
    return store.list_tables()
