from pydantic import BaseModel, ConfigDict


class TableInfo(BaseModel):
    """Схема стола с признаком доступности."""

    id: int
    seats: int
    available: bool

    model_config = ConfigDict(from_attributes=True)
