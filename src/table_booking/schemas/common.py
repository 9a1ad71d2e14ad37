from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Базовая схема ответа с описанием ошибки."""

    error: str


class SuccessResponse(BaseModel):
    """Базовая схема ответа об успешной операции."""

    success: str


class HealthInfo(BaseModel):
    """Схема ответа проверки состояния сервиса."""

    status: str
    tables: int
    reservations: int
