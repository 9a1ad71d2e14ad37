from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[3]
INFRA_DIR = BASE_DIR / 'infra'

LOG_DIR = BASE_DIR / 'logs'


class Settings(BaseSettings):
    """Конфигурационный класс."""

    APP_TITLE: str = 'Система бронирования столов в ресторане'
    HOST: str = '0.0.0.0'
    PORT: int = 3000
    CORS_ORIGINS: list[str] = ['*']

    TABLE_SEATS: list[int] = [4, 4, 6, 6, 8]
    MAX_GUESTS_PER_RESERVATION: int = 8

    LOG_LEVEL: str = 'INFO'
    LOG_ROTATION: str = '10 MB'
    LOG_RETENTION: str = '7 days'
    LOG_TO_FILE: bool = True

    model_config = SettingsConfigDict(
        env_file=str(INFRA_DIR / '.env'),
        extra='allow',
    )


settings = Settings()
