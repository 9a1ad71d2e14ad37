from datetime import datetime

# Настройки логгера
MS_IN_SECOND = 1000
LOG_ENCODING = 'utf-8'
LOG_COMPRESSION = 'zip'
LOG_FORMAT = (
    '<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | '
    '<level>{level: <8}</level> | '
    '{extra[request_id]} | '
    '<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | '
    '<level>{message}</level>'
)
FILE_LOG_FORMAT = (
    '{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | '
    '{extra[request_id]} | '
    '{name}:{function}:{line} | {message}'
)
INTERCEPTED_LOGGERS = (
    'uvicorn',
    'uvicorn.error',
    'uvicorn.access',
)
NOISE_PATHS = {'/docs', '/openapi.json', '/healthcheck'}
HTTP_LOG_TEMPLATE = (
    '{method} {path} -> {status} ({ms:.1f} ms)\n    ip={ip}\n    ua={ua}\n'
)

# Сообщения API, на которые опирается браузерный клиент
REQUIRED_FIELDS_MESSAGE = 'Name, guest count, and time are required'
# Тело отсутствует или не является JSON-объектом
REQUIRED_ERROR_TYPES = {'missing', 'model_attributes_type', 'dict_type'}
MAX_GUESTS_MESSAGE = 'Maximum {max_guests} guests per reservation'
NO_AVAILABLE_TABLE_MESSAGE = 'No available tables for {guest_count} guests'
RESERVATION_NOT_FOUND_MESSAGE = 'Reservation not found'
RESERVED_MESSAGE = (
    'Table {table_id} reserved for {customer_name} ({guest_count} guests)'
)
UPDATED_MESSAGE = 'Reservation updated successfully'
CANCELLED_MESSAGE = 'Reservation cancelled successfully'
INTERNAL_ERROR_MESSAGE = 'Internal server error'


def get_logger_header() -> str:
    """Формирует заголовок для нового лог-файла."""
    return (
        '\n'
        '================= LOGGER - TABLE_BOOKING =======================\n'
        f'Date: {datetime.now():%Y-%m-%d %H:%M:%S}\n'
        '================================================================\n\n'
    )
