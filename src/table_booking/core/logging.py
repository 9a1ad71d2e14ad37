import logging
import sys
from pathlib import Path

from loguru import logger

from table_booking.core.config import LOG_DIR, settings
from table_booking.core.constants import (
    FILE_LOG_FORMAT,
    INTERCEPTED_LOGGERS,
    LOG_COMPRESSION,
    LOG_ENCODING,
    LOG_FORMAT,
    get_logger_header,
)

_STD_INTERCEPT_CONFIGURED = False


class InterceptHandler(logging.Handler):
    """Перенаправляет записи stdlib (uvicorn) в loguru.

    Глубина вычисляется по стеку, чтобы в логе указывалось место
    вызова в uvicorn, а не модуль logging.
    """

    def emit(self, record: logging.LogRecord) -> None:
        level: str | int
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level,
            record.getMessage(),
        )


def setup_stdlib_intercept() -> None:
    """Подключает InterceptHandler к корневому логгеру и логгерам uvicorn."""
    global _STD_INTERCEPT_CONFIGURED
    if _STD_INTERCEPT_CONFIGURED:
        return
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in INTERCEPTED_LOGGERS:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False
    _STD_INTERCEPT_CONFIGURED = True


def _ensure_defaults(record: dict) -> None:
    record['extra'].setdefault('request_id', '-')


def _prepare_log_file() -> Path:
    """Создаёт каталог логов и пишет заголовок в пустой app.log."""
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    log_file = LOG_DIR / 'app.log'
    if log_file.exists() and log_file.stat().st_size:
        return log_file
    try:
        log_file.write_text(get_logger_header(), encoding=LOG_ENCODING)
    except OSError as e:
        logger.warning(f'Не удалось записать заголовок в {log_file}: {e}')
    return log_file


def configure_logging() -> None:
    """Настраивает sinks loguru и перехват логов stdlib.

    Консольный sink подключается первым, поэтому ошибки подготовки
    файла логов попадают в stdout.
    """
    logger.remove()
    logger.configure(patcher=_ensure_defaults)
    common = {
        'level': settings.LOG_LEVEL,
        'enqueue': True,
        'backtrace': False,
        'diagnose': False,
    }

    logger.add(sys.stdout, format=LOG_FORMAT, colorize=True, **common)

    if settings.LOG_TO_FILE:
        logger.add(
            _prepare_log_file(),
            format=FILE_LOG_FORMAT,
            rotation=settings.LOG_ROTATION,
            retention=settings.LOG_RETENTION,
            compression=LOG_COMPRESSION,
            encoding=LOG_ENCODING,
            **common,
        )

    setup_stdlib_intercept()
