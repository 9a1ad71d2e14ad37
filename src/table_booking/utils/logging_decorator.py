import json
from dataclasses import asdict, is_dataclass
from functools import wraps
from typing import Any, Callable

from loguru import logger
from starlette.exceptions import HTTPException


def _serialize(obj: Any, only_set: bool = True) -> dict | None:
    """Сериализует объект Pydantic в словарь для логирования."""
    if hasattr(obj, 'model_dump'):
        try:
            return obj.model_dump(
                mode='json',
                by_alias=True,
                exclude_none=True,
                exclude_unset=only_set,
            )
        except Exception as e:
            logger.debug(
                f'Ошибка сериализации модели {e}',
            )
    return None


def _describe_result(result: Any) -> str:
    """Возвращает краткое описание результата операции."""
    if is_dataclass(result) and not isinstance(result, type):
        return json.dumps(asdict(result), ensure_ascii=False, default=str)
    return str(result)


def _is_client_error(exc: Exception) -> bool:
    """Ошибки клиента (4xx) уже залогированы эндпоинтом как WARNING."""
    return isinstance(exc, HTTPException) and exc.status_code < 500


def event_logger(
    event_type: str,
    collection: str,
    only_set: bool = True,
) -> Callable:
    """Декоратор для логирования выполнения эндпоинта.

    Логирует успешное выполнение асинхронной функции (эндпоинта)
    и возможные ошибки при выполнении операций с указанной коллекцией.

    Args:
        event_type: Тип события ('Создана', 'Обновлена', 'Отменена').
        collection: Название коллекции, над которой выполняется операция.
        only_set: Флаг, указывающий сериализовать ли только заданные поля.
            По умолчанию True.

    Returns:
        Callable: Декоратор, оборачивающий асинхронную функцию и
            добавляющий логирование.

    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            parameters = next(
                (
                    data
                    for data in (
                        _serialize(v, only_set) for v in kwargs.values()
                    )
                    if data is not None
                ),
                None,
            )
            try:
                result = await func(*args, **kwargs)
                if parameters is not None:
                    formatted_params = json.dumps(
                        parameters,
                        ensure_ascii=False,
                        indent=4,
                    )
                    logger.info(
                        f'{event_type} запись в коллекции "{collection}", '
                        f'с параметрами:\n{formatted_params}',
                    )
                else:
                    logger.info(
                        f'{event_type} запись в коллекции "{collection}": '
                        f'{_describe_result(result)}',
                    )
                return result
            except Exception as e:
                if not _is_client_error(e):
                    logger.error(
                        f'Произошла ошибка при выполнении операции с '
                        f'коллекцией "{collection}"',
                    )
                raise

        return wrapper

    return decorator
