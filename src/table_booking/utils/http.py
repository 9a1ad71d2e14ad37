import re
from typing import Any, Optional

_LEADING_INT = re.compile(r'\s*([+-]?[0-9]+)', re.ASCII)


def build_error(detail: Any) -> dict[str, str]:
    """Формирует унифицированный ответ об ошибке для API."""
    return {'error': str(detail) if detail is not None else ''}


def build_success(message: str) -> dict[str, str]:
    """Формирует унифицированный ответ об успешной операции."""
    return {'success': message}


def parse_int_prefix(value: str) -> Optional[int]:
    """Разбирает целое число в начале строки, как parseInt в браузере.

    '12' -> 12, '12abc' -> 12, 'abc' -> None.
    """
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1))
