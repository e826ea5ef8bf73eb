"""
utils/error_handling.py

Иерархия исключений игры и обработка ошибок на границе интерфейса.
"""

from typing import Callable, Any
from functools import wraps

from .logging import get_logger


class GameError(Exception):
    """Базовое исключение игры."""
    pass


class DecodeError(GameError):
    """Символ не является ни колышком, ни дыркой, ни недоступной клеткой."""

    def __init__(self, token: str):
        super().__init__(f"Неизвестный символ клетки: {token!r}")
        self.token = token


class ShapeError(GameError):
    """Ошибка описания формы доски."""
    pass


class InconsistentWidthError(ShapeError):
    """Строки формы имеют разную длину."""

    def __init__(self, line_no: int, expected: int, actual: int):
        super().__init__(
            f"Строка {line_no}: длина {actual}, ожидалась {expected}"
        )
        self.line_no = line_no
        self.expected = expected
        self.actual = actual


class InvalidSymbolError(ShapeError, DecodeError):
    """Недопустимый символ внутри формы доски."""

    def __init__(self, token: str, line_no: int, column: int):
        DecodeError.__init__(self, token)
        self.args = (
            f"Строка {line_no}, позиция {column}: неизвестный символ {token!r}",
        )
        self.line_no = line_no
        self.column = column


class UnknownBoardError(GameError):
    """Запрошена несуществующая предустановленная доска."""
    pass


class InvalidMoveError(GameError):
    """Попытка сделать недопустимый ход."""
    pass


def handle_errors(default_return: Any = None, log_error: bool = True):
    """
    Декоратор для обработки ошибок на границе интерфейса.

    Перехватывает только GameError и ValueError (ошибки ввода пользователя);
    остальные исключения пробрасываются дальше.

    Args:
        default_return: значение по умолчанию при ошибке
        log_error: логировать ли ошибку
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except (GameError, ValueError) as e:
                if log_error:
                    logger = get_logger()
                    logger.warning(f"{func.__name__}: {str(e)}")
                return default_return
        return wrapper
    return decorator
