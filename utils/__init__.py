"""
utils - Логирование и обработка ошибок.
"""

from .logging import get_logger, setup_file_logging, GameLogger
from .error_handling import (
    GameError, DecodeError, ShapeError, InconsistentWidthError,
    InvalidSymbolError, UnknownBoardError, InvalidMoveError, handle_errors
)

__all__ = [
    'get_logger', 'setup_file_logging', 'GameLogger',
    'GameError', 'DecodeError', 'ShapeError', 'InconsistentWidthError',
    'InvalidSymbolError', 'UnknownBoardError', 'InvalidMoveError',
    'handle_errors',
]
