"""
peg_io/shapes.py

Предустановленные формы досок.

'X' — колышек, 'O' — дырка, ' ' — клетка вне доски.
"""

from typing import Dict, List

from core.board import Board
from utils.error_handling import UnknownBoardError
from utils.logging import get_logger

ENGLISH_BOARD = '\n'.join([
    "  XXX  ",
    "  XXX  ",
    "XXXXXXX",
    "XXXOXXX",
    "XXXXXXX",
    "  XXX  ",
    "  XXX  ",
])

EUROPEAN_BOARD = '\n'.join([
    "  XXX  ",
    " XXXXX ",
    "XXXXXXX",
    "XXXOXXX",
    "XXXXXXX",
    " XXXXX ",
    "  XXX  ",
])

ASYMMETRIC_BOARD = '\n'.join([
    "  XXX   ",
    "  XXX   ",
    "  XXX   ",
    "XXXXXXXX",
    "XXXOXXXX",
    "XXXXXXXX",
    "  XXX   ",
    "  XXX   ",
])

WIEGLEB_BOARD = '\n'.join([
    "   XXX   ",
    "   XXX   ",
    "   XXX   ",
    "XXXXXXXXX",
    "XXXXOXXXX",
    "XXXXXXXXX",
    "   XXX   ",
    "   XXX   ",
    "   XXX   ",
])

# Порядок совпадает с меню выбора доски
PRESETS: Dict[str, str] = {
    'english': ENGLISH_BOARD,
    'european': EUROPEAN_BOARD,
    'asymmetric': ASYMMETRIC_BOARD,
    'wiegleb': WIEGLEB_BOARD,
}

DEFAULT_BOARD = 'english'


def preset_names() -> List[str]:
    return list(PRESETS)


def get_shape(name: str) -> str:
    """
    Форма предустановленной доски по имени (без учёта регистра).

    Raises:
        UnknownBoardError: если такой доски нет
    """
    try:
        return PRESETS[name.strip().lower()]
    except KeyError:
        raise UnknownBoardError(
            f"Неизвестная доска {name!r}. Доступны: {', '.join(PRESETS)}"
        ) from None


def load_preset(name: str) -> Board:
    """Создаёт доску из предустановленной формы."""
    board = Board.from_shape(get_shape(name))
    get_logger().debug(f"Загружена доска {name}: {board!r}")
    return board
