"""
peg_io/parser.py

Разбор ходов, введённых пользователем.
"""

import re

from core.utils import Move, pos_to_index

_MOVE_RE = re.compile(r'^\s*([A-Za-z]\d+)\s*(?:-|→|->|\s)\s*([A-Za-z]\d+)\s*$')


def parse_move(text: str) -> Move:
    """
    Парсит ход в нотации.

    Формат: "D2 D4", "D2-D4" или "D2->D4"

    Returns:
        Пара позиций (src, dest)

    Raises:
        ValueError: если строка не похожа на ход
    """
    match = _MOVE_RE.match(text)
    if not match:
        raise ValueError(
            "Неверный формат хода. Ожидается: D2 D4 или D2-D4"
        )
    return pos_to_index(match.group(1)), pos_to_index(match.group(2))
