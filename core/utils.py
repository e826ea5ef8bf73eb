"""
core/utils.py

Общие утилиты и константы для Peg Solitaire.

Позиция на доске — пара (row, column): первая координата пробегает
ширину доски (буква в нотации), вторая — высоту (номер строки формы).
"""

from typing import List, Tuple

Position = Tuple[int, int]
Move = Tuple[Position, Position]

# Направления прыжка: по каждой оси в обе стороны
DIRECTIONS: List[Tuple[int, int]] = [(-1, 0), (1, 0), (0, -1), (0, 1)]

# Символы для отображения
PEG = '●'       # Колышек
HOLE = '○'      # Пустое место (можно прыгнуть)
EMPTY = ' '     # Недоступная клетка


def index_to_pos(row: int, column: int) -> str:
    """Индекс (row, column) → нотация (A1, B2, ...)."""
    return f"{chr(row + ord('A'))}{column + 1}"


def pos_to_index(pos: str) -> Position:
    """
    Нотация → индекс.

    Raises:
        ValueError: если строка не похожа на букву с номером
    """
    pos = pos.strip()
    if len(pos) < 2 or not pos[0].isalpha() or not pos[1:].isdigit():
        raise ValueError(f"Неверная позиция: {pos!r}")
    row = ord(pos[0].upper()) - ord('A')
    column = int(pos[1:]) - 1
    if column < 0:
        raise ValueError(f"Неверная позиция: {pos!r}")
    return row, column


def midpoint(src: Position, dest: Position) -> Position:
    """
    Клетка между src и dest вдоль оси, по которой они различаются.

    Считается от dest: если первые координаты совпадают, сдвигаемся
    по второй, иначе по первой.
    """
    (i_src, j_src), (i_dest, j_dest) = src, dest
    if i_dest == i_src:
        return i_dest, (j_dest - 1 if j_dest > j_src else j_dest + 1)
    return (i_dest - 1 if i_dest > i_src else i_dest + 1), j_dest
