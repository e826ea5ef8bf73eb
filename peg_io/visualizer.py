"""
peg_io/visualizer.py

Текстовая визуализация доски и состояния партии.
"""

from typing import Iterable, Optional

from core.board import Board
from core.cell import Cell
from core.session import GameSession, GameStatus
from core.utils import PEG, HOLE, EMPTY, Position, index_to_pos

SELECTED = '◉'

_SYMBOLS = {
    Cell.OCCUPIED: PEG,
    Cell.EMPTY: HOLE,
    Cell.UNUSABLE: EMPTY,
}


def display_board(board: Board, selected: Optional[Position] = None) -> str:
    """
    Красиво форматирует текстовое представление доски.

    Столбцы подписаны буквами (первая координата), строки — номерами
    (вторая координата).

    Args:
        board: доска
        selected: выбранный колышек, выделяется отдельным символом

    Returns:
        Строка для вывода
    """
    header = "   " + " ".join(chr(r + ord('A')) for r in range(board.width))
    lines = [header]

    for column in range(board.height):
        symbols = []
        for row in range(board.width):
            if (row, column) == selected:
                symbols.append(SELECTED)
            else:
                symbols.append(_SYMBOLS[board.get_cell(row, column)])
        lines.append(f"{column + 1:<2} " + " ".join(symbols))

    return "\n".join(lines)


def format_moves(moves: Iterable) -> str:
    """Список ходов (src, dest) в нотации через запятую."""
    return ", ".join(
        f"{index_to_pos(*src)}-{index_to_pos(*dest)}" for src, dest in moves
    )


def format_status(session: GameSession) -> str:
    """Строка состояния партии."""
    if session.status is GameStatus.WON:
        return "🎉 Победа! Остался один колышек."
    if session.status is GameStatus.STUCK:
        return f"❌ Ходов больше нет. Осталось колышков: {session.pegs_left}"
    return f"Осталось колышков: {session.pegs_left}"
