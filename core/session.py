"""
core/session.py

Партия: доска, выбранный колышек и состояние игры.

Не зависит от способа отрисовки: интерфейс переводит щелчки или ввод
в позиции (row, column) и вызывает click / deselect / restart.
"""

from enum import Enum
from typing import List, Optional, Sequence, Union

from utils.error_handling import InvalidMoveError
from utils.logging import get_logger
from .board import Board
from .cell import Cell
from .utils import Position, index_to_pos


class GameStatus(Enum):
    PLAYING = 'playing'
    WON = 'won'
    STUCK = 'stuck'


class GameSession:
    """Одна партия на одной доске."""

    def __init__(self, shape: Union[str, Sequence[str]], name: Optional[str] = None):
        self.shape = shape
        self.name = name or 'custom'
        self.board = Board.from_shape(shape)
        self.selected: Optional[Position] = None
        self.moves_played = 0
        self.logger = get_logger()
        self.logger.info(f"Новая партия: {self.name}, колышков {self.pegs_left}")

    @property
    def pegs_left(self) -> int:
        return self.board.count_pegs()

    @property
    def status(self) -> GameStatus:
        """
        WON — ровно один колышек; STUCK — ходов нет, а колышков
        не один; иначе PLAYING.
        """
        if self.pegs_left == 1:
            return GameStatus.WON
        if not self.board.has_any_legal_move():
            return GameStatus.STUCK
        return GameStatus.PLAYING

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.PLAYING

    def click(self, pos: Optional[Position]) -> bool:
        """
        Обрабатывает щелчок по позиции.

        None — щелчок вне доски, снимает выбор. Колышек становится
        выбранным. Допустимая цель для выбранного колышка — ход.
        Остальные щелчки игнорируются.

        Returns:
            True, если был сделан ход
        """
        if self.is_over:
            return False
        if pos is None or not self.board.contains(pos):
            self.selected = None
            return False

        if self.select(pos):
            return False

        if self.selected is not None and self.board.is_valid_move(self.selected, pos):
            self._play(self.selected, pos)
            return True
        return False

    def select(self, pos: Position) -> bool:
        """Выбирает колышек в pos. False, если там не колышек."""
        if self.is_over or not self.board.contains(pos):
            return False
        if self.board.get_cell(*pos) is not Cell.OCCUPIED:
            return False
        self.selected = pos
        return True

    def deselect(self) -> None:
        self.selected = None

    def move(self, src: Position, dest: Position) -> None:
        """
        Проверяет и выполняет ход.

        Raises:
            InvalidMoveError: если ход недопустим
        """
        if not self.board.is_valid_move(src, dest):
            raise InvalidMoveError(
                f"Недопустимый ход {_fmt(src)} → {_fmt(dest)}"
            )
        self._play(src, dest)

    def candidate_destinations(self) -> List[Position]:
        """Куда может прыгнуть выбранный колышек."""
        if self.selected is None:
            return []
        return [
            dest for src, dest in self.board.legal_moves()
            if src == self.selected
        ]

    def restart(self) -> None:
        """Начинает партию заново на той же форме."""
        self.board = Board.from_shape(self.shape)
        self.selected = None
        self.moves_played = 0
        self.logger.info(f"Перезапуск партии: {self.name}")

    def _play(self, src: Position, dest: Position) -> None:
        self.board.make_move(src, dest)
        self.selected = None
        self.moves_played += 1
        self.logger.info(
            f"Ход {self.moves_played}: {_fmt(src)} → {_fmt(dest)}, "
            f"осталось {self.pegs_left}"
        )

        status = self.status
        if status is GameStatus.WON:
            self.logger.info(f"Победа за {self.moves_played} ходов")
        elif status is GameStatus.STUCK:
            self.logger.info(f"Ходов нет, осталось колышков: {self.pegs_left}")


def _fmt(pos: Position) -> str:
    row, column = pos
    if row < 0 or column < 0:
        return str(pos)
    return index_to_pos(row, column)
