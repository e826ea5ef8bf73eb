"""
core/board.py

Доска Peg Solitaire: сетка клеток, проверка и выполнение прыжков.
"""

from typing import Iterator, List, Sequence, Tuple, Union

from utils.error_handling import (
    DecodeError, ShapeError, InconsistentWidthError, InvalidSymbolError
)
from utils.logging import get_logger
from .cell import Cell
from .utils import DIRECTIONS, Move, Position, midpoint


class Board:
    """
    Изменяемая доска фиксированного размера.

    Клетки хранятся в плоском списке. Позиция (row, column) лежит по
    индексу row + column * height (см. get_index); row < width,
    column < height. Список заполняется символами формы подряд,
    строка за строкой.
    """
    __slots__ = ('_width', '_height', '_cells')

    def __init__(self, width: int, height: int, cells: List[Cell]):
        if len(cells) != width * height:
            raise ShapeError(
                f"Ожидалось {width * height} клеток, получено {len(cells)}"
            )
        self._width = width
        self._height = height
        self._cells = cells

    @classmethod
    def from_shape(cls, shape: Union[str, Sequence[str]]) -> 'Board':
        """
        Создаёт доску из описания формы.

        Args:
            shape: строки одинаковой длины из символов 'X', 'O', ' ';
                   либо одна строка с разделителем '\\n'

        Raises:
            InconsistentWidthError: строки разной длины
            InvalidSymbolError: неизвестный символ (это и DecodeError)
            ShapeError: пустая форма
        """
        lines = shape.split('\n') if isinstance(shape, str) else list(shape)
        if not lines or not lines[0]:
            raise ShapeError("Форма доски пуста")

        width = len(lines[0])
        cells = []
        for line_no, line in enumerate(lines):
            if len(line) != width:
                raise InconsistentWidthError(line_no, width, len(line))
            for column, token in enumerate(line):
                try:
                    cells.append(Cell.decode(token))
                except DecodeError:
                    raise InvalidSymbolError(token, line_no, column) from None

        board = cls(width, len(lines), cells)
        get_logger().debug(
            f"Доска {board.width}x{board.height}: {board.count_pegs()} колышков"
        )
        return board

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def get_index(self, row: int, column: int) -> int:
        """
        Индекс клетки в плоском списке.

        Raises:
            IndexError: позиция вне доски
        """
        if not self.contains((row, column)):
            raise IndexError(
                f"Позиция ({row}, {column}) вне доски {self._width}x{self._height}"
            )
        return row + column * self._height

    def contains(self, pos: Position) -> bool:
        """Лежит ли позиция в адресуемой области доски."""
        row, column = pos
        return (
            0 <= row < self._width and
            0 <= column < self._height and
            row + column * self._height < len(self._cells)
        )

    def get_cell(self, row: int, column: int) -> Cell:
        return self._cells[self.get_index(row, column)]

    def set_cell(self, row: int, column: int, cell: Cell) -> None:
        self._cells[self.get_index(row, column)] = cell

    def count_pegs(self) -> int:
        """Количество колышков на доске."""
        return sum(1 for cell in self._cells if cell is Cell.OCCUPIED)

    def is_valid_move(self, src: Position, dest: Position) -> bool:
        """
        Допустим ли прыжок из src в dest.

        Прыжок идёт ровно на две клетки вдоль одной оси через колышек
        в пустую клетку. Никогда не бросает исключений: позиции вне
        доски дают False.
        """
        if not (self.contains(src) and self.contains(dest)):
            return False

        (i_src, j_src), (i_dest, j_dest) = src, dest
        if not (
            (i_src == i_dest and abs(j_src - j_dest) == 2) or
            (j_src == j_dest and abs(i_src - i_dest) == 2)
        ):
            return False

        return (
            self.get_cell(*src) is Cell.OCCUPIED and
            self.get_cell(*midpoint(src, dest)) is Cell.OCCUPIED and
            self.get_cell(*dest) is Cell.EMPTY
        )

    def make_move(self, src: Position, dest: Position) -> None:
        """
        Выполняет прыжок. Допустимость не проверяется: вызывающий код
        должен сначала спросить is_valid_move.
        """
        middle = midpoint(src, dest)
        self.set_cell(*dest, Cell.OCCUPIED)
        self.set_cell(*src, Cell.EMPTY)
        self.set_cell(*middle, Cell.EMPTY)

    apply_move = make_move

    def legal_moves(self) -> Iterator[Move]:
        """Все допустимые ходы (src, dest) в порядке обхода доски."""
        for row, column in self.positions():
            for dr, dc in DIRECTIONS:
                dest = (row + 2 * dr, column + 2 * dc)
                if self.is_valid_move((row, column), dest):
                    yield (row, column), dest

    def has_any_legal_move(self) -> bool:
        return any(self.legal_moves())

    def positions(self) -> Iterator[Position]:
        """Все адресуемые позиции: по первой координате, затем по второй."""
        for row in range(self._width):
            for column in range(self._height):
                if self.contains((row, column)):
                    yield row, column

    def cells(self) -> Iterator[Tuple[Position, Cell]]:
        for pos in self.positions():
            yield pos, self.get_cell(*pos)

    def to_shape(self) -> str:
        """
        Обратно в описание формы: строка формы — вторая координата,
        символ в строке — первая.
        """
        return '\n'.join(
            ''.join(
                self.get_cell(row, column).encode()
                for row in range(self._width)
            )
            for column in range(self._height)
        )

    def copy(self) -> 'Board':
        return Board(self._width, self._height, list(self._cells))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._width == other._width and
            self._height == other._height and
            self._cells == other._cells
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"Board({self._width}x{self._height}, {self.count_pegs()} pegs)"
