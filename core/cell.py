"""
core/cell.py

Состояние одной клетки доски.
"""

from enum import Enum

from utils.error_handling import DecodeError


class Cell(Enum):
    """Клетка: колышек, дырка или клетка вне формы доски."""

    OCCUPIED = 'X'
    EMPTY = 'O'
    UNUSABLE = ' '

    @classmethod
    def decode(cls, token: str) -> 'Cell':
        """
        Символ формы → клетка.

        Raises:
            DecodeError: если символ не 'X', 'O' или пробел
        """
        try:
            return cls(token)
        except ValueError:
            raise DecodeError(token) from None

    def encode(self) -> str:
        """Клетка → символ формы."""
        return self.value

    def __repr__(self) -> str:
        return f"Cell.{self.name}"
