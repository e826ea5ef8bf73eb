"""
core - Ядро Peg Solitaire

Клетка, доска с правилами прыжков и партия.
"""

from .cell import Cell
from .board import Board
from .session import GameSession, GameStatus
from .utils import (
    DIRECTIONS, PEG, HOLE, EMPTY, Position, Move,
    index_to_pos, pos_to_index, midpoint
)

__all__ = [
    'Cell', 'Board', 'GameSession', 'GameStatus',
    'DIRECTIONS', 'PEG', 'HOLE', 'EMPTY', 'Position', 'Move',
    'index_to_pos', 'pos_to_index', 'midpoint'
]
