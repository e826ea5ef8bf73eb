"""
peg_io - Ввод/вывод для Peg Solitaire

Экспортирует:
- Предустановленные формы досок
- Разбор ходов
- Текстовую визуализацию
"""

from .shapes import (
    ENGLISH_BOARD, EUROPEAN_BOARD, ASYMMETRIC_BOARD, WIEGLEB_BOARD,
    PRESETS, DEFAULT_BOARD, preset_names, get_shape, load_preset
)
from .parser import parse_move
from .visualizer import display_board, format_moves, format_status

__all__ = [
    'ENGLISH_BOARD',
    'EUROPEAN_BOARD',
    'ASYMMETRIC_BOARD',
    'WIEGLEB_BOARD',
    'PRESETS',
    'DEFAULT_BOARD',
    'preset_names',
    'get_shape',
    'load_preset',
    'parse_move',
    'display_board',
    'format_moves',
    'format_status',
]
