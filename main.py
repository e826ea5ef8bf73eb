#!/usr/bin/env python3
"""
main.py

Точка входа: Peg Solitaire в терминале.

Использование:
    python main.py                       # английская доска
    python main.py --board wiegleb       # другая доска
    python main.py --list                # список досок
"""

import sys
import argparse
import logging
from typing import Callable, Optional

from core.session import GameSession
from core.utils import Move, Position, pos_to_index
from peg_io import (
    PRESETS, get_shape, parse_move,
    display_board, format_moves, format_status
)
from utils.error_handling import GameError, handle_errors
from utils.logging import get_logger, setup_file_logging

HELP = """Команды:
  D2 D4   ход из D2 в D4 (или D2-D4)
  s D2    выбрать колышек, затем ввести цель: D4
  m       показать допустимые ходы
  r       начать заново
  b       выбрать другую доску
  q       выход"""

# Результаты игрового цикла
QUIT = 'quit'
CHOOSE_BOARD = 'board'


@handle_errors(default_return=None)
def read_move(text: str) -> Optional[Move]:
    """Ход из введённой строки; None, если строка не разобрана."""
    return parse_move(text)


@handle_errors(default_return=None)
def read_position(text: str) -> Optional[Position]:
    """Позиция из введённой строки; None, если строка не разобрана."""
    return pos_to_index(text)


@handle_errors(default_return=None)
def read_board_choice(text: str) -> Optional[str]:
    """Имя доски по номеру из меню или по имени."""
    text = text.strip()
    names = list(PRESETS)
    if text.isdigit():
        index = int(text) - 1
        if not 0 <= index < len(names):
            raise ValueError(f"Нет доски с номером {text}")
        return names[index]
    get_shape(text)
    return text.lower()


def choose_board(read: Callable[[str], str], write: Callable[[str], None]) -> Optional[str]:
    """Меню выбора доски. None — пользователь вышел."""
    write("Выбор доски:")
    for i, name in enumerate(PRESETS, 1):
        write(f"  {i}. {name.capitalize()}")
    while True:
        text = read("> ").strip()
        if text.lower() == 'q':
            return None
        name = read_board_choice(text)
        if name is not None:
            return name
        write("Введите номер или имя доски (q — выход)")


def play(session: GameSession, read: Callable[[str], str],
         write: Callable[[str], None]) -> str:
    """
    Игровой цикл для одной доски.

    Returns:
        QUIT или CHOOSE_BOARD
    """
    write(HELP)
    while True:
        write("")
        write(display_board(session.board, session.selected))
        write(format_status(session))

        text = read("> ").strip()
        command = text.lower()
        if command == 'q':
            return QUIT
        if command == 'b':
            return CHOOSE_BOARD
        if command == 'r':
            session.restart()
            continue
        if command == 'm':
            write(format_moves(session.board.legal_moves()) or "Ходов нет")
            continue
        if session.is_over:
            write("Партия окончена: r — заново, b — другая доска, q — выход")
            continue

        if command.startswith('s '):
            src = read_position(text[2:])
            if src is None:
                write("Неверная позиция")
                continue
            if not session.select(src):
                write("Там нет колышка")
            continue

        if session.selected is not None and len(text.split()) == 1 and '-' not in text:
            dest = read_position(text)
            move = (session.selected, dest) if dest is not None else None
        else:
            move = read_move(text)
        if move is None:
            write("Не понял ход. Пример: D2 D4")
            continue

        try:
            session.move(*move)
        except GameError as e:
            write(f"❌ {e}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='Peg Solitaire',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=HELP
    )
    parser.add_argument(
        '--board', '-b', choices=list(PRESETS), default=None,
        help='Доска (по умолчанию — меню выбора)'
    )
    parser.add_argument(
        '--list', action='store_true',
        help='Показать доступные доски и выйти'
    )
    parser.add_argument(
        '--log-level', default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Уровень логирования (default: WARNING)'
    )
    parser.add_argument(
        '--log-file', default=None,
        help='Дополнительно писать лог в файл'
    )

    args = parser.parse_args(argv)

    level = getattr(logging, args.log_level)
    get_logger().set_level(level)
    if args.log_file:
        setup_file_logging(args.log_file, level)

    if args.list:
        for name in PRESETS:
            print(name)
        return 0

    print("=" * 50)
    print("🎯 Peg Solitaire")
    print("=" * 50)

    name = args.board
    try:
        while True:
            if name is None:
                name = choose_board(input, print)
                if name is None:
                    return 0
            session = GameSession(get_shape(name), name=name)
            if play(session, input, print) == QUIT:
                return 0
            name = None
    except (EOFError, KeyboardInterrupt):
        print()
        return 0


if __name__ == "__main__":
    sys.exit(main())
