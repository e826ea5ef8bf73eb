"""
tests/test_main.py

Тесты терминального интерфейса: меню выбора доски и игровой цикл
на заранее заданном вводе.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import main
from core.session import GameSession, GameStatus
from peg_io.shapes import ENGLISH_BOARD


def scripted(lines):
    """Функция чтения, возвращающая строки по очереди."""
    it = iter(lines)
    return lambda prompt="": next(it)


def run_play(session, lines):
    output = []
    result = main.play(session, scripted(lines), output.append)
    return result, "\n".join(output)


def test_read_helpers_return_none_on_bad_input():
    assert main.read_move("D2 D4") == ((3, 1), (3, 3))
    assert main.read_move("nonsense") is None
    assert main.read_position("C1") == (2, 0)
    assert main.read_position("??") is None


def test_read_board_choice():
    assert main.read_board_choice("1") == "english"
    assert main.read_board_choice("4") == "wiegleb"
    assert main.read_board_choice("European") == "european"
    assert main.read_board_choice("9") is None
    assert main.read_board_choice("triangle") is None


def test_choose_board_retries_until_valid():
    output = []
    name = main.choose_board(scripted(["9", "2"]), output.append)
    assert name == "european"
    assert any("Введите номер" in line for line in output)


def test_choose_board_quit():
    assert main.choose_board(scripted(["q"]), lambda text: None) is None


def test_play_full_move_and_win():
    session = GameSession("XXO")
    result, output = run_play(session, ["A1 C1", "q"])
    assert result == main.QUIT
    assert session.status is GameStatus.WON
    assert "Победа" in output


def test_play_select_then_destination():
    session = GameSession(ENGLISH_BOARD, name="english")
    result, output = run_play(session, ["s D2", "D4", "b"])
    assert result == main.CHOOSE_BOARD
    assert session.pegs_left == 31
    assert "◉" in output


def test_play_select_hole():
    session = GameSession(ENGLISH_BOARD)
    result, output = run_play(session, ["s D4", "q"])
    assert "Там нет колышка" in output
    assert session.selected is None


def test_play_reports_bad_input_and_illegal_moves():
    session = GameSession(ENGLISH_BOARD)
    result, output = run_play(session, ["hello", "D4 D2", "q"])
    assert "Не понял ход" in output
    assert "Недопустимый ход D4 → D2" in output
    assert session.pegs_left == 32


def test_play_lists_moves_and_restarts():
    session = GameSession(ENGLISH_BOARD)
    result, output = run_play(session, ["m", "D2 D4", "r", "q"])
    assert "D2-D4" in output
    assert session.pegs_left == 32


def test_play_after_game_over():
    session = GameSession("XOX")
    result, output = run_play(session, ["A1 C1", "q"])
    assert "Партия окончена" in output


def test_main_list(capsys):
    assert main.main(["--list"]) == 0
    out = capsys.readouterr().out.split()
    assert out == ["english", "european", "asymmetric", "wiegleb"]


def test_main_quits_on_end_of_input(monkeypatch, capsys):
    def no_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    assert main.main(["--board", "english"]) == 0
    assert "Peg Solitaire" in capsys.readouterr().out
