"""
web/app.py

Flask веб-приложение для Peg Solitaire.

Одна партия на процесс; браузер присылает позиции (row, column),
сервер отвечает состоянием доски.
"""

import os
import sys
from flask import Flask, render_template, request, jsonify

# Добавляем корень проекта в path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.session import GameSession
from peg_io.shapes import DEFAULT_BOARD, get_shape, preset_names
from utils.error_handling import GameError, UnknownBoardError
from utils.logging import get_logger


def session_to_json(session: GameSession) -> dict:
    """Состояние партии для клиента."""
    board = session.board
    return {
        'success': True,
        'board': session.name,
        'width': board.width,
        'height': board.height,
        'cells': [
            [board.get_cell(row, column).encode() for row in range(board.width)]
            for column in range(board.height)
        ],
        'selected': list(session.selected) if session.selected else None,
        'destinations': [list(pos) for pos in session.candidate_destinations()],
        'pegs_left': session.pegs_left,
        'status': session.status.value,
    }


def error_response(message: str, status: int = 400):
    return jsonify({'success': False, 'error': message}), status


def _parse_pos(data):
    """[row, column] из JSON или None (щелчок вне доски)."""
    pos = data.get('pos')
    if pos is None:
        return None
    if (not isinstance(pos, (list, tuple)) or len(pos) != 2 or
            not all(isinstance(v, int) and not isinstance(v, bool) for v in pos)):
        raise ValueError("pos должен быть [row, column] или null")
    return tuple(pos)


def create_app(board: str = DEFAULT_BOARD) -> Flask:
    """Создаёт приложение с новой партией на доске board."""
    app = Flask(__name__)
    logger = get_logger()
    app.config['GAME'] = GameSession(get_shape(board), name=board)

    def game() -> GameSession:
        return app.config['GAME']

    @app.route('/')
    def index():
        """Главная страница."""
        return render_template('index.html', boards=preset_names())

    @app.route('/api/boards')
    def boards():
        return jsonify({'success': True, 'boards': preset_names()})

    @app.route('/api/new', methods=['POST'])
    def new_game():
        """Новая партия на выбранной доске."""
        data = request.get_json(silent=True) or {}
        name = data.get('board', DEFAULT_BOARD)
        if not isinstance(name, str):
            return error_response("board должен быть строкой")
        try:
            app.config['GAME'] = GameSession(get_shape(name), name=name.lower())
        except UnknownBoardError as e:
            return error_response(str(e), 404)
        except GameError as e:
            logger.error(f"Не удалось создать доску {name}: {e}")
            return error_response(str(e))
        return jsonify(session_to_json(game()))

    @app.route('/api/state')
    def state():
        return jsonify(session_to_json(game()))

    @app.route('/api/click', methods=['POST'])
    def click():
        """Щелчок левой кнопкой по позиции (или вне доски)."""
        data = request.get_json(silent=True) or {}
        try:
            pos = _parse_pos(data)
        except ValueError as e:
            return error_response(str(e))
        moved = game().click(pos)
        result = session_to_json(game())
        result['moved'] = moved
        return jsonify(result)

    @app.route('/api/deselect', methods=['POST'])
    def deselect():
        """Щелчок правой кнопкой."""
        game().deselect()
        return jsonify(session_to_json(game()))

    @app.route('/api/restart', methods=['POST'])
    def restart():
        game().restart()
        return jsonify(session_to_json(game()))

    return app


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5000))
    print(f"Peg Solitaire: http://127.0.0.1:{port}")
    create_app().run(debug=False, port=port)
