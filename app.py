# app.py
"""
Trivia maze backend (Flask).
Endpoints:
  POST /api/generate_maze  -> { rows, cols | size, seed? } returns
                             { rows, cols, cells: [[{walls, door}]], carve_path, passages }
  POST /api/solve_maze     -> { cells: [...] } returns
                             { explored: int, path: [[row,col]..], time: ms, visited_steps: [[row,col]..] }
  POST /api/place_doors    -> { path: [[row,col]..], count, seed? } returns { doors, capacity }
  POST /api/new_game       -> { size?, doors?, keys?, seed? } returns
                             { size, cells, solution, doors, master_keys }
Run locally:
  python3 -m venv venv
  source venv/bin/activate
  pip install -e .
  python app.py
"""
from flask import Flask, request, jsonify
from flask_cors import CORS
import random
import time
import os

import config
from doors import door_capacity, place_doors
from errors import InvalidParameterError, MazeError
from game import new_round
from maze import count_passages, generate_maze_map, grid_from_dict, grid_to_dict
from solver import find_solution_trace

app = Flask(__name__)
app.config.from_object(config)
app.config.from_prefixed_env()
CORS(app)


def _int_param(payload, key, default):
    value = payload.get(key, default)
    # inf, nan and fractional floats are rejected rather than truncated
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise InvalidParameterError(f"'{key}' must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidParameterError(f"'{key}' must be an integer") from None


def _clamp_size(value):
    return max(app.config['MIN_MAZE_SIZE'], min(value, app.config['MAX_MAZE_SIZE']))


def _rng(payload):
    seed = payload.get('seed')
    if seed is None:
        return random.Random()
    return random.Random(_int_param(payload, 'seed', None))


def _path_param(payload):
    path = payload.get('path')
    if not isinstance(path, list):
        raise InvalidParameterError("'path' must be a list of [row, col] pairs")
    positions = []
    for step in path:
        if (not isinstance(step, list) or len(step) != 2
                or not all(isinstance(v, int) and not isinstance(v, bool) for v in step)):
            raise InvalidParameterError("'path' must be a list of [row, col] pairs")
        positions.append((step[0], step[1]))
    return positions


@app.errorhandler(MazeError)
def handle_maze_error(err):
    if err.status_code >= 500:
        app.logger.error("Maze failure: %s", err)
    else:
        app.logger.info("Rejected request: %s", err)
    return jsonify({'error': str(err)}), err.status_code


# --- API routes --- #
@app.route('/api/health')
def api_health():
    return jsonify({'status': 'ok'})


@app.route('/api/generate_maze', methods=['POST'])
def api_generate_maze():
    payload = request.get_json(silent=True) or {}
    size = _int_param(payload, 'size', app.config['MAZE_SIZE'])
    rows = _clamp_size(_int_param(payload, 'rows', size))
    cols = _clamp_size(_int_param(payload, 'cols', size))
    maze = generate_maze_map(rows, cols, _rng(payload))
    return jsonify({
        'rows': rows,
        'cols': cols,
        'cells': grid_to_dict(maze.cells),
        'carve_path': [list(p) for p in maze.carve_path],
        'passages': count_passages(maze.cells),
    })


@app.route('/api/solve_maze', methods=['POST'])
def api_solve_maze():
    payload = request.get_json(silent=True) or {}
    data = payload.get('cells')
    if not data:
        return jsonify({'error': 'maze data required'}), 400
    cells = grid_from_dict(data)

    start_time = time.time()
    path, visited_steps = find_solution_trace(cells)
    time_ms = int((time.time() - start_time) * 1000)
    return jsonify({
        'explored': len(visited_steps),
        'path': [list(p) for p in path],
        'time': time_ms,
        'visited_steps': [list(p) for p in visited_steps],
    })


@app.route('/api/place_doors', methods=['POST'])
def api_place_doors():
    payload = request.get_json(silent=True) or {}
    path = _path_param(payload)
    count = _int_param(payload, 'count', app.config['NUM_DOORS'])
    count = min(count, app.config['MAX_DOORS'])
    doors = place_doors(path, count, _rng(payload))
    return jsonify({
        'doors': [list(p) for p in sorted(doors)],
        'capacity': door_capacity(path),
    })


@app.route('/api/new_game', methods=['POST'])
def api_new_game():
    payload = request.get_json(silent=True) or {}
    size = _clamp_size(_int_param(payload, 'size', app.config['MAZE_SIZE']))
    num_doors = min(_int_param(payload, 'doors', app.config['NUM_DOORS']), app.config['MAX_DOORS'])
    num_keys = _int_param(payload, 'keys', app.config['NUM_MASTER_KEYS'])
    game_round = new_round(size, num_doors, num_keys, _rng(payload))
    app.logger.debug("New game started: size=%d doors=%d", size, len(game_round.doors))
    return jsonify(game_round.to_dict())


if __name__ == '__main__':
    port = int(os.environ.get('PORT', config.DEFAULT_PORT))
    app.run(host='0.0.0.0', port=port, debug=True)
