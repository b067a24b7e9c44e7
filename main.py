"""
main.py — Traversal Visualizer Flask App
========================================
The web server that drives the boards.

Routes:
  GET  /               – the page (SVG board + controls)
  GET  /api/state      – current board as JSON (+ rendered SVG)
  POST /api/board      – new board  {"kind": "tree"|"random", "mode": "dfs"|"bfs"|"dijkstra"}
  POST /api/select     – node click {"node": <id>}
  POST /api/start      – create the engine for the current selection
  POST /api/step       – advance exactly one step
  POST /api/tick       – advance if playing and the interval has elapsed
  POST /api/play       – toggle play / pause
  POST /api/reset      – regenerate the graph, clear selection
  POST /api/config     – {"changes": {"tree.height": 4, …}}; applies to the next board

State management:
  Engines are live Python objects, so boards stay in an in-process
  registry keyed by a random token kept in the Flask session.  The
  registry is bounded (least recently used session goes first).  One lock
  per board serialises requests: an engine is never driven by two
  callers at once.
"""

import logging
import secrets
import threading
from collections import OrderedDict
from typing import Optional, Tuple

from flask import Flask, jsonify, render_template_string, request, session

from graph import GraphError
from algorithms import list_algorithms
from ui import Board, BoardError, ConfigError, VisualizerConfig, render_canvas

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Board Registry
# ---------------------------------------------------------------------------
DEFAULT_MAX_BOARDS = 256


class _Session:
    __slots__ = ("board", "lock", "config")

    def __init__(self, config: VisualizerConfig):
        self.config: VisualizerConfig = config
        self.board:  Board            = Board("tree", config=config)
        self.lock:   threading.Lock   = threading.Lock()


class BoardRegistry:
    """
    token → (Board, Lock, VisualizerConfig for the next board).

    Holds at most `max_boards` sessions; the least recently used one is
    dropped to make room.  A dropped client simply gets a fresh tree board
    on its next request.
    """

    def __init__(self, default_config: VisualizerConfig, max_boards: int = DEFAULT_MAX_BOARDS):
        if max_boards < 1:
            raise ValueError(f"max_boards must be >= 1, got {max_boards}")
        self.default_config = default_config
        self.max_boards     = max_boards
        self._sessions: "OrderedDict[str, _Session]" = OrderedDict()
        self._guard = threading.Lock()

    def _session(self, token: str) -> _Session:
        # caller holds self._guard
        entry = self._sessions.get(token)
        if entry is None:
            entry = _Session(self.default_config)
            self._sessions[token] = entry
            logger.info("Created board for session %s", token[:8])
            while len(self._sessions) > self.max_boards:
                evicted, _ = self._sessions.popitem(last=False)
                logger.info("Evicted board for session %s", evicted[:8])
        else:
            self._sessions.move_to_end(token)
        return entry

    def get(self, token: str) -> Tuple[Board, threading.Lock]:
        with self._guard:
            entry = self._session(token)
            return entry.board, entry.lock

    def replace(self, token: str, board: Board) -> None:
        with self._guard:
            self._session(token).board = board

    def config_for(self, token: str) -> VisualizerConfig:
        with self._guard:
            entry = self._sessions.get(token)
            return entry.config if entry is not None else self.default_config

    def set_config(self, token: str, config: VisualizerConfig) -> None:
        with self._guard:
            self._session(token).config = config

    def __contains__(self, token: str) -> bool:
        return token in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)


def create_app(config: Optional[VisualizerConfig] = None, max_boards: int = DEFAULT_MAX_BOARDS) -> Flask:
    app = Flask(__name__)
    app.secret_key = secrets.token_hex(32)
    registry = BoardRegistry(config or VisualizerConfig.from_env(), max_boards=max_boards)
    app.extensions["boards"] = registry

    # -----------------------------------------------------------------------
    # Session State Helpers
    # -----------------------------------------------------------------------
    def session_token() -> str:
        if "board_token" not in session:
            session["board_token"] = secrets.token_hex(16)
        return session["board_token"]

    def current_board() -> Tuple[Board, threading.Lock]:
        return registry.get(session_token())

    def board_payload(board: Board, **extra) -> dict:
        payload = board.to_dict()
        payload["svg"] = render_canvas(board)
        payload.update(extra)
        return payload

    # -----------------------------------------------------------------------
    # Errors → 400 JSON
    # -----------------------------------------------------------------------
    @app.errorhandler(GraphError)
    @app.errorhandler(BoardError)
    @app.errorhandler(ConfigError)
    def handle_user_error(exc):
        logger.info("Rejected request: %s", exc)
        return jsonify({"error": str(exc)}), 400

    def json_body() -> dict:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}

    # -----------------------------------------------------------------------
    # Page
    # -----------------------------------------------------------------------
    @app.route("/")
    def index():
        board, lock = current_board()
        with lock:
            svg = render_canvas(board)
            message = board.message
        return render_template_string(
            INDEX_TEMPLATE,
            svg=svg,
            message=message,
            algorithms=list_algorithms(),
        )

    @app.route("/api/state")
    def api_state():
        board, lock = current_board()
        with lock:
            return jsonify(board_payload(board))

    # -----------------------------------------------------------------------
    # Board lifecycle
    # -----------------------------------------------------------------------
    @app.route("/api/board", methods=["POST"])
    def api_board():
        data = json_body()
        token = session_token()
        try:
            board = Board(data.get("kind", "tree"), mode=data.get("mode"), config=registry.config_for(token))
        except ValueError as exc:
            raise BoardError(str(exc)) from exc
        registry.replace(token, board)
        return jsonify(board_payload(board))

    @app.route("/api/reset", methods=["POST"])
    def api_reset():
        board, lock = current_board()
        with lock:
            board.reset()
            return jsonify(board_payload(board))

    @app.route("/api/config", methods=["POST"])
    def api_config():
        changes = json_body().get("changes", {})
        token = session_token()
        new_config = registry.config_for(token).updated_many(changes)
        registry.set_config(token, new_config)
        return jsonify({"config": new_config.to_dict()})

    # -----------------------------------------------------------------------
    # Selection & stepping
    # -----------------------------------------------------------------------
    @app.route("/api/select", methods=["POST"])
    def api_select():
        node = json_body().get("node")
        if not isinstance(node, int):
            raise BoardError("Select a node by its integer id")
        board, lock = current_board()
        with lock:
            role = board.select(node)
            return jsonify(board_payload(board, role=role))

    @app.route("/api/start", methods=["POST"])
    def api_start():
        board, lock = current_board()
        with lock:
            board.start()
            return jsonify(board_payload(board))

    @app.route("/api/step", methods=["POST"])
    def api_step():
        board, lock = current_board()
        with lock:
            board.advance()
            return jsonify(board_payload(board))

    @app.route("/api/tick", methods=["POST"])
    def api_tick():
        board, lock = current_board()
        with lock:
            result = board.tick()
            return jsonify(board_payload(board, advanced=result is not None))

    @app.route("/api/play", methods=["POST"])
    def api_play():
        board, lock = current_board()
        with lock:
            board.toggle_play()
            return jsonify(board_payload(board))

    return app


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>Traversal Visualizer</title>
  <style>
    body { font-family: sans-serif; margin: 12px; }
    #controls button, #controls select { margin-right: 6px; }
    #message { margin: 8px 0; font-weight: 600; }
    circle { cursor: pointer; }
  </style>
</head>
<body>
  <div id="controls">
    <select id="algo">
      {% for a in algorithms %}
      <option value="{{ a.mode.value }}">{{ a.label }}</option>
      {% endfor %}
    </select>
    <button id="btn-new">New board</button>
    <button id="btn-play">Start / Pause</button>
    <button id="btn-step">Step</button>
    <button id="btn-reset">Reset</button>
  </div>
  <div id="message">{{ message }}</div>
  <div id="canvas">{{ svg | safe }}</div>

  <script>
    let timer = null;

    async function post(url, body) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(body || {}),
      });
      return res.json();
    }

    function render(data) {
      if (data.error) { alert(data.error); return; }
      document.getElementById('canvas').innerHTML = data.svg;
      document.getElementById('message').textContent = data.message;
      if (data.playing && !timer) {
        timer = setInterval(async () => render(await post('/api/tick')), 50);
      }
      if (!data.playing && timer) { clearInterval(timer); timer = null; }
    }

    document.getElementById('canvas').addEventListener('click', async (e) => {
      const id = e.target.getAttribute('data-id');
      if (e.target.tagName === 'circle' && id !== null) {
        render(await post('/api/select', {node: Number(id)}));
      }
    });
    document.getElementById('btn-new').addEventListener('click', async () => {
      const mode = document.getElementById('algo').value;
      render(await post('/api/board', {kind: mode === 'dijkstra' ? 'random' : 'tree', mode}));
    });
    document.getElementById('btn-play').addEventListener('click', async () => render(await post('/api/play')));
    document.getElementById('btn-step').addEventListener('click', async () => render(await post('/api/step')));
    document.getElementById('btn-reset').addEventListener('click', async () => render(await post('/api/reset')));
  </script>
</body>
</html>
"""


app = create_app()


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("Traversal Visualizer on http://localhost:5000")
    app.run(debug=True, port=5000)
