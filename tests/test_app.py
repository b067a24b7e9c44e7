"""Flask routes, driven through the test client."""

import pytest

from main import BoardRegistry, create_app
from ui import VisualizerConfig


@pytest.fixture
def client():
    app = create_app(VisualizerConfig(tree_height=2, node_count=6, edges_per_node=2, seed=5))
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


class TestPage:
    def test_index_renders_board(self, client):
        res = client.get("/")
        assert res.status_code == 200
        body = res.get_data(as_text=True)
        assert "<svg" in body
        assert "Depth-First Search" in body
        assert "Please select the target" in body

    def test_state_defaults_to_tree(self, client):
        data = client.get("/api/state").get_json()
        assert data["kind"] == "tree"
        assert data["mode"] == "dfs"
        assert len(data["graph"]["nodes"]) == 7
        assert data["last_result"] is None


class TestTreeRun:
    def test_step_before_target_is_400(self, client):
        res = client.post("/api/step")
        assert res.status_code == 400
        assert res.get_json()["error"] == "Please select the target"

    def test_select_and_step_to_found(self, client):
        res = client.post("/api/select", json={"node": 5})
        assert res.get_json()["role"] == "target"

        kinds = []
        for _ in range(4):
            kinds.append(client.post("/api/step").get_json()["last_result"]["kind"])
        assert kinds == ["expanded", "expanded", "expanded", "found"]

        data = client.get("/api/state").get_json()
        assert data["finished"]
        assert data["last_result"]["path"] == [0, 2, 5]
        assert data["node_states"]["5"] == "path"

        # further steps keep returning the terminal result
        again = client.post("/api/step").get_json()
        assert again["last_result"]["kind"] == "found"

    def test_unknown_node(self, client):
        res = client.post("/api/select", json={"node": 40})
        assert res.status_code == 400
        assert "40" in res.get_json()["error"]

    def test_non_integer_node(self, client):
        assert client.post("/api/select", json={"node": "five"}).status_code == 400

    def test_play_then_tick(self, client):
        client.post("/api/select", json={"node": 6})
        data = client.post("/api/play").get_json()
        assert data["playing"]
        tick = client.post("/api/tick").get_json()
        assert tick["advanced"]
        assert tick["last_result"]["node"] == 0

    def test_reset(self, client):
        client.post("/api/select", json={"node": 6})
        client.post("/api/step")
        data = client.post("/api/reset").get_json()
        assert data["target"] is None
        assert not data["running"]


class TestRandomBoard:
    def test_new_dijkstra_board(self, client):
        data = client.post("/api/board", json={"kind": "random", "mode": "dijkstra"}).get_json()
        assert data["kind"] == "random"
        assert data["message"] == "Please select the starting point"
        assert client.post("/api/select", json={"node": 0}).get_json()["role"] == "source"
        assert client.post("/api/select", json={"node": 4}).get_json()["role"] == "target"
        first = client.post("/api/step").get_json()
        assert first["last_result"]["kind"] == "expanded"
        assert first["last_result"]["node"] == 0
        assert first["interval"] == 1.0

    def test_bad_board_kind(self, client):
        assert client.post("/api/board", json={"kind": "hexagon"}).status_code == 400

    def test_wrong_mode_for_kind(self, client):
        assert client.post("/api/board", json={"kind": "random", "mode": "bfs"}).status_code == 400


class TestConfigRoute:
    def test_config_applies_to_next_board(self, client):
        res = client.post("/api/config", json={"changes": {"tree.height": 3}})
        assert res.get_json()["config"]["tree_height"] == 3
        data = client.post("/api/board", json={"kind": "tree"}).get_json()
        assert len(data["graph"]["nodes"]) == 15

    def test_bad_config(self, client):
        res = client.post("/api/config", json={"changes": {"edge.per_node": 0}})
        assert res.status_code == 400

    def test_oversized_tree_rejected(self, client):
        res = client.post("/api/config", json={"changes": {"tree.height": 40}})
        assert res.status_code == 400
        assert "tree_height" in res.get_json()["error"]
        data = client.post("/api/board", json={"kind": "tree"}).get_json()
        assert len(data["graph"]["nodes"]) == 7

    def test_changes_not_a_mapping(self, client):
        res = client.post("/api/config", json={"changes": [1, 2]})
        assert res.status_code == 400
        assert "error" in res.get_json()

    def test_body_not_an_object(self, client):
        assert client.post("/api/select", json=[5]).status_code == 400


class TestBoardRegistry:
    def test_sessions_beyond_limit_are_evicted(self):
        app = create_app(VisualizerConfig(tree_height=1), max_boards=3)
        registry = app.extensions["boards"]
        for _ in range(4):
            with app.test_client() as c:
                assert c.get("/api/state").status_code == 200
        assert len(registry) == 3

    def test_least_recently_used_goes_first(self):
        registry = BoardRegistry(VisualizerConfig(tree_height=1), max_boards=2)
        registry.get("a")
        registry.get("b")
        registry.get("a")
        registry.get("c")
        assert "a" in registry
        assert "c" in registry
        assert "b" not in registry

    def test_config_kept_with_session(self):
        registry = BoardRegistry(VisualizerConfig(tree_height=1), max_boards=1)
        registry.set_config("a", VisualizerConfig(tree_height=2))
        assert registry.config_for("a").tree_height == 2
        registry.get("b")
        assert "a" not in registry
        assert registry.config_for("a").tree_height == 1

    def test_limit_must_be_positive(self):
        with pytest.raises(ValueError):
            BoardRegistry(VisualizerConfig(), max_boards=0)
