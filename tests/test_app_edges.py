import json
import unittest
from unittest.mock import patch

from app import app as flask_app
import app as app_mod


class TestFlaskAPIEdges(unittest.TestCase):
    def setUp(self):
        self.client = flask_app.test_client()
        r = self._post("/api/new", {"mode": "pvp"})
        self.gid = r.get_json()["gameId"]

    def _post(self, path, payload):
        return self.client.post(path, data=json.dumps(payload), content_type="application/json")

    def test_given_illegal_move_when_post_to_move_then_400_with_legal_moves(self):
        for mv in ([0, 0], [3, 3]):
            r = self._post("/api/move", {"gameId": self.gid, "move": mv})
            self.assertEqual(r.status_code, 400)
            d = r.get_json()
            self.assertFalse(d["ok"])
            self.assertEqual(d["legalMoves"], [[2, 3], [3, 2], [4, 5], [5, 4]])

    def test_given_out_of_bounds_move_when_posted_then_400(self):
        r = self._post("/api/move", {"gameId": self.gid, "move": [9, 9]})
        self.assertEqual(r.status_code, 400)
        self.assertIn("outside the board", r.get_json()["error"])

    def test_given_malformed_move_when_posted_then_400(self):
        for mv in (None, [1], "2,3", ["a", "b"], [2.9, 3.4], [True, 3]):
            r = self._post("/api/move", {"gameId": self.gid, "move": mv})
            self.assertEqual(r.status_code, 400)
        raw = '{"gameId": "%s", "move": [1e400, 3]}' % self.gid
        r = self.client.post("/api/move", data=raw, content_type="application/json")
        self.assertEqual(r.status_code, 400)
        # Nothing was played
        state = self._post("/api/state", {"gameId": self.gid}).get_json()["state"]
        self.assertEqual(state["score"], {"black": 2, "white": 2})

    def test_given_non_integer_cells_when_loading_position_then_400(self):
        for rows in ([[None] * 8] * 8, [1] * 8, [[1.5] * 8] * 8):
            r = self._post("/api/new_from", {"board": rows})
            self.assertEqual(r.status_code, 400)
            self.assertFalse(r.get_json()["ok"])

    def test_given_pvp_game_when_asking_ai_then_409(self):
        r = self._post("/api/ai", {"gameId": self.gid})
        self.assertEqual(r.status_code, 409)
        self.assertFalse(r.get_json()["ok"])

    def test_given_computer_turn_when_human_moves_then_409(self):
        gid = self._post("/api/new", {"mode": "pvc", "computer": "black"}).get_json()["gameId"]
        r = self._post("/api/move", {"gameId": gid, "move": [2, 3]})
        self.assertEqual(r.status_code, 409)

    def test_given_unknown_or_missing_game_when_posted_then_404_or_400(self):
        self.assertEqual(self._post("/api/state", {"gameId": "nope"}).status_code, 404)
        self.assertEqual(self._post("/api/state", {}).status_code, 400)
        r = self.client.post("/api/state", data="not json", content_type="application/json")
        self.assertEqual(r.status_code, 400)

    def test_given_bad_mode_or_strategy_when_creating_then_400(self):
        self.assertEqual(self._post("/api/new", {"mode": "online"}).status_code, 400)
        self.assertEqual(self._post("/api/new", {"strategy": "minimax"}).status_code, 400)
        self.assertEqual(self._post("/api/new_from", {"board": ["B"] * 3}).status_code, 400)
        self.assertEqual(self._post("/api/new_from", {}).status_code, 400)

    def test_given_registry_cap_when_exceeded_then_oldest_evicted(self):
        with patch.object(app_mod, "MAX_GAMES", 2):
            ids = [self._post("/api/new", {}).get_json()["gameId"] for _ in range(3)]
            self.assertNotIn(ids[0], app_mod._GAMES)
            self.assertIn(ids[2], app_mod._GAMES)
            self.assertEqual(len(app_mod._GAMES), 2)


if __name__ == "__main__":
    unittest.main()
