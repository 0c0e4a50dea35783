import json
import unittest

from app import app as flask_app
import app as app_mod


class TestFlaskAPI(unittest.TestCase):
    def setUp(self):
        self.client = flask_app.test_client()

    def _post(self, path, payload):
        return self.client.post(path, data=json.dumps(payload), content_type="application/json")

    def _new(self, **payload):
        r = self._post("/api/new", payload)
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertTrue(data["ok"])
        return data

    def test_given_new_game_when_posted_then_returns_opening_state(self):
        data = self._new(mode="pvp")
        self.assertIn(data["gameId"], app_mod._GAMES)
        state = data["state"]
        self.assertEqual(state["currentPlayer"], "black")
        self.assertEqual(state["mode"], "pvp")
        self.assertEqual(state["score"], {"black": 2, "white": 2})
        self.assertEqual(state["legalMoves"], [[2, 3], [3, 2], [4, 5], [5, 4]])
        self.assertEqual(state["board"][3][3], 2)
        self.assertFalse(state["over"])

        r2 = self._post("/api/state", {"gameId": data["gameId"]})
        self.assertEqual(r2.status_code, 200)
        self.assertEqual(r2.get_json()["state"], state)

        r3 = self._post("/api/legal", {"gameId": data["gameId"]})
        self.assertEqual(r3.get_json()["legalMoves"], state["legalMoves"])

    def test_given_opening_when_black_moves_then_events_describe_flip(self):
        gid = self._new()["gameId"]
        r = self._post("/api/move", {"gameId": gid, "move": [2, 3]})
        self.assertEqual(r.status_code, 200)
        d = r.get_json()
        self.assertTrue(d["ok"])
        self.assertEqual(d["events"], [{
            "type": "moveApplied",
            "placed": [2, 3],
            "flipped": [[3, 3]],
            "player": "black",
            "nextPlayer": "white",
        }])
        self.assertEqual(d["state"]["score"], {"black": 4, "white": 1})
        self.assertEqual(d["state"]["currentPlayer"], "white")

    def test_given_pvc_when_human_then_ai_move_then_turn_returns_to_human(self):
        data = self._new(mode="pvc")
        gid = data["gameId"]
        self.assertEqual(data["state"]["computerPlayer"], "white")
        self._post("/api/move", {"gameId": gid, "move": [2, 3]})
        r = self._post("/api/ai", {"gameId": gid})
        self.assertEqual(r.status_code, 200)
        d = r.get_json()
        self.assertEqual(d["move"], [2, 2])
        self.assertEqual(d["events"][0]["player"], "white")
        self.assertEqual(d["state"]["currentPlayer"], "black")

    def test_given_custom_position_when_loaded_then_session_starts_there(self):
        rows = ["B" * 8] * 4 + ["W" * 8] * 4
        r = self._post("/api/new_from", {"board": rows, "turn": "black"})
        self.assertEqual(r.status_code, 200)
        state = r.get_json()["state"]
        self.assertTrue(state["over"])
        self.assertEqual(state["result"], {"blackCount": 32, "whiteCount": 32, "winner": None, "draw": True})
        self.assertEqual(state["legalMoves"], [])

    def test_given_finished_game_when_reset_with_mode_then_fresh_pvc_game(self):
        gid = self._new()["gameId"]
        self._post("/api/move", {"gameId": gid, "move": [2, 3]})
        r = self._post("/api/reset", {"gameId": gid, "mode": "pvc"})
        self.assertEqual(r.status_code, 200)
        state = r.get_json()["state"]
        self.assertEqual(state["mode"], "pvc")
        self.assertEqual(state["score"], {"black": 2, "white": 2})
        self.assertEqual(state["currentPlayer"], "black")


if __name__ == "__main__":
    unittest.main()
