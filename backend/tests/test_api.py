import unittest
from unittest.mock import patch

from word_guesser.app import create_app
from word_guesser.models.models import db


class TestAPI(unittest.TestCase):

    def setUp(self):
        self.app = create_app({"SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:", "TESTING": True})
        self.client = self.app.test_client()

        # Every new game gets the same secret word
        self.word_patch = patch("word_guesser.game.game.get_random_word", return_value="hello")
        self.word_patch.start()

    def tearDown(self):
        self.word_patch.stop()
        with self.app.app_context():
            db.session.remove()
            db.drop_all()

    def start_game(self, **kwargs):
        response = self.client.post("/games", **kwargs)
        self.assertEqual(response.status_code, 201)
        return response.get_json()["data"]

    def guess(self, game_id, letter, method="patch"):
        return getattr(self.client, method)(f"/games/{game_id}", json={"letter": letter})

    def test_index(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertIn("message", response.get_json()["data"])

    def test_start_new_game(self):
        data = self.start_game()
        self.assertEqual(data["displayWord"], "*****")
        self.assertFalse(data["correct"])
        self.assertEqual(data["message"], f"Started new game with id {data['gameId']}")

    def test_game_status(self):
        response = self.client.get("/games")
        self.assertEqual(response.get_json()["data"], {"displayWord": "", "status": "game not started"})

        game_id = self.start_game()["gameId"]
        response = self.client.get(f"/games/{game_id}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["data"]["displayWord"], "*****")
        self.assertEqual(response.get_json()["data"]["status"], "game in progress")

        response = self.client.get("/games")
        self.assertEqual(response.get_json()["data"]["status"], "game in progress")

    def test_submit_guess_hit(self):
        game_id = self.start_game()["gameId"]
        response = self.guess(game_id, "l")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.get_json()["data"],
            {"correct": True, "displayWord": "**ll*", "message": "l is in the word"},
        )

    def test_submit_guess_with_post(self):
        game_id = self.start_game()["gameId"]
        response = self.guess(game_id, "z", method="post")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.get_json()["data"],
            {"correct": False, "displayWord": "*****", "message": "z is not in the word"},
        )

    def test_duplicate_guess(self):
        game_id = self.start_game()["gameId"]
        self.guess(game_id, "h")
        response = self.guess(game_id, "h")
        self.assertEqual(
            response.get_json()["data"],
            {"correct": False, "displayWord": "h****", "message": "already guessed h"},
        )

        games = self.client.get("/games/all").get_json()["data"]["games"]
        self.assertEqual(games[0]["guesses"], 1)

    def test_play_to_win(self):
        game_id = self.start_game()["gameId"]
        for letter in "hel":
            self.guess(game_id, letter)
        response = self.guess(game_id, "o")
        self.assertEqual(
            response.get_json()["data"],
            {"correct": True, "displayWord": "hello", "message": "You win!"},
        )

        response = self.guess(game_id, "x")
        self.assertEqual(response.get_json()["data"]["message"], f"already finished game {game_id}")

        status = self.client.get(f"/games/{game_id}").get_json()["data"]
        self.assertEqual(status["status"], "game complete")

        games = self.client.get("/games/all").get_json()["data"]["games"]
        self.assertEqual(games[0]["word"], "hello")
        self.assertEqual(games[0]["guesses"], 4)
        self.assertTrue(games[0]["complete"])

    def test_guessed_letters(self):
        response = self.client.get("/games/guessed")
        self.assertEqual(response.get_json()["data"], {"letters": []})

        game_id = self.start_game()["gameId"]
        for letter in ["z", "l", "z", "h"]:
            self.guess(game_id, letter)

        response = self.client.get(f"/games/{game_id}/guessed")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["data"]["letters"], ["z", "l", "h"])

        response = self.client.get("/games/guessed")
        self.assertEqual(response.get_json()["data"]["letters"], ["z", "l", "h"])

    def test_games_are_independent(self):
        first = self.start_game()["gameId"]
        second = self.start_game()["gameId"]
        self.guess(first, "h")

        response = self.client.get(f"/games/{second}/guessed")
        self.assertEqual(response.get_json()["data"]["letters"], [])
        response = self.guess(second, "h")
        self.assertEqual(response.get_json()["data"]["message"], "h is in the word")

    def test_unknown_game_returns_404(self):
        self.assertEqual(self.client.get("/games/999").status_code, 404)
        self.assertEqual(self.client.get("/games/999/guessed").status_code, 404)

        response = self.guess(999, "a")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.get_json()["error"], "Invalid game ID.")

    def test_invalid_guess_payload(self):
        game_id = self.start_game()["gameId"]

        for payload in [{"letter": "ab"}, {"letter": ""}, {"letter": "1"}, {"letter": 5}]:
            response = self.client.patch(f"/games/{game_id}", json=payload)
            self.assertEqual(response.status_code, 400)

        response = self.client.patch(f"/games/{game_id}", json={"guess": "a"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "Missing required fields: letter")

        response = self.client.patch(f"/games/{game_id}", data="not json")
        self.assertEqual(response.status_code, 400)

        guessed = self.client.get(f"/games/{game_id}/guessed").get_json()["data"]["letters"]
        self.assertEqual(guessed, [])

    def test_players(self):
        response = self.client.post("/players", json={"name": "Ada"})
        self.assertEqual(response.status_code, 201)
        player = response.get_json()["data"]
        self.assertEqual(player["name"], "Ada")
        self.assertEqual(player["games"], [])

        game_id = self.start_game(json={"playerId": player["id"]})["gameId"]
        other_id = self.start_game(query_string={"playerId": player["id"]})["gameId"]

        response = self.client.get(f"/players/{player['id']}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["data"]["games"], [game_id, other_id])

        response = self.client.get("/players")
        self.assertEqual(len(response.get_json()["data"]["players"]), 1)

    def test_player_errors(self):
        self.assertEqual(self.client.get("/players/999").status_code, 404)
        self.assertEqual(self.client.post("/players", json={"name": "  "}).status_code, 400)
        self.assertEqual(self.client.post("/players", json={}).status_code, 400)

        response = self.client.post("/games", json={"playerId": 999})
        self.assertEqual(response.status_code, 404)
        response = self.client.post("/games", json={"playerId": "abc"})
        self.assertEqual(response.status_code, 400)

    def test_unknown_route(self):
        response = self.client.get("/nowhere")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.get_json()["error"], "Not Found")

    def test_init_db_command(self):
        runner = self.app.test_cli_runner()
        result = runner.invoke(args=["init-db"])
        self.assertIn("Initialized the database.", result.output)
