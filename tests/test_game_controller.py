"""
Tests for the HTTP endpoints and Socket.IO events, using Flask's test client
and Flask-SocketIO's test client.
"""

import unittest

from wordle_grid import create_app
from wordle_grid.config import TestingConfig
from wordle_grid.config.game_settings import MAX_ROUNDS, WORD_BANK
from wordle_grid.services import game_service as game_service_module
from wordle_grid.services.game_service import initialize_game_service


class ServerTestCase(unittest.TestCase):

    def setUp(self):
        self.service = initialize_game_service()
        self.app, self.socketio = create_app(TestingConfig)
        self.client = self.app.test_client()

    def tearDown(self):
        game_service_module._game_service = None

    def press(self, game_id, keys):
        response = None
        for key in keys:
            response = self.client.post(f'/api/game/{game_id}/key', json={'key': key})
        return response


class TestHttpEndpoints(ServerTestCase):

    def test_new_game(self):
        response = self.client.post('/api/new_game')
        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertTrue(data['success'])
        self.assertIn(data['game_id'], self.service.games)
        state = data['state']
        self.assertEqual(state['current_row'], 0)
        self.assertEqual(state['status'], 'PLAYING')
        self.assertIsNone(state['answer'])
        self.assertEqual(len(state['board']), MAX_ROUNDS)

    def test_new_game_does_not_leak_target(self):
        data = self.client.post('/api/new_game').get_json()
        target = self.service.games[data['game_id']].engine.target_word
        self.assertIn(target, WORD_BANK)
        self.assertNotIn(target, str(data))

    def test_get_state(self):
        game_id = self.service.create_new_game(target_word="apple")
        response = self.client.get(f'/api/game/{game_id}/state')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()['state']['game_id'], game_id)

    def test_get_state_unknown_game(self):
        response = self.client.get('/api/game/nope/state')
        self.assertEqual(response.status_code, 404)
        self.assertFalse(response.get_json()['success'])

    def test_key_press_scores_row(self):
        game_id = self.service.create_new_game(target_word="mango")
        response = self.press(game_id, ["g", "o", "o", "d", "y", "Enter"])
        state = response.get_json()['state']
        self.assertEqual([c['css_class'] for c in state['board'][0]],
                         ["misplaced", "misplaced", "misplaced", "incorrect", "incorrect"])
        self.assertEqual(state['current_row'], 1)

    def test_ignored_key_is_not_an_error(self):
        game_id = self.service.create_new_game(target_word="mango")
        response = self.press(game_id, ["F5"])
        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertTrue(data['success'])
        self.assertEqual(data['state']['board'][0][0]['letter'], "")

    def test_winning_reveals_answer(self):
        game_id = self.service.create_new_game(target_word="mango")
        state = self.press(game_id, list("MANGO") + ["Enter"]).get_json()['state']
        self.assertTrue(state['won'])
        self.assertEqual(state['answer'], "mango")

    def test_key_required(self):
        game_id = self.service.create_new_game(target_word="mango")
        response = self.client.post(f'/api/game/{game_id}/key', json={})
        self.assertEqual(response.status_code, 400)
        response = self.client.post(f'/api/game/{game_id}/key', data="not json")
        self.assertEqual(response.status_code, 400)

    def test_key_unknown_game(self):
        response = self.client.post('/api/game/nope/key', json={'key': 'a'})
        self.assertEqual(response.status_code, 404)

    def test_delete_game(self):
        game_id = self.service.create_new_game()
        response = self.client.delete(f'/api/game/{game_id}')
        self.assertTrue(response.get_json()['success'])
        response = self.client.delete(f'/api/game/{game_id}')
        self.assertFalse(response.get_json()['success'])

    def test_health(self):
        self.service.create_new_game()
        data = self.client.get('/api/health').get_json()
        self.assertEqual(data['status'], 'healthy')
        self.assertEqual(data['active_games'], 1)
        self.assertIn('log_stats', data)

    def test_service_unavailable(self):
        game_service_module._game_service = None
        response = self.client.post('/api/new_game')
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.get_json()['error'], 'Game service unavailable')


class TestWebsocketEvents(ServerTestCase):

    def setUp(self):
        super().setUp()
        self.socket = self.socketio.test_client(self.app)

    def tearDown(self):
        if self.socket.is_connected():
            self.socket.disconnect()
        super().tearDown()

    def last_event(self):
        received = self.socket.get_received()
        self.assertTrue(received)
        return received[-1]

    def test_new_game_event(self):
        self.socket.emit('new_game')
        event = self.last_event()
        self.assertEqual(event['name'], 'game_state')
        payload = event['args'][0]
        self.assertIn(payload['game_id'], self.service.games)
        self.assertEqual(payload['state']['status'], 'PLAYING')

    def test_key_event(self):
        game_id = self.service.create_new_game(target_word="apple")
        for key in ["a", "p", "p", "l", "e", "Enter"]:
            self.socket.emit('key', {'game_id': game_id, 'key': key})
        event = self.last_event()
        self.assertEqual(event['name'], 'game_state')
        self.assertEqual(event['args'][0]['state']['status'], 'WON')

    def test_key_event_missing_fields(self):
        self.socket.emit('key', {'key': 'a'})
        event = self.last_event()
        self.assertEqual(event['name'], 'error')

    def test_key_event_unknown_game(self):
        self.socket.emit('key', {'game_id': 'nope', 'key': 'a'})
        event = self.last_event()
        self.assertEqual(event['name'], 'error')
        self.assertEqual(event['args'][0]['error'], 'Game not found')


if __name__ == "__main__":
    unittest.main()
