"""
Tests for structured game logging.
"""

import json
import logging
from datetime import date

from wordle_api.models.game import Game, GameView, Guess, LetterResult
from wordle_api.utils.game_logger import GameLogger


def test_file_logging_writes_json_lines(tmp_path):
    game_logger = GameLogger('wordle_game_test')
    game_logger.setup(str(tmp_path))

    game_logger.log_game_event('game-1', 'game_won', {'user_ip': 'system'}, rounds_used=3)
    for handler in game_logger.logger.handlers:
        handler.flush()

    stats = game_logger.get_log_stats()
    assert stats['total_entries'] == 1
    assert stats['game_events'] == 1

    with open(stats['log_file'], encoding='utf-8') as f:
        line = f.readline()
    entry = json.loads(line.split(' | ', 2)[2])
    assert entry['event_type'] == 'GAME_EVENT'
    assert entry['action'] == 'game_won'
    assert entry['details'] == {'game_id': 'game-1', 'rounds_used': 3}

    game_logger.logger.handlers.clear()


def test_sanitized_responses_never_contain_the_secret():
    response = {
        'success': True,
        'state': {'status': 'Won', 'attempts_used': 2, 'max_attempts': 6, 'secret_word': 'CRANE'}
    }
    sanitized = GameLogger('wordle_game_test')._sanitize_response_data(response)

    assert sanitized['state'] == {
        'status': 'Won', 'attempts_used': 2, 'max_attempts': 6, 'answer_revealed': True
    }
    assert 'CRANE' not in json.dumps(sanitized)


def test_log_stats_without_file_logging():
    game_logger = GameLogger('wordle_game_test')
    game_logger.setup(None)
    assert game_logger.get_log_stats() == {'error': 'File logging is disabled'}
    game_logger.logger.handlers.clear()


def test_game_outcome_events(caplog):
    game_logger = GameLogger('wordle_game_test')
    game = Game(id='game-1', owner_id='player-1', secret_word='CRANE', day=date(2025, 6, 1), max_attempts=6)
    user_info = {'user_ip': '127.0.0.1', 'user_id': 'player-1', 'username': 'alice'}

    with caplog.at_level(logging.INFO, logger='wordle_game_test'):
        game_logger.log_game_opened(GameView.from_game(game), False, user_info)
        game = game.with_guess(Guess('TRACE', (LetterResult.WRONG,) * 5))
        game_logger.log_game_outcome(GameView.from_game(game), 'TRACE', user_info)
        game = game.with_guess(Guess('CRANE', (LetterResult.CORRECT,) * 5))
        game_logger.log_game_outcome(GameView.from_game(game), 'CRANE', user_info)

    entries = [json.loads(record.getMessage()) for record in caplog.records]
    assert [entry['action'] for entry in entries] == ['game_resumed', 'game_won']
    assert entries[0]['details'] == {'game_id': 'game-1', 'day': '2025-06-01'}
    assert entries[1]['details']['rounds_used'] == 2
    assert entries[1]['user'] == user_info
