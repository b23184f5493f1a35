from __future__ import annotations

import logging
import random

from othello_engine.engine.board import Player
from othello_engine.engine.game import GameResult, GameState
from othello_engine.engine.notation import pos
from othello_engine.engine.strength import Difficulty
from othello_engine.records.storage import (
    TWO_PLAYER_MODE,
    Settings,
    Statistics,
    encode_game,
    load_game,
    mode_from_byte,
    mode_to_byte,
)


def _random_game(seed: int, plies: int) -> GameState:
    rng = random.Random(seed)
    game = GameState()
    for _ in range(plies):
        if game.is_game_over():
            break
        if not game.has_moves():
            game.pass_turn()
        else:
            game.make_move(rng.choice(game.legal_moves().positions()))
    return game


def test_mode_bytes():
    assert mode_to_byte(None) == TWO_PLAYER_MODE
    assert mode_to_byte(Difficulty.EXPERT) == 3
    assert mode_from_byte(0) is Difficulty.EASY
    assert mode_from_byte(TWO_PLAYER_MODE) is None
    assert mode_from_byte(200) is None


def test_header_layout():
    game = GameState()
    game.make_move(pos(2, 3))  # D3
    data = encode_game(game, Player.WHITE, Difficulty.HARD)
    assert len(data) == 21 + 9
    assert int.from_bytes(data[0:8], "little") == game.board().black
    assert int.from_bytes(data[8:16], "little") == game.board().white
    assert data[16] == 1  # white to move
    assert data[17] == 1  # human plays white
    assert data[18] == 2  # hard
    assert int.from_bytes(data[19:21], "little") == 1
    assert data[21] == pos(2, 3)


def test_round_trip_random_games():
    for seed in range(5):
        game = _random_game(seed, 30 + seed * 7)
        saved = load_game(encode_game(game, Player.BLACK, None))
        assert saved is not None
        assert saved.game.board() == game.board()
        assert saved.game.current_player() == game.current_player()
        assert saved.game.history() == game.history()
        assert saved.mode is None
        assert saved.human == Player.BLACK


def test_round_trip_complete_game_with_mode():
    game = _random_game(99, 200)
    assert game.is_game_over()
    saved = load_game(encode_game(game, Player.WHITE, Difficulty.MEDIUM))
    assert saved.mode is Difficulty.MEDIUM
    assert saved.game.is_game_over()
    assert saved.game.result() == game.result()


def test_short_data_is_rejected(caplog):
    with caplog.at_level(logging.WARNING):
        assert load_game(b"\x00" * 20) is None
    assert "too short" in caplog.text


def test_truncated_history_keeps_prefix(caplog):
    game = _random_game(7, 10)
    data = encode_game(game, Player.BLACK, Difficulty.EASY)
    with caplog.at_level(logging.WARNING):
        saved = load_game(data[:21 + 9 * 4 + 3])
    assert saved is not None
    assert saved.game.move_count() == 4
    assert saved.game.history() == game.history()[:4]
    assert "truncated" in caplog.text


def test_unreplayable_entry_is_skipped(caplog):
    game = GameState()
    game.make_move(pos(2, 3))
    data = bytearray(encode_game(game, Player.BLACK, None))
    data[21] = 0  # A1 is never legal from the start
    with caplog.at_level(logging.WARNING):
        saved = load_game(bytes(data))
    assert saved.game.move_count() == 0
    assert "cannot be replayed" in caplog.text


def test_settings_round_trip():
    settings = Settings(show_coordinates=True, sound=False, last_difficulty=3)
    data = settings.to_bytes()
    assert len(data) == Settings.SIZE
    assert data[0] == 1 and data[8] == 0 and data[9] == 3
    assert Settings.from_bytes(data) == settings
    assert Settings.from_bytes(data[:5]) is None
    assert Settings() == Settings.from_bytes(Settings().to_bytes())


def test_statistics_round_trip_and_record():
    stats = Statistics()
    stats.record(Difficulty.EASY, Player.BLACK, GameResult.from_counts(40, 24))
    stats.record(Difficulty.EASY, Player.WHITE, GameResult.from_counts(40, 24))
    stats.record(Difficulty.EXPERT, Player.BLACK, GameResult.from_counts(32, 32))
    stats.record(None, Player.BLACK, GameResult.from_counts(10, 54))
    assert stats.easy_wins == 1
    assert stats.easy_losses == 1
    assert stats.expert_draws == 1
    assert stats.two_player_games == 1
    assert stats.total_games() == 4

    data = stats.to_bytes()
    assert len(data) == Statistics.SIZE
    assert Statistics.from_bytes(data) == stats
    assert Statistics.from_bytes(data[:10]) is None
