from __future__ import annotations

import random

from othello_engine.engine import movegen_ref
from othello_engine.engine.board import Board, Player
from othello_engine.engine.game import GameState
from othello_engine.engine.moves import count_moves, legal_moves_bitboard


def random_play(game: GameState, rng: random.Random, plies: int = 1) -> None:
    for _ in range(plies):
        if game.is_game_over():
            return
        if not game.has_moves():
            game.pass_turn()
            continue
        game.make_move(rng.choice(game.legal_moves().positions()))


def test_fast_and_reference_generators_agree_and_undo_is_exact():
    rng = random.Random(0xC0FFEE)
    for _ in range(30):
        game = GameState()
        while not game.is_game_over():
            b = game.board()
            for p in (Player.BLACK, Player.WHITE):
                assert legal_moves_bitboard(b, p) == movegen_ref.legal_moves_bitboard(b, p)
                assert count_moves(b, p) == movegen_ref.count_moves(b, p)
            # make -> undo returns the identical state for every legal move
            before = (b.black, b.white, game.current_player(), game.consecutive_passes, game.move_count())
            for m in game.legal_moves():
                game.make_move(m.pos)
                game.undo()
                after = game.board()
                assert (after.black, after.white, game.current_player(),
                        game.consecutive_passes, game.move_count()) == before
            random_play(game, rng)


def test_reference_on_empty_board():
    assert movegen_ref.legal_moves_bitboard(Board.empty(), Player.BLACK) == 0
