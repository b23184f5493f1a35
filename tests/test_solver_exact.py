from __future__ import annotations

import random

from othello_engine.engine.board import Board, Player
from othello_engine.engine.eval import SCORE_LOSS, SCORE_WIN
from othello_engine.engine.game import GameState
from othello_engine.engine.moves import apply_move, count_moves, generate_moves
from othello_engine.engine.search import Searcher
from othello_engine.engine.solver import exact_score, solve_exact
from othello_engine.engine.strength import Difficulty


def brute_force(board: Board, root: Player, current: Player) -> int:
    moves = generate_moves(board, current)
    if moves.is_empty():
        if count_moves(board, current.opponent()) == 0:
            return exact_score(board, root)
        return brute_force(board, root, current.opponent())
    scores = [brute_force(apply_move(board, current, m), root, current.opponent()) for m in moves]
    return max(scores) if current == root else min(scores)


def endgame_positions(count: int, max_empties: int, seed: int):
    rng = random.Random(seed)
    out = []
    while len(out) < count:
        game = GameState()
        while not game.is_game_over() and game.empty_count() > max_empties:
            if not game.has_moves():
                game.pass_turn()
                continue
            game.make_move(rng.choice(game.legal_moves().positions()))
        if not game.is_game_over() and game.count_legal_moves() >= 2:
            out.append((game.board().copy(), game.current_player()))
    return out


def test_exact_score_ordering():
    b = Board.empty()
    for i in range(40):
        b.place(Player.BLACK, i)
    for i in range(40, 64):
        b.place(Player.WHITE, i)
    assert exact_score(b, Player.BLACK) == SCORE_WIN - 24
    assert exact_score(b, Player.WHITE) == SCORE_LOSS + 24
    draw = Board(0xFFFFFFFF00000000, 0x00000000FFFFFFFF)
    assert exact_score(draw, Player.BLACK) == 0
    # bigger wins rank higher, smaller losses rank higher
    big_win = Board(0xFFFFFFFFFFFFFF00, 0xFF)
    assert exact_score(big_win, Player.BLACK) > exact_score(b, Player.BLACK)
    assert exact_score(big_win, Player.WHITE) < exact_score(b, Player.WHITE)


def test_terminal_position_solves_to_its_score():
    b = Board.empty()
    b.place(Player.BLACK, 0)
    b.place(Player.BLACK, 9)
    b.place(Player.WHITE, 63)
    assert count_moves(b, Player.BLACK) == 0 and count_moves(b, Player.WHITE) == 0
    assert solve_exact(b, Player.BLACK) == SCORE_WIN - 1
    assert solve_exact(b, Player.WHITE) == SCORE_LOSS + 1


def test_solver_matches_brute_force():
    for board, player in endgame_positions(4, 7, seed=1234):
        expected = brute_force(board, player, player)
        assert solve_exact(board, player) == expected


def test_endgame_search_picks_an_optimal_move():
    board, player = endgame_positions(1, 8, seed=42)[0]
    res = Searcher().search(board, player, Difficulty.HARD)
    assert res.source == "endgame"
    values = {m.pos: brute_force(apply_move(board, player, m), player, player.opponent())
              for m in generate_moves(board, player)}
    assert res.score == max(values.values())
    assert values[res.best_move] == res.score
