from __future__ import annotations

from typing import Optional

from .board import Board, Player
from .eval import SCORE_LOSS, SCORE_WIN
from .moves import apply_move, count_moves, generate_moves
from .ordering import SearchStats, order_moves


def exact_score(board: Board, player: Player) -> int:
    """Final score of a finished game for `player`: bigger wins and smaller losses rank higher."""
    own = board.count(player)
    opp = board.count(player.opponent())
    if own > opp:
        return SCORE_WIN - opp
    if opp > own:
        return SCORE_LOSS + own
    return 0


def solve_endgame(board: Board, player: Player, alpha: int, beta: int,
                  maximizing: bool, stats: Optional[SearchStats] = None) -> int:
    """Search to the end of the game and return the exact score for `player`."""
    if stats is not None:
        stats.nodes += 1
    current = player if maximizing else player.opponent()
    moves = generate_moves(board, current)
    if moves.is_empty():
        if count_moves(board, current.opponent()) == 0:
            return exact_score(board, player)
        return solve_endgame(board, player, alpha, beta, not maximizing, stats)

    if maximizing:
        best = SCORE_LOSS
        for m in order_moves(board, current, moves):
            score = solve_endgame(apply_move(board, current, m), player, alpha, beta, False, stats)
            best = max(best, score)
            alpha = max(alpha, score)
            if beta <= alpha:
                break
        return best

    best = SCORE_WIN
    for m in order_moves(board, current, moves):
        score = solve_endgame(apply_move(board, current, m), player, alpha, beta, True, stats)
        best = min(best, score)
        beta = min(beta, score)
        if beta <= alpha:
            break
    return best


def solve_exact(board: Board, player: Player) -> int:
    """Exact value of `board` with `player` to move."""
    return solve_endgame(board, player, SCORE_LOSS, SCORE_WIN, True)
