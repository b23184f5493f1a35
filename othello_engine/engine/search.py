from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .board import Board, Player
from .eval import SCORE_LOSS, SCORE_WIN, evaluate
from .moves import apply_move, count_moves, generate_moves
from .openings import OpeningBook
from .ordering import SearchStats, order_moves
from .solver import solve_endgame
from .strength import Difficulty

log = logging.getLogger(__name__)


@dataclass
class SearchResult:
    best_move: Optional[int]
    score: Optional[int]
    nodes: int
    source: str  # "none", "forced", "book", "search" or "endgame"


def alphabeta(board: Board, player: Player, depth: int, alpha: int, beta: int,
              maximizing: bool, stats: Optional[SearchStats] = None) -> int:
    """Depth-limited minimax with alpha-beta pruning, scored for `player`."""
    if stats is not None:
        stats.nodes += 1
    if depth <= 0:
        return evaluate(board, player)

    current = player if maximizing else player.opponent()
    moves = generate_moves(board, current)
    if moves.is_empty():
        if count_moves(board, current.opponent()) == 0:
            return evaluate(board, player)
        # A pass does not consume depth
        return alphabeta(board, player, depth, alpha, beta, not maximizing, stats)

    if maximizing:
        best = SCORE_LOSS
        for m in order_moves(board, current, moves):
            score = alphabeta(apply_move(board, current, m), player, depth - 1, alpha, beta, False, stats)
            best = max(best, score)
            alpha = max(alpha, score)
            if beta <= alpha:
                break
        return best

    best = SCORE_WIN
    for m in order_moves(board, current, moves):
        score = alphabeta(apply_move(board, current, m), player, depth - 1, alpha, beta, True, stats)
        best = min(best, score)
        beta = min(beta, score)
        if beta <= alpha:
            break
    return best


class Searcher:
    def __init__(self) -> None:
        self.stats = SearchStats()

    def search(self, board: Board, player: Player, difficulty: Difficulty) -> SearchResult:
        self.stats = SearchStats()
        moves = generate_moves(board, player)
        if moves.is_empty():
            return SearchResult(None, None, 0, "none")
        if len(moves) == 1:
            return SearchResult(moves[0].pos, None, 0, "forced")

        if difficulty.use_opening_book():
            book_move = OpeningBook.lookup(board)
            if book_move is not None and book_move in moves.positions():
                log.debug("book move %d for %s", book_move, player.name)
                return SearchResult(book_move, None, 0, "book")

        endgame = difficulty.use_endgame_solver() and board.empty_count() <= difficulty.endgame_threshold()
        depth = difficulty.depth()
        ordered = order_moves(board, player, moves)

        # Every root move gets a full window so the true maximum is found
        best_move = ordered[0].pos
        best_score = None
        for m in ordered:
            child = apply_move(board, player, m)
            if endgame:
                score = solve_endgame(child, player, SCORE_LOSS, SCORE_WIN, False, self.stats)
            else:
                score = alphabeta(child, player, depth - 1, SCORE_LOSS, SCORE_WIN, False, self.stats)
            if best_score is None or score > best_score:
                best_score = score
                best_move = m.pos

        source = "endgame" if endgame else "search"
        log.debug("%s search for %s at %s: move=%d score=%d nodes=%d",
                  source, player.name, difficulty.name, best_move, best_score, self.stats.nodes)
        return SearchResult(best_move, best_score, self.stats.nodes, source)


def find_best_move(board: Board, player: Player, difficulty: Difficulty) -> Optional[int]:
    return Searcher().search(board, player, difficulty).best_move


def get_hint(board: Board, player: Player) -> Optional[int]:
    return find_best_move(board, player, Difficulty.HARD)
