"""Move ordering and node counting shared by the search and the endgame solver."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .board import Board, Player
from .moves import Move, MoveList, apply_move, count_moves

CORNERS = frozenset((0, 7, 56, 63))
X_SQUARES = frozenset((9, 14, 49, 54))
C_SQUARES = frozenset((1, 6, 8, 15, 48, 55, 57, 62))


@dataclass
class SearchStats:
    nodes: int = 0


def _is_edge(sq: int) -> bool:
    return sq < 8 or sq >= 56 or sq % 8 == 0 or sq % 8 == 7


def move_order_score(board: Board, player: Player, m: Move) -> int:
    if m.pos in CORNERS:
        score = 1000
    elif m.pos in X_SQUARES:
        score = -500
    elif m.pos in C_SQUARES:
        score = -200
    elif _is_edge(m.pos):
        score = 100
    else:
        score = 0
    score += m.flip_count() * 5
    score -= count_moves(apply_move(board, player, m), player.opponent()) * 3
    return score


def order_moves(board: Board, player: Player, moves: MoveList) -> List[Move]:
    """Moves sorted best-first for pruning; stable, so ties keep generation order."""
    scored = [(move_order_score(board, player, m), i, m) for i, m in enumerate(moves)]
    scored.sort(key=lambda t: (-t[0], t[1]))
    return [m for _, _, m in scored]
