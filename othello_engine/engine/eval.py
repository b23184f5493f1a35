from __future__ import annotations

from .board import MASK64, Board, Player, popcount
from .moves import count_moves
from .movegen_fast import NOT_A, NOT_H

# Multi-factor evaluation: corners, X/C danger, mobility, frontier,
# phase-weighted disc count and an approximate stability term.
# Scores are from the perspective of the player passed in.

SCORE_WIN = 100_000
SCORE_LOSS = -100_000

CORNERS = (0, 7, 56, 63)
CORNER_MASK = (1 << 0) | (1 << 7) | (1 << 56) | (1 << 63)

# (square, corner it guards)
X_SQUARES = ((9, 0), (14, 7), (49, 56), (54, 63))
C_SQUARES = (
    (1, 0), (8, 0),
    (6, 7), (15, 7),
    (48, 56), (57, 56),
    (55, 63), (62, 63),
)

CORNER_WEIGHT = 100
X_SQUARE_PENALTY = 25
C_SQUARE_PENALTY = 10
MOBILITY_WEIGHT = 3
STABILITY_WEIGHT = 10

# (edge mask, its two corners)
EDGES = (
    (0x00000000000000FF, (0, 7)),     # rank 1
    (0xFF00000000000000, (56, 63)),   # rank 8
    (0x0101010101010101, (0, 56)),    # file A
    (0x8080808080808080, (7, 63)),    # file H
)


def neighbours(bits: int) -> int:
    """All squares king-adjacent to any square in `bits`."""
    east = (bits << 1) & NOT_A & MASK64
    west = (bits >> 1) & NOT_H
    row = bits | east | west
    return (east | west | ((row << 8) & MASK64) | (row >> 8)) & MASK64


def count_frontier(board: Board, player: Player) -> int:
    return popcount(board.get(player) & neighbours(board.empty_squares()))


def evaluate_corners(board: Board, player: Player) -> int:
    own = board.get(player)
    opp = board.get(player.opponent())
    occupied = own | opp
    score = 0
    for corner in CORNERS:
        mask = 1 << corner
        if own & mask:
            score += CORNER_WEIGHT
        elif opp & mask:
            score -= CORNER_WEIGHT
    # X/C squares only matter while their corner is still open
    for squares, penalty in ((X_SQUARES, X_SQUARE_PENALTY), (C_SQUARES, C_SQUARE_PENALTY)):
        for sq, corner in squares:
            if occupied & (1 << corner):
                continue
            mask = 1 << sq
            if own & mask:
                score -= penalty
            elif opp & mask:
                score += penalty
    return score


def evaluate_mobility(board: Board, player: Player) -> int:
    return (count_moves(board, player) - count_moves(board, player.opponent())) * MOBILITY_WEIGHT


def evaluate_frontier(board: Board, player: Player) -> int:
    return count_frontier(board, player.opponent()) - count_frontier(board, player)


def disc_weight(empties: int) -> int:
    if empties > 44:
        return 0
    if empties > 20:
        return 1
    if empties > 10:
        return 2
    return 5


def evaluate_disc_count(board: Board, player: Player) -> int:
    diff = board.count(player) - board.count(player.opponent())
    return diff * disc_weight(board.empty_count())


def count_stable_discs(board: Board, player: Player) -> int:
    # Corners, plus own discs on a full edge anchored by an own corner.
    own = board.get(player)
    stable = own & CORNER_MASK
    occupied = board.occupied()
    for edge, corners in EDGES:
        if occupied & edge != edge:
            continue
        if any(own & (1 << c) for c in corners):
            stable |= own & edge
    return popcount(stable)


def evaluate_stability(board: Board, player: Player) -> int:
    own = count_stable_discs(board, player)
    opp = count_stable_discs(board, player.opponent())
    return (own - opp) * STABILITY_WEIGHT


def terminal_score(board: Board, player: Player, margin_weight: int = 100) -> int:
    own = board.count(player)
    opp = board.count(player.opponent())
    if own > opp:
        return SCORE_WIN - opp * margin_weight
    if opp > own:
        return SCORE_LOSS + own * margin_weight
    return 0


def evaluate(board: Board, player: Player) -> int:
    own_moves = count_moves(board, player)
    opp_moves = count_moves(board, player.opponent())
    if own_moves == 0 and opp_moves == 0:
        return terminal_score(board, player)
    score = 0
    score += evaluate_corners(board, player)
    score += (own_moves - opp_moves) * MOBILITY_WEIGHT
    score += evaluate_frontier(board, player)
    score += evaluate_disc_count(board, player)
    score += evaluate_stability(board, player)
    return score


def quick_evaluate(board: Board, player: Player) -> int:
    """Corners and mobility only; cheaper, same sign conventions as `evaluate`."""
    own = board.get(player)
    opp = board.get(player.opponent())
    score = (popcount(own & CORNER_MASK) - popcount(opp & CORNER_MASK)) * CORNER_WEIGHT
    return score + evaluate_mobility(board, player)
