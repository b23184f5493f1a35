from __future__ import annotations

from .board import MASK64

# File masks applied after a shift to stop bits wrapping across the board edge
NOT_A = 0xFEFEFEFEFEFEFEFE
NOT_H = 0x7F7F7F7F7F7F7F7F

# (delta, post-shift mask): E, W, S, N, SE, SW, NE, NW with row 0 = rank 1
DIRECTIONS = (
    (1, NOT_A),
    (-1, NOT_H),
    (8, MASK64),
    (-8, MASK64),
    (9, NOT_A),
    (7, NOT_H),
    (-7, NOT_A),
    (-9, NOT_H),
)


def _shift(bb: int, d: int, mask: int) -> int:
    if d > 0:
        return (bb << d) & mask & MASK64
    return (bb >> -d) & mask


def legal_moves_mask(own: int, opp: int) -> int:
    """Bitmask of squares where `own` may play against `opp`."""
    empty = ~(own | opp) & MASK64
    moves = 0
    for d, mask in DIRECTIONS:
        t = _shift(own, d, mask) & opp
        # Up to 5 additional expansions are sufficient on an 8x8 board
        t |= _shift(t, d, mask) & opp
        t |= _shift(t, d, mask) & opp
        t |= _shift(t, d, mask) & opp
        t |= _shift(t, d, mask) & opp
        t |= _shift(t, d, mask) & opp
        moves |= _shift(t, d, mask) & empty
    return moves


def flip_mask(own: int, opp: int, sq: int) -> int:
    """Discs of `opp` captured if `own` plays at `sq` (0 when nothing is captured)."""
    m = 1 << sq
    flips = 0
    for d, mask in DIRECTIONS:
        run = 0
        cur = _shift(m, d, mask)
        while cur & opp:
            run |= cur
            cur = _shift(cur, d, mask)
        if run and (cur & own):
            flips |= run
    return flips
