from __future__ import annotations

from .board import Board, Player, iter_bits
from .moves import calculate_flips


def legal_moves_bitboard(board: Board, player: Player) -> int:
    """Reference generator: try `calculate_flips` on every empty square."""
    legal = 0
    for pos in iter_bits(board.empty_squares()):
        if calculate_flips(board, player, pos):
            legal |= 1 << pos
    return legal


def count_moves(board: Board, player: Player) -> int:
    n = 0
    for pos in iter_bits(board.empty_squares()):
        if calculate_flips(board, player, pos):
            n += 1
    return n
