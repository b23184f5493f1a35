"""Move generation and validation.

Legality is decided by `calculate_flips`: a placement is legal iff it captures
at least one disc. The bulk helpers use the shift-based kernel in
`movegen_fast` to find candidate squares; `movegen_ref` keeps the plain
per-square scan so the two can be checked against each other.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

from .board import Board, Player, iter_bits, popcount
from .movegen_fast import flip_mask, legal_moves_mask

MOVE_LIST_CAPACITY = 32


@dataclass(frozen=True)
class Move:
    pos: int
    flipped: int

    def is_valid(self) -> bool:
        return self.flipped != 0

    def flip_count(self) -> int:
        return popcount(self.flipped)


class MoveList:
    """Ordered moves in generation order, capped at 32 entries."""

    def __init__(self) -> None:
        self._moves: List[Move] = []

    def push(self, m: Move) -> None:
        # No position has more than 32 legal moves; extra pushes are dropped
        if len(self._moves) < MOVE_LIST_CAPACITY:
            self._moves.append(m)

    def get(self, index: int) -> Optional[Move]:
        if 0 <= index < len(self._moves):
            return self._moves[index]
        return None

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self._moves)

    def __getitem__(self, index: int) -> Move:
        return self._moves[index]

    def is_empty(self) -> bool:
        return not self._moves

    def positions(self) -> List[int]:
        return [m.pos for m in self._moves]

    def as_bitboard(self) -> int:
        bits = 0
        for m in self._moves:
            bits |= 1 << m.pos
        return bits

    def __repr__(self) -> str:
        return f"MoveList({self._moves!r})"


def calculate_flips(board: Board, player: Player, pos: int) -> int:
    if not 0 <= pos < 64 or board.is_occupied(pos):
        return 0
    return flip_mask(board.get(player), board.get(player.opponent()), pos)


def legal_moves_bitboard(board: Board, player: Player) -> int:
    return legal_moves_mask(board.get(player), board.get(player.opponent()))


def generate_moves(board: Board, player: Player) -> MoveList:
    moves = MoveList()
    for pos in iter_bits(legal_moves_bitboard(board, player)):
        flipped = calculate_flips(board, player, pos)
        if flipped:
            moves.push(Move(pos, flipped))
    return moves


def count_moves(board: Board, player: Player) -> int:
    return popcount(legal_moves_bitboard(board, player))


def is_legal_move(board: Board, player: Player, pos: int) -> bool:
    if not 0 <= pos < 64 or board.is_occupied(pos):
        return False
    return calculate_flips(board, player, pos) != 0


def game_has_moves(board: Board) -> bool:
    return count_moves(board, Player.BLACK) > 0 or count_moves(board, Player.WHITE) > 0


def apply_move(board: Board, player: Player, m: Move) -> Board:
    """Return a new board with `m` played by `player`."""
    b = board.copy()
    b.place(player, m.pos)
    b.flip(player.opponent(), m.flipped)
    return b
