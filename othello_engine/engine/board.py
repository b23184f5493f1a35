from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Optional

# Board is 8x8, squares numbered 0..63, A1=0 (LSB) to H8=63 (MSB).
# Two disjoint bitboards, one per colour.

MASK64 = 0xFFFFFFFFFFFFFFFF
_HASH_MUL = 0x9E3779B97F4A7C15


class Player(IntEnum):
    BLACK = 0
    WHITE = 1

    def opponent(self) -> "Player":
        return Player.WHITE if self is Player.BLACK else Player.BLACK


def popcount(x: int) -> int:
    return x.bit_count()


def iter_bits(bits: int) -> Iterator[int]:
    """Yield the set bit positions of `bits`, lowest first."""
    while bits:
        lsb = bits & -bits
        yield lsb.bit_length() - 1
        bits ^= lsb


def lowest_bit_pos(bits: int) -> Optional[int]:
    if bits == 0:
        return None
    return (bits & -bits).bit_length() - 1


@dataclass
class Board:
    black: int = 0
    white: int = 0

    @staticmethod
    def new() -> "Board":
        # D4=White, E4=Black, D5=Black, E5=White
        return Board(black=(1 << 28) | (1 << 35), white=(1 << 27) | (1 << 36))

    @staticmethod
    def empty() -> "Board":
        return Board(0, 0)

    def copy(self) -> "Board":
        return Board(self.black, self.white)

    def get(self, player: Player) -> int:
        return self.black if player == Player.BLACK else self.white

    def _set(self, player: Player, bits: int) -> None:
        if player == Player.BLACK:
            self.black = bits & MASK64
        else:
            self.white = bits & MASK64

    def has_disc(self, player: Player, pos: int) -> bool:
        return (self.get(player) >> pos) & 1 == 1

    def is_empty(self, pos: int) -> bool:
        return ((self.black | self.white) >> pos) & 1 == 0

    def is_occupied(self, pos: int) -> bool:
        return not self.is_empty(pos)

    def get_disc(self, pos: int) -> Optional[Player]:
        mask = 1 << pos
        if self.black & mask:
            return Player.BLACK
        if self.white & mask:
            return Player.WHITE
        return None

    def place(self, player: Player, pos: int) -> None:
        self._set(player, self.get(player) | (1 << pos))

    def remove(self, player: Player, pos: int) -> None:
        self._set(player, self.get(player) & ~(1 << pos))

    def flip(self, from_player: Player, flipped: int) -> None:
        """Move every square in `flipped` from `from_player` to the opponent."""
        if from_player == Player.BLACK:
            self.black, self.white = self.black & ~flipped & MASK64, self.white | flipped
        else:
            self.white, self.black = self.white & ~flipped & MASK64, self.black | flipped

    def count(self, player: Player) -> int:
        return popcount(self.get(player))

    def empty_count(self) -> int:
        return 64 - popcount(self.black | self.white)

    def empty_squares(self) -> int:
        return ~(self.black | self.white) & MASK64

    def occupied(self) -> int:
        return self.black | self.white

    def is_full(self) -> bool:
        return (self.black | self.white) == MASK64

    def hash(self) -> int:
        return ((self.black * _HASH_MUL) & MASK64) ^ self.white

    def __str__(self) -> str:
        rows = []
        for r in range(8):
            cells = []
            for c in range(8):
                disc = self.get_disc(r * 8 + c)
                cells.append("." if disc is None else ("X" if disc == Player.BLACK else "O"))
            rows.append(f"{r + 1} " + " ".join(cells))
        return "  A B C D E F G H\n" + "\n".join(rows)
