from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from .board import Board, Player, iter_bits
from .moves import calculate_flips
from .notation import notation_to_coord

log = logging.getLogger(__name__)

# Small embedded book of well known openings. Each entry is a line from the
# standard start (Black first) and the recommended reply.

BOOK_LINES: List[Tuple[str, str, str]] = [
    ("Start", "", "F5"),
    ("Perpendicular", "F5", "D6"),
    ("Tiger", "F5 D6", "C3"),
    ("Tiger", "F5 D6 C3", "D3"),
    ("Tiger", "F5 D6 C3 D3", "C4"),
    ("Tiger", "F5 D6 C3 D3 C4", "F4"),
    ("Rose", "F5 D6 C3 D3 C4 F4", "C5"),
    ("Rose", "F5 D6 C3 D3 C4 F4 C5", "B3"),
    ("Rose", "F5 D6 C3 D3 C4 F4 C5 B3", "C2"),
    ("Buffalo", "F5 D6 C5", "F4"),
    ("Buffalo", "F5 D6 C5 F4", "E3"),
    ("Diagonal", "F5 F4", "E3"),
    ("Diagonal", "F5 F4 E3", "F6"),
    ("Snake", "F5 F4 E3 F6", "D3"),
    ("Parallel", "F5 F6", "E6"),
    ("Parallel", "F5 F6 E6", "F4"),
]


def _rotate_sq(sq: int) -> int:
    # 90 degrees clockwise: (row, col) -> (col, 7 - row)
    row, col = divmod(sq, 8)
    return col * 8 + (7 - row)


def _mirror_sq(sq: int) -> int:
    row, col = divmod(sq, 8)
    return row * 8 + (7 - col)


def _build_symmetries() -> List[Tuple[int, ...]]:
    # Order: identity, mirror, then each further rotation and its mirror
    perms: List[Tuple[int, ...]] = []
    rot = tuple(range(64))
    for _ in range(4):
        perms.append(rot)
        perms.append(tuple(_mirror_sq(s) for s in rot))
        rot = tuple(_rotate_sq(s) for s in rot)
    return perms


_ROTATE = tuple(_rotate_sq(s) for s in range(64))
_MIRROR = tuple(_mirror_sq(s) for s in range(64))
SYMMETRIES = _build_symmetries()
INVERSE_SYMMETRIES = [tuple(p.index(i) for i in range(64)) for p in SYMMETRIES]


def _map_bits(bits: int, perm: Tuple[int, ...]) -> int:
    out = 0
    for sq in iter_bits(bits):
        out |= 1 << perm[sq]
    return out


def transform_board(board: Board, index: int) -> Board:
    perm = SYMMETRIES[index]
    return Board(_map_bits(board.black, perm), _map_bits(board.white, perm))


def rotate_board(board: Board) -> Board:
    return Board(_map_bits(board.black, _ROTATE), _map_bits(board.white, _ROTATE))


def mirror_board(board: Board) -> Board:
    return Board(_map_bits(board.black, _MIRROR), _map_bits(board.white, _MIRROR))


def canonical_form(board: Board) -> Tuple[int, int]:
    """Return (minimal hash over the 8 symmetric images, index of that image)."""
    best_hash = None
    best_index = 0
    for i in range(len(SYMMETRIES)):
        h = transform_board(board, i).hash()
        if best_hash is None or h < best_hash:
            best_hash = h
            best_index = i
    return best_hash, best_index


def normalized_hash(board: Board) -> int:
    return canonical_form(board)[0]


def _build_book() -> Dict[int, int]:
    table: Dict[int, int] = {}
    for name, line, reply in BOOK_LINES:
        board = Board.new()
        player = Player.BLACK
        for token in line.split():
            sq = notation_to_coord(token)
            flipped = calculate_flips(board, player, sq)
            if not flipped:
                raise ValueError(f"book line {name!r} has illegal move {token}")
            board.place(player, sq)
            board.flip(player.opponent(), flipped)
            player = player.opponent()
        reply_sq = notation_to_coord(reply)
        if not calculate_flips(board, player, reply_sq):
            raise ValueError(f"book line {name!r} has illegal reply {reply}")
        h, index = canonical_form(board)
        # Store the reply in the canonical frame
        table[h] = SYMMETRIES[index][reply_sq]
    log.debug("opening book loaded: %d positions", len(table))
    return table


class OpeningBook:
    BOOK: Dict[int, int] = _build_book()

    @classmethod
    def lookup(cls, board: Board) -> Optional[int]:
        """Recommended square for `board`, or None if the position is not in the book."""
        h, index = canonical_form(board)
        canonical_move = cls.BOOK.get(h)
        if canonical_move is None:
            return None
        return INVERSE_SYMMETRIES[index][canonical_move]

    @classmethod
    def size(cls) -> int:
        return len(cls.BOOK)
