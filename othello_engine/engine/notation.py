"""
Square notation for Othello moves.

Squares are 0..63 with row = sq // 8 (rank 1..8) and column = sq % 8 (file A..H),
so A1 = 0 and H8 = 63. Moves are written as a file letter plus a rank digit
(e.g. 'D3'); a pass is written as '--'.
"""
from __future__ import annotations

from typing import List, Optional, Tuple

# Special string for pass moves (no available moves)
PASS_NOTATION = '--'
# Square value used for a pass in move lists and history
PASS_SQUARE = 255

FILES = "ABCDEFGH"


def pos(row: int, col: int) -> int:
    return row * 8 + col


def pos_to_rc(sq: int) -> Tuple[int, int]:
    return sq // 8, sq % 8


def pos_to_algebraic(sq: int) -> str:
    row, col = pos_to_rc(sq)
    return f"{FILES[col]}{row + 1}"


def algebraic_to_pos(text: str) -> Optional[int]:
    """Parse 'D3' style notation; returns None for anything malformed."""
    if not isinstance(text, str) or len(text) != 2:
        return None
    col = text[0].upper()
    row = text[1]
    if col not in FILES or row not in "12345678":
        return None
    return (ord(row) - ord('1')) * 8 + FILES.index(col)


def coord_to_notation(coord: int) -> str:
    """Convert board coordinate (0-63) to notation, e.g. 19 -> 'D3'."""
    if coord < 0 or coord > 63:
        raise ValueError(f"Invalid coordinate: {coord}")
    return pos_to_algebraic(coord)


def notation_to_coord(notation: str) -> int:
    """Convert notation (e.g. 'd3') to a board coordinate (0-63)."""
    if notation == PASS_NOTATION:
        raise ValueError(f"Cannot convert pass notation '{PASS_NOTATION}' to coordinate")
    sq = algebraic_to_pos(notation)
    if sq is None:
        raise ValueError(f"Invalid notation: {notation}")
    return sq


def move_token(sq: int) -> str:
    return PASS_NOTATION if sq == PASS_SQUARE else coord_to_notation(sq)


def moves_to_string(moves: List[int]) -> str:
    """Concatenate moves, writing PASS_SQUARE entries as '--'."""
    return ''.join(move_token(m) for m in moves)


def string_to_moves(moves_str: str) -> List[int]:
    """Split a compact move string ('f5d6--c3') into squares.

    Whitespace is ignored. Raises ValueError on malformed input.
    """
    compact = ''.join(moves_str.split())
    if len(compact) % 2:
        raise ValueError(f"Incomplete move string: {moves_str}")
    moves = []
    for i in range(0, len(compact), 2):
        token = compact[i:i + 2]
        if token == PASS_NOTATION:
            moves.append(PASS_SQUARE)
        else:
            moves.append(notation_to_coord(token))
    return moves


def is_valid_notation(moves_str: str) -> bool:
    try:
        string_to_moves(moves_str)
    except ValueError:
        return False
    return True
