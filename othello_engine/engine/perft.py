from __future__ import annotations

from typing import Iterable, Optional, Tuple

from .board import Board, Player
from .moves import apply_move, count_moves, generate_moves
from .notation import PASS_SQUARE, string_to_moves


def perft(board: Board, player: Player, depth: int) -> int:
    """Count leaf nodes of the move tree; a forced pass counts as one ply."""
    if depth == 0:
        return 1
    moves = generate_moves(board, player)
    if moves.is_empty():
        if count_moves(board, player.opponent()) == 0:
            return 0
        return perft(board, player.opponent(), depth - 1)
    total = 0
    for m in moves:
        total += perft(apply_move(board, player, m), player.opponent(), depth - 1)
    return total


def play_moves(moves: Iterable[int], board: Optional[Board] = None,
               player: Player = Player.BLACK) -> Tuple[Board, Player]:
    """Replay squares (PASS_SQUARE for a pass) and return the board and side to move."""
    from .game import GameState

    game = GameState(board, player)
    for i, sq in enumerate(moves):
        ok = game.pass_turn() if sq == PASS_SQUARE else game.make_move(sq) is not None
        if not ok:
            raise ValueError(f"illegal move #{i + 1}: {sq}")
    return game.board(), game.current_player()


def play_move_string(moves_str: str) -> Tuple[Board, Player]:
    return play_moves(string_to_moves(moves_str))
