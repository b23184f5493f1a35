"""Game session: board, side to move, bounded history and undo."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .board import Board, Player
from .moves import MoveList, Move, calculate_flips, count_moves, generate_moves, is_legal_move, legal_moves_bitboard
from .notation import PASS_SQUARE

# 60 plies fill the board; 64 leaves room for passes in practice
MAX_MOVES = 64


@dataclass(frozen=True)
class GameResult:
    winner: Optional[Player]  # None for a draw
    black: int
    white: int

    @staticmethod
    def from_counts(black: int, white: int) -> "GameResult":
        if black > white:
            return GameResult(Player.BLACK, black, white)
        if white > black:
            return GameResult(Player.WHITE, black, white)
        return GameResult(None, black, white)

    def is_draw(self) -> bool:
        return self.winner is None

    def counts(self) -> Tuple[int, int]:
        return self.black, self.white


@dataclass(frozen=True)
class HistoryEntry:
    pos: int  # PASS_SQUARE for a pass
    flipped: int
    player: Player

    def is_pass(self) -> bool:
        return self.pos == PASS_SQUARE


class GameState:
    def __init__(self, board: Optional[Board] = None, current_player: Player = Player.BLACK) -> None:
        self._board = Board.new() if board is None else board.copy()
        self._current = current_player
        self._start = (self._board.copy(), current_player)
        self._history: List[HistoryEntry] = []
        self._consecutive_passes = 0

    @classmethod
    def from_board(cls, board: Board, current_player: Player) -> "GameState":
        return cls(board, current_player)

    def clone(self) -> "GameState":
        g = GameState(self._board, self._current)
        g._start = self._start
        g._history = list(self._history)
        g._consecutive_passes = self._consecutive_passes
        return g

    # -- queries

    def board(self) -> Board:
        """Snapshot of the current position; changing it does not touch the game."""
        return self._board.copy()

    def current_player(self) -> Player:
        return self._current

    @property
    def consecutive_passes(self) -> int:
        return self._consecutive_passes

    def move_count(self) -> int:
        return len(self._history)

    def history(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._history)

    def history_entry(self, index: int) -> Optional[HistoryEntry]:
        if 0 <= index < len(self._history):
            return self._history[index]
        return None

    def last_move(self) -> Optional[HistoryEntry]:
        return self._history[-1] if self._history else None

    def legal_moves(self) -> MoveList:
        return generate_moves(self._board, self._current)

    def legal_moves_bitboard(self) -> int:
        return legal_moves_bitboard(self._board, self._current)

    def has_moves(self) -> bool:
        return count_moves(self._board, self._current) > 0

    def count_legal_moves(self) -> int:
        return count_moves(self._board, self._current)

    def mobility(self, player: Player) -> int:
        return count_moves(self._board, player)

    def is_legal(self, pos: int) -> bool:
        return is_legal_move(self._board, self._current, pos)

    def counts(self) -> Tuple[int, int]:
        return self._board.count(Player.BLACK), self._board.count(Player.WHITE)

    def empty_count(self) -> int:
        return self._board.empty_count()

    def is_game_over(self) -> bool:
        return self._consecutive_passes >= 2 or self._board.is_full()

    def result(self) -> Optional[GameResult]:
        if not self.is_game_over():
            return None
        return GameResult.from_counts(*self.counts())

    # -- commands

    def _record(self, entry: HistoryEntry) -> None:
        # Silently bounded; a legal game never exceeds MAX_MOVES plies
        if len(self._history) < MAX_MOVES:
            self._history.append(entry)

    def make_move(self, pos: int) -> Optional[Move]:
        """Play `pos` for the side to move; None (and no change) if illegal.

        Forced passes and game end are left to the caller.
        """
        flipped = calculate_flips(self._board, self._current, pos)
        if flipped == 0:
            return None
        self._board.place(self._current, pos)
        self._board.flip(self._current.opponent(), flipped)
        self._record(HistoryEntry(pos, flipped, self._current))
        self._consecutive_passes = 0
        self._current = self._current.opponent()
        return Move(pos, flipped)

    def pass_turn(self) -> bool:
        """Pass; only allowed when the side to move has no legal move."""
        if self.has_moves():
            return False
        self._record(HistoryEntry(PASS_SQUARE, 0, self._current))
        self._consecutive_passes += 1
        self._current = self._current.opponent()
        return True

    def undo(self) -> Optional[HistoryEntry]:
        if not self._history:
            return None
        entry = self._history.pop()
        if entry.is_pass():
            self._consecutive_passes = max(0, self._consecutive_passes - 1)
        else:
            self._board.remove(entry.player, entry.pos)
            self._board.flip(entry.player, entry.flipped)
            self._consecutive_passes = self._trailing_passes()
        self._current = entry.player
        return entry

    def _trailing_passes(self) -> int:
        n = 0
        for entry in reversed(self._history):
            if not entry.is_pass():
                break
            n += 1
        return n

    def clone_at_move(self, move_index: int) -> "GameState":
        """Fresh game replayed from the starting position through the first `move_index` plies."""
        game = GameState(*self._start)
        for entry in self._history[:max(0, move_index)]:
            if entry.is_pass():
                game.pass_turn()
            else:
                game.make_move(entry.pos)
        return game

    def board_at_move(self, move_index: int) -> Board:
        return self.clone_at_move(move_index).board()
