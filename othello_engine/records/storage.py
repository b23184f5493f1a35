"""Binary layouts for saved games, settings and statistics.

Saved game, all integers little-endian:

    black bitboard   8 bytes
    white bitboard   8 bytes
    current player   1 byte  (0 black, 1 white)
    human colour     1 byte
    mode             1 byte  (0-3 vs CPU Easy..Expert, 4 two-player)
    history count    2 bytes
    per entry        1 byte square (255 = pass) + 8 bytes flip mask

Loading replays the history from the standard start; the stored board is only
a snapshot for external readers.
"""
from __future__ import annotations

import logging
import struct
from dataclasses import astuple, dataclass, fields
from typing import Optional

from ..engine.board import Player
from ..engine.game import GameResult, GameState
from ..engine.strength import Difficulty

log = logging.getLogger(__name__)

_HEADER = struct.Struct("<QQBBBH")
_ENTRY = struct.Struct("<BQ")
TWO_PLAYER_MODE = 4


def mode_to_byte(mode: Optional[Difficulty]) -> int:
    return TWO_PLAYER_MODE if mode is None else mode.value


def mode_from_byte(value: int) -> Optional[Difficulty]:
    # Unknown values fall back to two-player
    if 0 <= value < TWO_PLAYER_MODE:
        return Difficulty(value)
    return None


@dataclass
class SavedGame:
    game: GameState
    mode: Optional[Difficulty]  # None for two-player
    human: Player


def encode_game(game: GameState, human: Player, mode: Optional[Difficulty]) -> bytes:
    board = game.board()
    history = game.history()
    parts = [_HEADER.pack(board.black, board.white, int(game.current_player()), int(human),
                          mode_to_byte(mode), len(history))]
    for entry in history:
        parts.append(_ENTRY.pack(entry.pos, entry.flipped))
    return b"".join(parts)


def load_game(data: bytes) -> Optional[SavedGame]:
    if len(data) < _HEADER.size:
        log.warning("saved game too short: %d bytes", len(data))
        return None
    _black, _white, _current, human, mode, count = _HEADER.unpack_from(data, 0)
    game = GameState()
    offset = _HEADER.size
    for i in range(count):
        if offset + _ENTRY.size > len(data):
            log.warning("saved game truncated after %d of %d entries", i, count)
            break
        sq, _flipped = _ENTRY.unpack_from(data, offset)
        offset += _ENTRY.size
        ok = game.pass_turn() if sq == 255 else game.make_move(sq) is not None
        if not ok:
            log.warning("saved game entry %d (%d) cannot be replayed; skipped", i, sq)
    return SavedGame(game, mode_from_byte(mode), Player.BLACK if human == 0 else Player.WHITE)


@dataclass
class Settings:
    show_coordinates: bool = False
    show_valid_moves: bool = True
    allow_undo: bool = True
    danger_zones: bool = False
    flip_animation: bool = True
    ai_think_animation: bool = True
    ai_delay: bool = True
    vibration: bool = True
    sound: bool = True
    last_difficulty: int = 1

    SIZE = 10

    def to_bytes(self) -> bytes:
        return bytes(int(v) & 0xFF for v in astuple(self))

    @classmethod
    def from_bytes(cls, data: bytes) -> Optional["Settings"]:
        if len(data) < cls.SIZE:
            return None
        flags = [b != 0 for b in data[:9]]
        return cls(*flags, last_difficulty=data[9])


@dataclass
class Statistics:
    easy_wins: int = 0
    easy_losses: int = 0
    easy_draws: int = 0
    medium_wins: int = 0
    medium_losses: int = 0
    medium_draws: int = 0
    hard_wins: int = 0
    hard_losses: int = 0
    hard_draws: int = 0
    expert_wins: int = 0
    expert_losses: int = 0
    expert_draws: int = 0
    two_player_games: int = 0

    _FORMAT = struct.Struct("<13H")
    SIZE = 26

    def to_bytes(self) -> bytes:
        return self._FORMAT.pack(*(v & 0xFFFF for v in astuple(self)))

    @classmethod
    def from_bytes(cls, data: bytes) -> Optional["Statistics"]:
        if len(data) < cls.SIZE:
            return None
        return cls(*cls._FORMAT.unpack_from(data, 0))

    def record(self, mode: Optional[Difficulty], human: Player, result: GameResult) -> None:
        """Count a finished game from the human player's point of view."""
        if mode is None:
            self.two_player_games += 1
            return
        if result.is_draw():
            outcome = "draws"
        elif result.winner == human:
            outcome = "wins"
        else:
            outcome = "losses"
        name = f"{mode.name.lower()}_{outcome}"
        setattr(self, name, getattr(self, name) + 1)

    def total_games(self) -> int:
        return sum(getattr(self, f.name) for f in fields(self))
