from __future__ import annotations

from typing import Any, Dict, List, Optional

import orjson

from ..engine.board import Player
from ..engine.game import GameState, HistoryEntry
from ..engine.notation import move_token


def _token(entry: HistoryEntry) -> str:
    return move_token(entry.pos)


def format_game_record(game: GameState, mode: str, player_color: Optional[Player] = None,
                       date: str = "") -> str:
    """Human-readable transcript: headers, numbered move pairs, final score."""
    lines: List[str] = ["[Othello Game Record]", f"Date: {date}", f"Mode: {mode}"]
    if player_color is not None:
        lines.append(f"Player: {player_color.name.capitalize()}")

    result = game.result()
    if result is not None:
        black, white = result.counts()
        if result.winner is None:
            lines.append(f"Result: Draw {black}-{white}")
        else:
            lines.append(f"Result: {result.winner.name.capitalize()} wins {black}-{white}")

    lines.append("")
    lines.append("Moves:")
    history = game.history()
    for n, i in enumerate(range(0, len(history), 2), start=1):
        first = _token(history[i])
        second = _token(history[i + 1]) if i + 1 < len(history) else ""
        lines.append(f"{n:2}. {first} {second}")

    black, white = game.counts()
    lines.append("")
    lines.append(f"Final: ● {black} - ○ {white}")
    return "\n".join(lines) + "\n"


def format_compact(game: GameState) -> str:
    return " ".join(_token(e) for e in game.history())


def game_record(game: GameState, mode: str, player_color: Optional[Player] = None) -> Dict[str, Any]:
    black, white = game.counts()
    result = game.result()
    return {
        "mode": mode,
        "player": None if player_color is None else player_color.name.lower(),
        "moves": [_token(e) for e in game.history()],
        "counts": {"black": black, "white": white},
        "finished": result is not None,
        "winner": None if result is None or result.winner is None else result.winner.name.lower(),
    }


def game_record_json(game: GameState, mode: str, player_color: Optional[Player] = None) -> bytes:
    return orjson.dumps(game_record(game, mode, player_color))
