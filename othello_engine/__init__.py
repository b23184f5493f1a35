"""Othello/Reversi rules engine and search-based opponent."""
from __future__ import annotations

from .engine.board import Board, Player
from .engine.eval import SCORE_LOSS, SCORE_WIN, evaluate, quick_evaluate
from .engine.game import GameResult, GameState, HistoryEntry
from .engine.moves import (
    Move,
    MoveList,
    calculate_flips,
    count_moves,
    generate_moves,
    is_legal_move,
    legal_moves_bitboard,
)
from .engine.notation import algebraic_to_pos, pos, pos_to_algebraic, pos_to_rc
from .engine.openings import OpeningBook
from .engine.search import find_best_move, get_hint
from .engine.strength import Difficulty

__version__ = "0.1.0"

__all__ = [
    "Board", "Player", "Move", "MoveList", "GameState", "GameResult", "HistoryEntry",
    "Difficulty", "OpeningBook", "SCORE_WIN", "SCORE_LOSS",
    "calculate_flips", "generate_moves", "count_moves", "is_legal_move", "legal_moves_bitboard",
    "evaluate", "quick_evaluate", "find_best_move", "get_hint",
    "pos", "pos_to_rc", "pos_to_algebraic", "algebraic_to_pos",
]
