"""What-if review: step through a finished game and branch off alternate lines."""
from __future__ import annotations

from ..engine.game import GameState


class WhatIfState:
    def __init__(self, game: GameState) -> None:
        # Own a copy so branching never touches the caller's game
        self.base_game = game.clone()
        self.current_game = game.clone()
        self.view_index = game.move_count()
        self.branched = False

    def _show(self, index: int) -> None:
        self.view_index = index
        self.current_game = self.base_game.clone_at_move(index)

    def step_back(self) -> None:
        if not self.branched and self.view_index > 0:
            self._show(self.view_index - 1)

    def step_forward(self) -> None:
        if not self.branched and self.view_index < self.base_game.move_count():
            self._show(self.view_index + 1)

    def jump_to_start(self) -> None:
        if not self.branched:
            self._show(0)

    def jump_to_end(self) -> None:
        if not self.branched:
            self.view_index = self.base_game.move_count()
            self.current_game = self.base_game.clone()

    def make_alternate_move(self, pos: int) -> bool:
        if not self.current_game.is_legal(pos):
            return False
        self.current_game.make_move(pos)
        self.branched = True
        return True

    def reset_to_move(self, index: int) -> None:
        self._show(max(0, min(index, self.base_game.move_count())))
        self.branched = False

    def reset_to_start(self) -> None:
        self.reset_to_move(0)

    def current_move_number(self) -> int:
        if self.branched:
            return self.current_game.move_count()
        return self.view_index

    def total_moves(self) -> int:
        return self.base_game.move_count()
