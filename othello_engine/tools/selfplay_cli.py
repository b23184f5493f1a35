from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Optional

from othello_engine.engine.board import Player
from othello_engine.engine.game import GameResult, GameState
from othello_engine.engine.search import find_best_move
from othello_engine.engine.strength import Difficulty
from othello_engine.logging_setup import setup_logging
from othello_engine.records.export import format_game_record
from .diag import load_config_or_exit, log_event

log = logging.getLogger(__name__)


def play_one(black: Difficulty, white: Difficulty, seed: int = 0, random_plies: int = 0) -> GameState:
    """Play one engine-vs-engine game; the first `random_plies` moves are random."""
    rng = random.Random(seed)
    game = GameState()
    engines = {Player.BLACK: black, Player.WHITE: white}
    while not game.is_game_over():
        player = game.current_player()
        if not game.has_moves():
            game.pass_turn()
            continue
        if game.move_count() < random_plies:
            move: Optional[int] = rng.choice(game.legal_moves().positions())
        else:
            move = find_best_move(game.board(), player, engines[player])
        if move is None or game.make_move(move) is None:
            # find_best_move only returns None without legal moves, handled above
            raise RuntimeError(f"engine produced no playable move for {player.name}")
    return game


def main() -> None:
    cfg = load_config_or_exit()
    sp = cfg.get("selfplay", {})
    ap = argparse.ArgumentParser(prog="othello-selfplay")
    ap.add_argument("--games", type=int, default=sp.get("games", 1))
    ap.add_argument("--black", default=sp.get("black", "medium"))
    ap.add_argument("--white", default=sp.get("white", "easy"))
    ap.add_argument("--random-plies", type=int, default=sp.get("random_plies", 2))
    ap.add_argument("--seed", type=int, default=sp.get("seed", 2025))
    args = ap.parse_args()

    log_cfg = cfg.get("logging", {})
    setup_logging(overwrite=log_cfg.get("overwrite", True), level=log_cfg.get("level", "INFO"))

    black = Difficulty.from_name(args.black)
    white = Difficulty.from_name(args.white)
    if black is None or white is None:
        log.error("unknown difficulty: black=%s white=%s", args.black, args.white)
        sys.exit(1)

    tally = {"black": 0, "white": 0, "draw": 0}
    for i in range(args.games):
        game = play_one(black, white, seed=args.seed + i, random_plies=args.random_plies)
        result = game.result() or GameResult.from_counts(*game.counts())
        key = "draw" if result.is_draw() else result.winner.name.lower()
        tally[key] += 1
        log_event("selfplay", "game_finished", index=i, black=black.name, white=white.name,
                  winner=key, counts=list(result.counts()), plies=game.move_count())
        print(format_game_record(game, f"{black.name} vs {white.name}"))
    print(f"black={tally['black']} white={tally['white']} draw={tally['draw']}")


if __name__ == "__main__":
    main()
