from __future__ import annotations

import argparse
import logging
import sys

from othello_engine.engine.notation import coord_to_notation
from othello_engine.engine.perft import play_move_string
from othello_engine.engine.search import Searcher
from othello_engine.engine.strength import Difficulty
from othello_engine.logging_setup import setup_logging
from .diag import load_config_or_exit, log_event


def main() -> None:
    p = argparse.ArgumentParser(prog="othello-hint", description="Suggest a move for a position")
    p.add_argument("moves", nargs="?", default="", help="moves played so far, e.g. f5d6c3")
    p.add_argument("--difficulty", default="hard", choices=[d.name.lower() for d in Difficulty])
    args = p.parse_args()

    log_cfg = load_config_or_exit().get("logging", {})
    setup_logging(overwrite=log_cfg.get("overwrite", True), level=log_cfg.get("level", "INFO"))
    logger = logging.getLogger(__name__)

    try:
        board, player = play_move_string(args.moves)
    except ValueError as e:
        logger.error("cannot replay moves: %s", e)
        sys.exit(1)

    difficulty = Difficulty.from_name(args.difficulty)
    res = Searcher().search(board, player, difficulty)
    log_event("hint", "search", player=player.name, difficulty=difficulty.name,
              move=res.best_move, score=res.score, nodes=res.nodes, source=res.source)
    print(board)
    if res.best_move is None:
        print(f"{player.name.capitalize()} has no legal move (pass)")
    else:
        print(f"{player.name.capitalize()} to move: {coord_to_notation(res.best_move)} ({res.source})")


if __name__ == "__main__":
    main()
