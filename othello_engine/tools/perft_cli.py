from __future__ import annotations

import argparse
import logging
import sys
from time import perf_counter

from othello_engine.engine.perft import perft, play_move_string
from othello_engine.logging_setup import setup_logging
from .diag import load_config_or_exit


def main() -> None:
    cfg = load_config_or_exit()
    p = argparse.ArgumentParser(prog="othello-perft")
    p.add_argument("--depth", type=int, default=cfg.get("perft", {}).get("depth", 5))
    p.add_argument("--position", type=str, default="", help="move sequence like f5d6c3")
    args = p.parse_args()

    log_cfg = cfg.get("logging", {})
    setup_logging(overwrite=log_cfg.get("overwrite", True), level=log_cfg.get("level", "INFO"))

    try:
        board, player = play_move_string(args.position)
    except ValueError as e:
        logging.getLogger(__name__).error("bad --position: %s", e)
        sys.exit(1)
    t0 = perf_counter()
    n = perft(board, player, args.depth)
    dt = perf_counter() - t0
    print(f"perft(d={args.depth})={n} in {dt:.3f}s")


if __name__ == "__main__":
    main()
