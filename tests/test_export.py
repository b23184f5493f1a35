from __future__ import annotations

import orjson

from othello_engine.engine.board import Board, Player
from othello_engine.engine.game import GameState
from othello_engine.engine.notation import pos
from othello_engine.records.export import format_compact, format_game_record, game_record, game_record_json


def _opening() -> GameState:
    game = GameState()
    game.make_move(pos(2, 3))  # D3
    game.make_move(pos(2, 2))  # C3
    game.make_move(pos(2, 1))  # B3
    return game


def test_transcript_layout():
    text = format_game_record(_opening(), "Two Player", date="2024-01-01")
    lines = text.splitlines()
    assert lines[0] == "[Othello Game Record]"
    assert lines[1] == "Date: 2024-01-01"
    assert lines[2] == "Mode: Two Player"
    assert not any(line.startswith("Result:") for line in lines)
    assert lines[4] == "Moves:"
    assert lines[5] == " 1. D3 C3"
    assert lines[6].rstrip() == " 2. B3"
    assert lines[-1].startswith("Final: ")
    assert text.endswith("\n")


def test_transcript_with_player_and_result():
    board = Board.empty()
    board.place(Player.BLACK, 0)
    board.place(Player.WHITE, 1)
    game = GameState.from_board(board, Player.BLACK)
    game.make_move(2)
    game.pass_turn()
    game.pass_turn()
    text = format_game_record(game, "vs CPU (Hard)", Player.WHITE)
    assert "Player: White" in text
    assert "Result: Black wins 3-0" in text
    assert " 1. C1 --" in text
    assert " 2. --" in text
    assert "Final: ● 3 - ○ 0" in text


def test_compact():
    assert format_compact(_opening()) == "D3 C3 B3"
    assert format_compact(GameState()) == ""


def test_json_record():
    game = _opening()
    record = game_record(game, "Two Player")
    assert record["moves"] == ["D3", "C3", "B3"]
    assert record["finished"] is False
    assert record["winner"] is None
    decoded = orjson.loads(game_record_json(game, "Two Player", Player.BLACK))
    assert decoded["player"] == "black"
    assert decoded["counts"] == {"black": game.counts()[0], "white": game.counts()[1]}
