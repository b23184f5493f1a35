from othello_engine.engine.board import Board, Player
from othello_engine.engine.eval import (
    SCORE_LOSS,
    SCORE_WIN,
    count_frontier,
    count_stable_discs,
    disc_weight,
    evaluate,
    evaluate_corners,
    evaluate_mobility,
    quick_evaluate,
)
from othello_engine.engine.game import GameState


def test_starting_position_neutral():
    b = Board.new()
    assert evaluate(b, Player.BLACK) == 0
    assert evaluate(b, Player.WHITE) == 0
    assert evaluate_mobility(b, Player.BLACK) == 0


def test_evaluation_is_antisymmetric_during_a_game():
    game = GameState()
    for sq in (37, 43, 18, 19, 26, 29):  # f5 d6 c3 d3 c4 f4
        assert game.make_move(sq) is not None
        b = game.board()
        assert evaluate(b, Player.BLACK) == -evaluate(b, Player.WHITE)


def test_corner_value():
    b = Board.empty()
    b.place(Player.BLACK, 0)
    assert evaluate_corners(b, Player.BLACK) == 100
    assert evaluate_corners(b, Player.WHITE) == -100
    assert quick_evaluate(b, Player.BLACK) > 50


def test_x_square_penalty_only_while_corner_open():
    b1 = Board.new()
    b1.place(Player.BLACK, 9)  # B2
    b2 = Board.new()
    b2.place(Player.BLACK, 18)  # C3
    assert evaluate_corners(b1, Player.BLACK) == -25
    assert evaluate_corners(b1, Player.BLACK) < evaluate_corners(b2, Player.BLACK)
    # Once A1 is taken the B2 penalty disappears
    b1.place(Player.WHITE, 0)
    assert evaluate_corners(b1, Player.BLACK) == -100


def test_c_square_penalty():
    b = Board.new()
    b.place(Player.WHITE, 1)  # B1
    assert evaluate_corners(b, Player.BLACK) == 10
    assert evaluate_corners(b, Player.WHITE) == -10


def test_game_over_evaluation():
    b = Board.empty()
    for i in range(40):
        b.place(Player.BLACK, i)
    for i in range(40, 64):
        b.place(Player.WHITE, i)
    assert evaluate(b, Player.BLACK) == SCORE_WIN - 24 * 100
    assert evaluate(b, Player.WHITE) == SCORE_LOSS + 24 * 100


def test_terminal_draw_scores_zero():
    b = Board(0xFFFFFFFF00000000, 0x00000000FFFFFFFF)
    assert evaluate(b, Player.BLACK) == 0


def test_stable_disc_counting():
    b = Board.empty()
    for col in range(8):
        b.place(Player.BLACK, col)
    assert count_stable_discs(b, Player.BLACK) == 8
    # a full edge without an own corner is not stable beyond corners
    b2 = Board.empty()
    b2.place(Player.WHITE, 0)
    b2.place(Player.WHITE, 7)
    for col in range(1, 7):
        b2.place(Player.BLACK, col)
    assert count_stable_discs(b2, Player.BLACK) == 0
    assert count_stable_discs(b2, Player.WHITE) == 2


def test_frontier():
    b = Board.new()
    assert count_frontier(b, Player.BLACK) == 2
    assert count_frontier(b, Player.WHITE) == 2
    full = Board(0xFFFFFFFF00000000, 0x00000000FFFFFFFF)
    assert count_frontier(full, Player.BLACK) == 0


def test_disc_weight_phases():
    assert disc_weight(60) == 0
    assert disc_weight(45) == 0
    assert disc_weight(44) == 1
    assert disc_weight(21) == 1
    assert disc_weight(20) == 2
    assert disc_weight(11) == 2
    assert disc_weight(10) == 5
    assert disc_weight(0) == 5


def test_heuristic_scores_stay_inside_terminal_range():
    game = GameState()
    for sq in (37, 43, 18, 19, 26, 29, 34, 17, 10):
        game.make_move(sq)
        s = evaluate(game.board(), Player.BLACK)
        assert SCORE_LOSS + 6400 < s < SCORE_WIN - 6400
