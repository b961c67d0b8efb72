import io

import pytest

from fifteen.domains.board import Board
from fifteen.errors import OutOfRangeInput
from fifteen.game.loop import Outcome, parse_tile, play, read_move
from fifteen.game.movelog import MoveLog
from fifteen.game.render import CLEAR, draw


def _play(board, tmp_path, keys, **kw):
    out = io.StringIO()
    sleeps = []
    with MoveLog(tmp_path / "log.txt") as log:
        outcome = play(board, log, inp=io.StringIO(keys), out=out,
                       sleep=sleeps.append, **kw)
    text = (tmp_path / "log.txt").read_text()
    return outcome, out.getvalue(), text, sleeps


def test_parse_tile():
    assert parse_tile(" 7\n", 9) == 7
    assert parse_tile("0", 9) == 0
    assert parse_tile("-3", 9) == -3
    with pytest.raises(OutOfRangeInput):
        parse_tile("10", 9)
    with pytest.raises(ValueError):
        parse_tile("abc", 9)


def test_read_move_reprompts_on_bad_input(solved3):
    out = io.StringIO()
    tile = read_move(solved3, io.StringIO("x\n42\n6\n"), out)
    assert tile == 6
    assert out.getvalue().count("Tile to move: ") == 3
    assert "no tile 42" in out.getvalue()


def test_read_move_end_of_input(solved3):
    assert read_move(solved3, io.StringIO(""), io.StringIO()) is None


def test_win_from_one_move_away(tmp_path):
    board = Board([[1, 2, 3], [4, 5, 0], [7, 8, 6]])
    outcome, out, log, sleeps = _play(board, tmp_path, "6\n", delay=0)
    assert outcome is Outcome.WON
    assert out.endswith("ftw!\n")
    assert out.count(CLEAR) == 2
    assert log == "1|2|3\n4|5|0\n7|8|6\n6\n1|2|3\n4|5|6\n7|8|0\n"
    assert sleeps == []


def test_already_solved_board_wins_immediately(solved3, tmp_path):
    outcome, out, log, _ = _play(solved3, tmp_path, "")
    assert outcome is Outcome.WON
    assert "Tile to move" not in out
    assert log == "1|2|3\n4|5|6\n7|8|0\n"


def test_zero_quits_without_logging_move(tmp_path):
    board = Board.initial(3)
    outcome, out, log, _ = _play(board, tmp_path, "0\n")
    assert outcome is Outcome.QUIT
    assert log == "8|7|6\n5|4|3\n2|1|0\n"


def test_negative_and_eof_quit(tmp_path):
    assert _play(Board.initial(3), tmp_path, "-1\n")[0] is Outcome.QUIT
    assert _play(Board.initial(3), tmp_path, "")[0] is Outcome.QUIT


def test_illegal_move_is_logged_and_reported(tmp_path):
    board = Board.initial(3)
    outcome, out, log, sleeps = _play(board, tmp_path, "8\n0\n", delay=0.5)
    assert outcome is Outcome.QUIT
    assert "Illegal move." in out
    assert board.rows() == [[8, 7, 6], [5, 4, 3], [2, 1, 0]]
    assert log.splitlines()[3] == "8"
    # one extra pause for the illegal move
    assert sleeps == [0.5, 0.5]


def test_out_of_range_keeps_playing(tmp_path):
    board = Board.initial(3)
    outcome, out, log, _ = _play(board, tmp_path, "10\n1\n0\n", delay=0)
    assert outcome is Outcome.QUIT
    assert board.rows()[2] == [2, 0, 1]
    # the rejected value never reaches the log
    assert log.splitlines() == [
        "8|7|6", "5|4|3", "2|1|0", "1",
        "8|7|6", "5|4|3", "2|0|1",
    ]


def test_frame_matches_draw(tmp_path):
    board = Board.initial(3)
    _, out, _, _ = _play(board, tmp_path, "0\n")
    assert out.startswith(CLEAR + draw(board))
