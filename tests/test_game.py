import pytest

from tictactoe.board import Board, Cell
from tictactoe.config import GameConfig, parse_mark
from tictactoe.game import parse_move, play_game, result_message, self_play, side_to_move
from tictactoe.render import render_board


def scripted(answers):
    it = iter(answers)
    prompts = []

    def read(prompt: str) -> str:
        prompts.append(prompt)
        return next(it)

    return read, prompts


@pytest.mark.parametrize("raw", ["abc", "", "9", "-1", "4.5", "0"])
def test_parse_move_rejects_bad_input(raw):
    b = Board.from_string("X........")
    assert parse_move(raw, b) is None


def test_parse_move_accepts_empty_cell():
    b = Board.from_string("X........")
    assert parse_move(" 4\n", b) == 4


def test_render_board_layout():
    b = Board.from_string("X.O......")
    assert render_board(b) == "X|1|O\n-+-+-\n3|4|5\n-+-+-\n6|7|8"
    assert render_board(b, show_indices=False) == "X| |O\n-+-+-\n | | \n-+-+-\n | | "


def test_interactive_game_reprompts_and_never_loses():
    # The human keeps trying corners and junk; the engine must not lose
    read, prompts = scripted(["oops", "0", "0", "8", "2", "6", "1", "3", "5", "7"] + ["4"] * 5)
    out = []
    winner = play_game(GameConfig(human=Cell.X), read=read, write=out.append)
    assert winner is not Cell.X
    assert "Invalid value. Try again" in out
    assert out[-1] == result_message(winner)
    assert len(prompts) >= 3


def test_engine_moves_first_when_human_is_o():
    read, _ = scripted([str(i) for i in range(9)] * 3)
    out = []
    winner = play_game(GameConfig(human=Cell.O), read=read, write=out.append)
    assert any(line.startswith("Engine (X) plays") for line in out)
    assert winner is not Cell.O


def test_eof_propagates():
    def read(prompt: str) -> str:
        raise EOFError

    with pytest.raises(EOFError):
        play_game(GameConfig(), read=read, write=lambda s: None)


def test_result_messages():
    assert result_message(Cell.X) == "Player X wins"
    assert result_message(Cell.O) == "Player O wins"
    assert result_message(None) == "It's a draw"


def test_side_to_move_follows_counts():
    assert side_to_move(Board()) is Cell.X
    assert side_to_move(Board.from_string("X........")) is Cell.O
    assert side_to_move(Board.from_string("X...O....")) is Cell.X


def test_self_play_from_position_keeps_input_untouched():
    start = Board.from_string("X...O....")
    final = self_play(start)
    assert start == Board.from_string("X...O....")
    assert final.is_terminal()
    assert final.winner() is None


def test_config_from_env(monkeypatch):
    monkeypatch.delenv("TTT_HUMAN_MARK", raising=False)
    assert GameConfig.from_env().human is Cell.X
    monkeypatch.setenv("TTT_HUMAN_MARK", "o")
    cfg = GameConfig.from_env()
    assert cfg.human is Cell.O and cfg.engine is Cell.X
    # explicit value wins over the environment
    assert GameConfig.from_env("X").human is Cell.X
    monkeypatch.setenv("TTT_HUMAN_MARK", "Z")
    with pytest.raises(ValueError):
        GameConfig.from_env()


def test_parse_mark():
    assert parse_mark(" x ") is Cell.X
    with pytest.raises(ValueError):
        parse_mark(".")
