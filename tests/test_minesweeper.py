import io
import random

import pytest

from algokit.minesweeper import Difficulty, Minesweeper, MINE, HIDDEN, main


class _FixedRng:
    def __init__(self, values):
        self._values = list(values)

    def randrange(self, stop):
        return self._values.pop(0)


def _top_rows_game():
    # Mines fill row 0 and cell (1, 0) of a 9 x 9 board.
    return Minesweeper(Difficulty.BEGINNER, _FixedRng(range(10)))


def test_difficulty_layouts():
    assert (Difficulty.BEGINNER.side, Difficulty.BEGINNER.mines) == (9, 10)
    assert (Difficulty.INTERMEDIATE.side, Difficulty.INTERMEDIATE.mines) == (16, 40)
    assert (Difficulty.ADVANCED.side, Difficulty.ADVANCED.mines) == (24, 99)
    assert Difficulty(1) is Difficulty.INTERMEDIATE


@pytest.mark.parametrize("level", list(Difficulty))
def test_mines_placed_distinct_and_on_board(level):
    game = Minesweeper(level, random.Random(3))
    assert len(game.mines) == level.mines
    assert all(game.is_valid(r, c) for r, c in game.mines)
    assert game.moves_left == level.side * level.side - level.mines


def test_duplicate_random_cells_are_skipped():
    game = Minesweeper(Difficulty.BEGINNER, _FixedRng([0, 0, 1, 2, 3, 4, 5, 6, 7, 8, 9]))
    assert len(game.mines) == 10
    assert game.is_mine(1, 0)


def test_is_valid_bounds():
    game = _top_rows_game()
    assert game.is_valid(0, 0) and game.is_valid(8, 8)
    assert not game.is_valid(-1, 0)
    assert not game.is_valid(0, 9)


def test_count_adjacent_mines_far_cell_is_zero():
    game = _top_rows_game()
    assert game.count_adjacent_mines(5, 5) == 0
    assert game.count_adjacent_mines(2, 0) == 1


def test_first_move_on_mine_is_safe_and_mine_moves():
    game = _top_rows_game()
    assert game.reveal(0, 0) is False
    assert not game.lost
    assert not game.is_mine(0, 0)
    assert game.is_mine(1, 1)
    assert len(game.mines) == 10
    assert game.board[0][0] != MINE


def test_replace_mine_requires_a_mine():
    game = _top_rows_game()
    with pytest.raises(ValueError):
        game.replace_mine(5, 5)


def test_flood_fill_opens_every_safe_cell_and_wins():
    game = _top_rows_game()
    assert game.reveal(8, 8) is False
    assert game.won
    assert game.game_over
    assert game.moves_left == 0
    for r, c in game.mines:
        assert game.board[r][c] == HIDDEN


def test_revealed_number_matches_adjacent_count():
    game = _top_rows_game()
    game.reveal(2, 0)
    assert game.board[2][0] == str(game.count_adjacent_mines(2, 0))
    assert game.moves_left == 81 - 10 - 1
    assert not game.game_over


def test_revealing_open_cell_changes_nothing():
    game = _top_rows_game()
    game.reveal(2, 0)
    left = game.moves_left
    assert game.reveal(2, 0) is False
    assert game.moves_left == left


def test_hitting_a_mine_loses_and_shows_all_mines():
    game = _top_rows_game()
    game.reveal(2, 0)
    assert game.reveal(0, 0) is True
    assert game.lost and not game.won
    shown = sum(row.count(MINE) for row in game.board)
    assert shown == len(game.mines)
    with pytest.raises(RuntimeError):
        game.reveal(5, 5)


def test_reveal_off_board_raises():
    game = _top_rows_game()
    with pytest.raises(IndexError):
        game.reveal(9, 0)


def test_render_layout():
    game = _top_rows_game()
    lines = game.render().split("\n")
    assert lines[0] == " " + "".join(f"{i} " for i in range(9))
    assert lines[1] == ""
    assert lines[2] == "0 " + "- " * 9
    shown = game.render(show_mines=True).split("\n")
    assert shown[2] == "0 " + "* " * 9
    assert shown[3] == "1 * " + "- " * 8


def test_main_rejects_unknown_level(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("7\n"))
    assert main([]) == 1
    assert "Invalid difficulty level" in capsys.readouterr().out