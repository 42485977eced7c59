"""Minesweeper played on a square board with randomly placed mines."""

from __future__ import annotations

import random
import sys
from enum import IntEnum
from typing import Iterator, Optional, Sequence

HIDDEN = "-"
MINE = "*"


class Difficulty(IntEnum):
    """Game levels; each fixes the board side and the number of mines."""

    BEGINNER = 0
    INTERMEDIATE = 1
    ADVANCED = 2

    @property
    def side(self) -> int:
        return _LAYOUTS[self][0]

    @property
    def mines(self) -> int:
        return _LAYOUTS[self][1]


_LAYOUTS = {
    Difficulty.BEGINNER: (9, 10),
    Difficulty.INTERMEDIATE: (16, 40),
    Difficulty.ADVANCED: (24, 99),
}

_OFFSETS = ((-1, 0), (1, 0), (0, 1), (0, -1), (-1, 1), (-1, -1), (1, 1), (1, -1))


class Minesweeper:
    """One game: hidden mines, the player's view and the moves still needed."""

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.BEGINNER,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.difficulty = Difficulty(difficulty)
        self.side = self.difficulty.side
        self.mine_count = self.difficulty.mines
        self._rng = rng if rng is not None else random.Random()
        self.board: list[list[str]] = [[HIDDEN] * self.side for _ in range(self.side)]
        self._mines: set[tuple[int, int]] = set()
        self._place_mines()
        self.moves_left = self.side * self.side - self.mine_count
        self.moves_made = 0
        self.lost = False

    def _place_mines(self) -> None:
        while len(self._mines) < self.mine_count:
            cell = self._rng.randrange(self.side * self.side)
            self._mines.add(divmod(cell, self.side))

    @property
    def mines(self) -> list[tuple[int, int]]:
        """Mine positions in row-major order."""
        return sorted(self._mines)

    @property
    def won(self) -> bool:
        return not self.lost and self.moves_left == 0

    @property
    def game_over(self) -> bool:
        return self.lost or self.won

    def is_valid(self, row: int, col: int) -> bool:
        """True if (row, col) lies on the board."""
        return 0 <= row < self.side and 0 <= col < self.side

    def is_mine(self, row: int, col: int) -> bool:
        """True if a mine is hidden at (row, col)."""
        return (row, col) in self._mines

    def _neighbours(self, row: int, col: int) -> Iterator[tuple[int, int]]:
        for dr, dc in _OFFSETS:
            if self.is_valid(row + dr, col + dc):
                yield row + dr, col + dc

    def count_adjacent_mines(self, row: int, col: int) -> int:
        """Number of mines in the up to eight cells around (row, col)."""
        return sum(self.is_mine(r, c) for r, c in self._neighbours(row, col))

    def replace_mine(self, row: int, col: int) -> None:
        """Move the mine at (row, col) to the first mine-free cell in row-major order."""
        if not self.is_mine(row, col):
            raise ValueError(f"no mine at ({row}, {col})")
        for r in range(self.side):
            for c in range(self.side):
                if not self.is_mine(r, c):
                    self._mines.add((r, c))
                    self._mines.discard((row, col))
                    return

    def reveal(self, row: int, col: int) -> bool:
        """Open a cell; return True if it held a mine and the game is lost.

        The first move of a game is always safe. Opening a cell with no
        adjacent mines opens all its mine-free neighbours in turn.
        """
        if not self.is_valid(row, col):
            raise IndexError(f"({row}, {col}) is not on the board")
        if self.game_over:
            raise RuntimeError("the game is over")
        if self.moves_made == 0 and self.is_mine(row, col):
            self.replace_mine(row, col)
        self.moves_made += 1
        if self.board[row][col] != HIDDEN:
            return False
        if self.is_mine(row, col):
            self.lost = True
            for r, c in self._mines:
                self.board[r][c] = MINE
            return True
        pending = [(row, col)]
        while pending:
            r, c = pending.pop()
            if self.board[r][c] != HIDDEN:
                continue
            count = self.count_adjacent_mines(r, c)
            self.board[r][c] = str(count)
            self.moves_left -= 1
            if count == 0:
                pending.extend(
                    cell
                    for cell in self._neighbours(r, c)
                    if not self.is_mine(*cell) and self.board[cell[0]][cell[1]] == HIDDEN
                )
        return False

    def render(self, show_mines: bool = False) -> str:
        """Text picture of the board; with show_mines, the hidden mine layout."""
        lines = [" " + "".join(f"{i} " for i in range(self.side)), ""]
        for r in range(self.side):
            if show_mines:
                cells = [MINE if self.is_mine(r, c) else HIDDEN for c in range(self.side)]
            else:
                cells = self.board[r]
            lines.append(f"{r} " + "".join(f"{cell} " for cell in cells))
        return "\n".join(lines)


_LEVEL_PROMPT = (
    "Enter the Difficulty Level\n"
    "Press 0 for BEGINNER (9 * 9 Cells and 10 Mines)\n"
    "Press 1 for INTERMEDIATE (16 * 16 Cells and 40 Mines)\n"
    "Press 2 for ADVANCED (24 * 24 Cells and 99 Mines)\n"
)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play a game of Minesweeper on standard input and output."""
    del argv
    try:
        level = Difficulty(int(input(_LEVEL_PROMPT)))
    except (ValueError, EOFError):
        print("Invalid difficulty level")
        return 1
    game = Minesweeper(level)
    while not game.game_over:
        print("Current Status of Board : ")
        print(game.render())
        try:
            raw = input("Enter your move, (row, column) -> ")
        except EOFError:
            return 0
        try:
            row, col = map(int, raw.split())
        except ValueError:
            print("Enter a row and a column")
            continue
        try:
            hit = game.reveal(row, col)
        except IndexError as error:
            print(error)
            continue
        if hit:
            print(game.render())
            print("\nYou lost!")
        elif game.won:
            print("\nYou won !")
    return 0


if __name__ == "__main__":
    sys.exit(main())