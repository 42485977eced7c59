"""The N-queens puzzle and a diagonal number pattern."""

from __future__ import annotations


def n_queens(n: int) -> list[list[int]]:
    """All placements of n non-attacking queens, sorted.

    Each placement lists, for every row in turn, the 1-based column of its queen.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    solutions: list[list[int]] = []
    row_of_column: list[int] = []

    def place(column: int) -> None:
        if column == n:
            columns_by_row = [0] * n
            for col, row in enumerate(row_of_column):
                columns_by_row[row] = col + 1
            solutions.append(columns_by_row)
            return
        for row in range(n):
            if all(
                row != other and abs(row - other) != column - col
                for col, other in enumerate(row_of_column)
            ):
                row_of_column.append(row)
                place(column + 1)
                row_of_column.pop()

    place(0)
    return sorted(solutions)


def number_pattern(rows: int, columns: int) -> list[str]:
    """Lines of a grid showing the main diagonal and two lines through the centre.

    Cell (i, j), counted from 1, shows i on the diagonal, j where it lies on
    one of the two slanted lines, and a space elsewhere.
    """
    centre = (rows + columns + 1) // 2
    lines: list[str] = []
    for i in range(1, rows + 1):
        cells: list[str] = []
        for j in range(1, columns + 1):
            if i == j:
                cells.append(str(i))
            elif j in (centre + 2 - i, centre + i):
                cells.append(str(j))
            else:
                cells.append(" ")
        lines.append("".join(cells))
    return lines