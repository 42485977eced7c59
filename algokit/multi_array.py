"""Fixed-size N-dimensional array stored in one flat row-major buffer."""

from __future__ import annotations

import math
from typing import Any, Union

Index = Union[int, tuple]

DEFAULT_SIZE = 10


class MultiArray:
    """An array of any number of dimensions, addressed flat or by coordinates.

    With no dimensions given it is one-dimensional with ten cells.
    """

    def __init__(self, *args: int) -> None:
        shape = args or (DEFAULT_SIZE,)
        if any(not isinstance(d, int) or d <= 0 for d in shape):
            raise ValueError("dimensions must be positive integers")
        self.shape: tuple[int, ...] = tuple(shape)
        self._cells: list[Any] = [None] * math.prod(self.shape)
        self._filled: set[int] = set()

    def index(self, *args: int) -> int:
        """Map coordinates to the row-major flat position."""
        if len(args) != len(self.shape):
            raise IndexError(
                f"expected {len(self.shape)} coordinates, got {len(args)}"
            )
        flat = 0
        for coordinate, extent in zip(args, self.shape):
            if not 0 <= coordinate < extent:
                raise IndexError(f"coordinate {coordinate} out of range 0..{extent - 1}")
            flat = flat * extent + coordinate
        return flat

    def _flat(self, index: Index) -> int:
        if isinstance(index, tuple):
            return self.index(*index)
        if not 0 <= index < len(self._cells):
            raise IndexError(f"index {index} out of range")
        return index

    def __getitem__(self, index: Index) -> Any:
        return self._cells[self._flat(index)]

    def __setitem__(self, index: Index, value: Any) -> None:
        flat = self._flat(index)
        self._cells[flat] = value
        self._filled.add(flat)

    def front(self) -> Any:
        """Return the first cell."""
        return self._cells[0]

    def back(self) -> Any:
        """Return the last cell."""
        return self._cells[-1]

    def resize(self) -> None:
        """Halve the capacity (rounding up) if nothing is stored yet.

        The array becomes one-dimensional.
        """
        if self.is_empty():
            size = math.ceil(len(self._cells) / 2)
            self._cells = self._cells[:size]
            self.shape = (size,)

    def is_full(self) -> bool:
        """True when every cell has been assigned."""
        return len(self._filled) == len(self._cells)

    def is_empty(self) -> bool:
        """True when no cell has been assigned."""
        return not self._filled

    def __len__(self) -> int:
        return len(self._cells)