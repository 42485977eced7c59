"""Simulation of the dice game of craps."""

from __future__ import annotations

import random
import sys
from typing import Optional, Sequence

WINNING_SUMS = frozenset({7, 11})
LOSING_SUMS = frozenset({2, 3, 12})
DEFAULT_ROUNDS = 1000


def roll_dice(rng: Optional[random.Random] = None) -> tuple[int, int]:
    """Roll two six-sided dice."""
    source = rng if rng is not None else random
    return source.randint(1, 6), source.randint(1, 6)


def simulate(
    rounds: int = DEFAULT_ROUNDS, rng: Optional[random.Random] = None
) -> list[tuple[tuple[int, ...], bool]]:
    """Play rounds of craps; return each round's dice sums and whether it was won.

    A sum of 7 or 11, or one equal to the current point, wins; 2, 3 or 12
    loses; any other sum becomes the point and the dice are rolled again.
    The point carries over from one round to the next.
    """
    if rounds < 0:
        raise ValueError("rounds must not be negative")
    source = rng if rng is not None else random.Random()
    point: Optional[int] = None
    results: list[tuple[tuple[int, ...], bool]] = []
    for _ in range(rounds):
        sums: list[int] = []
        while True:
            total = sum(roll_dice(source))
            sums.append(total)
            if total in WINNING_SUMS or total == point:
                won = True
                break
            if total in LOSING_SUMS:
                won = False
                break
            point = total
        results.append((tuple(sums), won))
    return results


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print each round of a simulation followed by the totals."""
    args = sys.argv[1:] if argv is None else list(argv)
    rounds = int(args[0]) if args else DEFAULT_ROUNDS
    results = simulate(rounds)
    for sums, won in results:
        print(" ".join(map(str, sums)), "WINS" if won else "LOSES")
    wins = sum(won for _, won in results)
    print(f"total wins = {wins} \n total failure = {len(results) - wins} ")
    return 0


if __name__ == "__main__":
    sys.exit(main())