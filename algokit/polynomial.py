"""Polynomials as term sequences ordered by descending power."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Term:
    """One term coefficient * x ** power."""

    coefficient: int
    power: int

    def __str__(self) -> str:
        return f"{self.coefficient}x^({self.power})"


def add_polynomials(first: Iterable[Term], second: Iterable[Term]) -> list[Term]:
    """Merge two polynomials sorted by descending power, summing like terms."""
    left, right = iter(first), iter(second)
    a, b = next(left, None), next(right, None)
    result: list[Term] = []
    while a is not None and b is not None:
        if a.power == b.power:
            result.append(Term(a.coefficient + b.coefficient, a.power))
            a, b = next(left, None), next(right, None)
        elif a.power > b.power:
            result.append(a)
            a = next(left, None)
        else:
            result.append(b)
            b = next(right, None)
    if a is not None:
        result.append(a)
    if b is not None:
        result.append(b)
    result.extend(left)
    result.extend(right)
    return result


def format_polynomial(terms: Iterable[Term]) -> str:
    """Render terms as "c1x^(p1) + c2x^(p2)", or "Empty!" with none."""
    text = " + ".join(map(str, terms))
    return text or "Empty!"