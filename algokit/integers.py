"""Integer sequences and number properties."""

from __future__ import annotations


def binomial(n: int, k: int) -> int:
    """Number of ways to choose k items from n."""
    if n < 0 or k < 0:
        raise ValueError("arguments must not be negative")
    if k > n:
        return 0
    k = min(k, n - k)
    result = 1
    for i in range(k):
        result = result * (n - i) // (i + 1)
    return result


def catalan(n: int) -> int:
    """The nth Catalan number."""
    return binomial(2 * n, n) // (n + 1)


def fibonacci(count: int) -> list[int]:
    """The first count Fibonacci numbers, starting 0, 1."""
    numbers: list[int] = []
    a, b = 0, 1
    for _ in range(count):
        numbers.append(a)
        a, b = b, a + b
    return numbers


def is_palindrome_number(n: int) -> bool:
    """True if n reads the same with its decimal digits reversed.

    Negative numbers are never palindromes.
    """
    if n < 0:
        return False
    reversed_value = 0
    rest = n
    while rest > 0:
        rest, digit = divmod(rest, 10)
        reversed_value = reversed_value * 10 + digit
    return reversed_value == n


def primes_up_to(n: int) -> list[int]:
    """All primes not greater than n, by the sieve of Eratosthenes."""
    if n < 2:
        return []
    sieve = bytearray([1]) * (n + 1)
    sieve[0] = sieve[1] = 0
    p = 2
    while p * p <= n:
        if sieve[p]:
            sieve[p * p :: p] = bytes(len(range(p * p, n + 1, p)))
        p += 1
    return [number for number, flag in enumerate(sieve) if flag]