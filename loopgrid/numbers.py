"""Digit and sequence exercises: Armstrong, palindromic, perfect and prime
numbers, factorials, Fibonacci terms and two floating-point series."""

import math


def _digits(n: int) -> list[int]:
    n = abs(n)
    return [int(d) for d in str(n)] if n else []


def count_digits(n: int) -> int:
    """Return how many decimal digits ``n`` has; zero has none."""
    return len(_digits(n))


def is_armstrong(n: int) -> bool:
    """True if ``n`` equals the sum of its digits each raised to the digit count."""
    if n < 0:
        return False
    power = count_digits(n)
    return sum(d**power for d in _digits(n)) == n


def armstrong_numbers(limit: int) -> list[int]:
    """All Armstrong numbers from 0 up to and including ``limit``."""
    return [i for i in range(limit + 1) if is_armstrong(i)]


def reverse_digits(n: int) -> int:
    """Return ``n`` with its decimal digits reversed, keeping the sign."""
    if n < 0:
        return -reverse_digits(-n)
    return int(str(n)[::-1])


def palindromes(limit: int) -> list[int]:
    """All numbers from 0 up to but excluding ``limit`` that read the same reversed."""
    return [i for i in range(limit) if reverse_digits(i) == i]


def is_perfect(n: int) -> bool:
    """True if ``n`` equals the sum of its proper divisors."""
    if n < 1:
        return False
    return sum(i for i in range(1, n // 2 + 1) if n % i == 0) == n


def perfect_numbers(limit: int) -> list[int]:
    """All perfect numbers from 1 up to and including ``limit``."""
    return [i for i in range(1, limit + 1) if is_perfect(i)]


def is_prime(n: int) -> bool:
    """Trial division by every candidate up to the square root of ``n``."""
    if n < 2:
        return False
    return all(n % i for i in range(2, math.isqrt(n) + 1))


def primes(limit: int) -> list[int]:
    """All primes from 2 up to and including ``limit``."""
    return [i for i in range(2, limit + 1) if is_prime(i)]


def factorial(n: int) -> int:
    """Return n! exactly."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    return math.prod(range(1, n + 1))


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, counting 0 and 1 as terms 0 and 1."""
    if n < 0:
        raise ValueError("Fibonacci index must not be negative")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def fibonacci_series(n: int) -> list[int]:
    """Fibonacci terms from index 2 up to and including index ``n``."""
    if n < 0:
        raise ValueError("Fibonacci index must not be negative")
    terms = []
    a, b = 0, 1
    for _ in range(2, n + 1):
        a, b = b, a + b
        terms.append(b)
    return terms


def inverse_power_sum(x: float, n: int) -> float:
    """Sum of 1 / sqrt(x ** i) for i from 0 to n - 1."""
    if x <= 0:
        raise ValueError("x must be positive")
    return math.fsum(1 / math.sqrt(x**i) for i in range(n))


def mean_inverse_sqrt(n: int) -> float:
    """Mean of 1 / sqrt(i) for i from 1 to n."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return math.fsum(1 / math.sqrt(i) for i in range(1, n + 1)) / n