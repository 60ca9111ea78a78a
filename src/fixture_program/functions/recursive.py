"""Naive recursive definitions used by the fixture program"""


def fibonacci(n: int) -> int:
    """Return F(n) by double recursion, recomputing every subproblem"""
    if n <= 1:
        return n
    # No memoization: the exponential call tree is intentional
    return fibonacci(n - 1) + fibonacci(n - 2)


def factorial(n: int) -> int:
    """Return n! by linear recursion, with 0! == 1"""
    if n == 0:
        return 1
    return n * factorial(n - 1)
