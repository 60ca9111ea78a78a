"""Recursive arithmetic functions"""

from .recursive import factorial, fibonacci

__all__ = [
    'factorial',
    'fibonacci'
]
