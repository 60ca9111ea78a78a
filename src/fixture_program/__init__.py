"""Recursion fixture program"""

from .functions import factorial, fibonacci
from .driver import ProgramResult, run_program

__version__ = "0.1.0"

__all__ = [
    'factorial',
    'fibonacci',
    'ProgramResult',
    'run_program'
]
