"""Driver that computes and prints the fixture results"""

from typing import Optional
from pydantic import BaseModel
from rich.console import Console

from fixture_program.functions.recursive import factorial, fibonacci

console = Console()


class ProgramResult(BaseModel):
    """Values computed by one run of the fixture"""
    fibonacci_5: int
    factorial_5: int
    total: int


def _emit(out: Console, text: str) -> None:
    # Plain unwrapped text, so the output matches the literal lines at any width
    out.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def run_program(out: Optional[Console] = None) -> ProgramResult:
    """
    Run the fixture sequence and print each step.
    Returns the computed values.
    """
    out = out or console

    _emit(out, "Starting program")

    fib_5 = fibonacci(5)
    _emit(out, f"fibonacci(5) = {fib_5}")

    fact_5 = factorial(5)
    _emit(out, f"factorial(5) = {fact_5}")

    total = fib_5 + fact_5
    _emit(out, f"sum = {total}")

    _emit(out, "Program complete")

    return ProgramResult(fibonacci_5=fib_5, factorial_5=fact_5, total=total)
