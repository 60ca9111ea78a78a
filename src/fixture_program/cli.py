"""Command line interface for the recursion fixture program"""

import typer

from fixture_program.driver import run_program

app = typer.Typer(help="Compute fibonacci(5) and factorial(5) by naive recursion", add_completion=False)


@app.command()
def run():
    """Print the fibonacci and factorial results and their sum"""
    run_program()


def main():
    """Main entry point"""
    app()


if __name__ == "__main__":
    main()
