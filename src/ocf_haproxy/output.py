"""Console output helpers."""

# ruff: noqa: T201 -- output layer

from rich.console import Console


def print_plain(*messages: object) -> None:
    """Print messages to stdout as plain text."""
    print(*messages)


def print_error(message: str) -> None:
    """Print a message to stderr without Rich markup or highlighting."""
    Console(stderr=True, markup=False, highlight=False, soft_wrap=True).print(message)
