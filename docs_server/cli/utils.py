"""Console output helpers for the Docs Server CLI."""

from rich.console import Console

# stdout is reserved for the protocol stream in stdio mode
console = Console(stderr=True)


def echo_error(message: str) -> None:
    """Print error message."""
    console.print(f"[red]✗ {message}[/red]")


def echo_info(message: str) -> None:
    """Print info message."""
    console.print(f"[blue]ℹ {message}[/blue]")
