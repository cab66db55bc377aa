"""
labelscan CLI output utilities.

Rich-based output for user-facing CLI messages and tables, kept apart from
operational logging.

Usage:
    from labelscan.cli.output import echo, error, table

    echo("JOHN SMITH, 42 HIGH STREET, LONDON, SW1A 1AA")
    error("File not found")
"""

from typing import Any, List, Optional, Tuple

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table


# Main console for stdout (user output)
console = Console()

# Error console for stderr
_err_console = Console(stderr=True)


def set_color_enabled(enabled: bool) -> None:
    """Enable or disable styled output on both consoles."""
    global console, _err_console
    console = Console(no_color=not enabled, highlight=enabled)
    _err_console = Console(stderr=True, no_color=not enabled, highlight=enabled)


def echo(message: str, style: Optional[str] = None, nl: bool = True) -> None:
    """
    Print a message to the user.

    Markup is disabled: OCR text routinely contains square brackets.

    Args:
        message: The message to print
        style: Optional rich style (e.g., "bold", "green")
        nl: Whether to add a newline (default: True)
    """
    console.print(
        message,
        style=style,
        end="\n" if nl else "",
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


def error(message: str) -> None:
    """Print an error message to stderr."""
    _err_console.print("[bold red]Error:[/bold red] ", end="")
    _err_console.print(message, markup=False, highlight=False, emoji=False, soft_wrap=True)


def warn(message: str) -> None:
    """Print a warning message."""
    console.print("[yellow]Warning:[/yellow] ", end="")
    console.print(message, markup=False, highlight=False, emoji=False, soft_wrap=True)


def dim(message: str) -> None:
    """Print a dimmed/secondary message."""
    console.print(message, style="dim", markup=False, highlight=False, emoji=False, soft_wrap=True)


def table(
    headers: List[str],
    rows: List[Tuple[Any, ...]],
    title: Optional[str] = None,
    show_lines: bool = False,
) -> None:
    """
    Print a formatted table.

    Args:
        headers: Column headers
        rows: List of row tuples
        title: Optional table title
        show_lines: Show row separator lines
    """
    t = Table(title=title, show_lines=show_lines)

    for header in headers:
        t.add_column(header)

    for row in rows:
        t.add_row(*[escape(str(cell)) for cell in row])

    console.print(t)


def summary_box(title: str, items: List[Tuple[str, Any]]) -> None:
    """
    Print a summary box with key-value pairs.

    Args:
        title: Box title
        items: List of (label, value) tuples
    """
    content = "\n".join(f"[bold]{label}:[/bold] {escape(str(value))}" for label, value in items)
    console.print(Panel(content, title=title, border_style="blue"))


def divider(char: str = "─", style: str = "dim") -> None:
    """Print a horizontal divider line."""
    width = console.width or 60
    console.print(char * width, style=style)
