"""fsbench.console._rich -- Rich-based backend.

Provides coloured, structured terminal output using the Rich library.
"""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_THEME = Theme(
    {
        "info": "blue",
        "success": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
        "heading": "bold cyan",
        "timing.label": "bold",
        "timing.value": "green",
        "dim": "dim",
    }
)

_WIDTH = 66


class RichBackend:
    """ConsoleProtocol implementation backed by Rich."""

    def __init__(self, console: Console | None = None) -> None:
        self._con = console or Console(theme=_THEME, highlight=False)

    # -- General messages ---------------------------------------------------

    def info(self, message: str) -> None:
        self._con.print(f"  {message}", style="info", markup=False)

    def success(self, message: str) -> None:
        self._con.print(f"  ✓ {message}", style="success", markup=False)

    def warning(self, message: str) -> None:
        self._con.print(f"  ⚠ {message}", style="warning", markup=False)

    def error(self, message: str) -> None:
        self._con.print(f"  ✗ {message}", style="error", markup=False)

    # -- Structured panels --------------------------------------------------

    def table(self, headers: list[str], rows: list[list[str]], *, title: str = "") -> None:
        t = Table(title=title or None, box=box.SIMPLE, show_edge=False, pad_edge=True)
        for i, h in enumerate(headers):
            t.add_column(h, justify="left" if i == 0 else "right")
        for r in rows:
            t.add_row(*(escape(cell) for cell in r))
        self._con.print(t)

    def kv(self, data: dict[str, str], *, title: str = "") -> None:
        t = Table(
            title=title or None,
            title_justify="left",
            box=box.SIMPLE,
            show_header=False,
            show_edge=False,
            pad_edge=True,
        )
        t.add_column("Key", style="bold", justify="right")
        t.add_column("Value")
        for k, v in data.items():
            t.add_row(escape(k), escape(v))
        self._con.print(t)

    # -- Benchmark lifecycle ------------------------------------------------

    def banner(self, title: str) -> None:
        self._con.print(
            Panel(Text(title, justify="center"), box=box.DOUBLE, width=_WIDTH, style="bold"),
        )

    def section(self, title: str) -> None:
        self._con.print(Rule(f" {title} ", style="bold", align="left"))
        self._con.print()

    def heading(self, text: str) -> None:
        self._con.print(text, style="heading", markup=False)

    def timing(self, label: str, value_ms: float, note: str) -> None:
        self._con.print(
            f"  [timing.label]{escape(label)}:[/] "
            f"[timing.value]{value_ms:.2f} ms[/] [dim]{escape(note)}[/]"
        )

    def blank(self) -> None:
        self._con.print()
