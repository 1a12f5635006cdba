"""fsbench.console._plain -- Plain-text backend.

Uses only built-in print(). Selected when stdout is not a TTY so piped
output stays free of escape sequences.
"""

from __future__ import annotations

_WIDTH = 64


class PlainBackend:
    """ConsoleProtocol implementation using only built-in print()."""

    # -- General messages ---------------------------------------------------

    def info(self, message: str) -> None:
        print(f"  {message}")

    def success(self, message: str) -> None:
        print(f"  [ok] {message}")

    def warning(self, message: str) -> None:
        print(f"  [warn] {message}")

    def error(self, message: str) -> None:
        print(f"  [error] {message}")

    # -- Structured panels --------------------------------------------------

    def table(self, headers: list[str], rows: list[list[str]], *, title: str = "") -> None:
        if title:
            print(f"\n  {title}:")

        if not headers and not rows:
            return

        # Calculate column widths
        all_rows = [headers, *rows]
        col_widths = [
            max(len(str(row[i])) if i < len(row) else 0 for row in all_rows)
            for i in range(len(headers))
        ]

        header_line = "  " + "  ".join(
            h.ljust(w) for h, w in zip(headers, col_widths, strict=True)
        )
        print(header_line)
        print("  " + "  ".join("-" * w for w in col_widths))

        for row in rows:
            cells = [
                str(row[i]).ljust(col_widths[i]) if i < len(row) else " " * col_widths[i]
                for i in range(len(headers))
            ]
            print("  " + "  ".join(cells))

    def kv(self, data: dict[str, str], *, title: str = "") -> None:
        if title:
            print(f"{title}:")
        if not data:
            return
        max_key = max(len(k) for k in data)
        for k, v in data.items():
            print(f"  {(k + ':').ljust(max_key + 1)} {v}")

    # -- Benchmark lifecycle ------------------------------------------------

    def banner(self, title: str) -> None:
        print("╔" + "═" * _WIDTH + "╗")
        print("║" + title.center(_WIDTH) + "║")
        print("╚" + "═" * _WIDTH + "╝")

    def section(self, title: str) -> None:
        rule = "═" * (_WIDTH - 1)
        print(rule)
        print(f"  {title}")
        print(rule)
        print()

    def heading(self, text: str) -> None:
        print(text)

    def timing(self, label: str, value_ms: float, note: str) -> None:
        print(f"  {label}: {value_ms:.2f} ms {note}".rstrip())

    def blank(self) -> None:
        print()
