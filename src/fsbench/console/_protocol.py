"""fsbench.console._protocol -- ConsoleProtocol definition.

Pure standard-library typing.Protocol for the fsbench terminal output system.
No external dependencies allowed in this file.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleProtocol(Protocol):
    """fsbench terminal output protocol.

    Three layers of methods:

    **General messages** -- usable from any module::

        console.info("Workspace ready")
        console.success("Benchmark complete")
        console.warning("Interrupted")
        console.error("Invalid settings")

    **Structured panels** -- tables and key-value displays::

        console.table(["Op", "Mean"], [["write", "0.12"]], title="Results")
        console.kv({"OS": "linux", "Arch": "x86_64"}, title="System")

    **Benchmark lifecycle** -- used by the runner and the phases::

        console.banner("File I/O Performance Benchmark")
        console.section("Single File Operations")
        console.heading("Testing 1KB files (100 iterations):")
        console.timing("Write", 0.12, "avg")
    """

    # -- General messages ---------------------------------------------------

    def info(self, message: str) -> None:
        """Informational message."""
        ...

    def success(self, message: str) -> None:
        """Success / positive-outcome message."""
        ...

    def warning(self, message: str) -> None:
        """Warning message."""
        ...

    def error(self, message: str) -> None:
        """Error message."""
        ...

    # -- Structured panels --------------------------------------------------

    def table(self, headers: list[str], rows: list[list[str]], *, title: str = "") -> None:
        """Display a table with *headers* and *rows*."""
        ...

    def kv(self, data: dict[str, str], *, title: str = "") -> None:
        """Display key-value pairs."""
        ...

    # -- Benchmark lifecycle ------------------------------------------------

    def banner(self, title: str) -> None:
        """Display a boxed banner (run start / run end)."""
        ...

    def section(self, title: str) -> None:
        """Display a phase separator."""
        ...

    def heading(self, text: str) -> None:
        """Display the per-bucket heading line."""
        ...

    def timing(self, label: str, value_ms: float, note: str) -> None:
        """Display one labelled timing, e.g. ``Write: 0.12 ms avg``."""
        ...

    def blank(self) -> None:
        """Emit an empty line."""
        ...
