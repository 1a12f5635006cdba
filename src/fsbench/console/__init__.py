"""fsbench.console -- terminal output system.

Usage (any file)::

    from fsbench.console import console

    console.section("Single File Operations")
    console.timing("Write", 0.12, "avg")
    console.table(["Op", "Mean"], [["write", "0.12"]])

Configuration (call once in ``cli.py:main()``)::

    from fsbench.console import configure

    configure(backend="auto")  # "rich" | "plain" | "auto"
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from fsbench.console._plain import PlainBackend
from fsbench.console._rich import RichBackend

if TYPE_CHECKING:
    from fsbench.console._protocol import ConsoleProtocol

# ---------------------------------------------------------------------------
# Global singleton -- defaults to PlainBackend until configure() runs
# ---------------------------------------------------------------------------

_backend: ConsoleProtocol = PlainBackend()

CONSOLE_BACKENDS = ("auto", "rich", "plain")


def configure(*, backend: str = "auto") -> None:
    """Select the console backend.

    Should be called **once** at startup (in ``cli.py:main()``).

    Args:
        backend: ``"rich"`` -- always use Rich.
                 ``"plain"`` -- always use plain text.
                 ``"auto"`` (default) -- Rich when stdout is a TTY;
                 plain otherwise.

    Raises:
        ValueError: If *backend* is not one of ``CONSOLE_BACKENDS``.
    """
    global _backend  # noqa: PLW0603

    if backend not in CONSOLE_BACKENDS:
        msg = f"unknown console backend {backend!r}"
        raise ValueError(msg)

    if backend == "auto":
        backend = "rich" if sys.stdout.isatty() else "plain"

    _backend = RichBackend() if backend == "rich" else PlainBackend()


def get_console() -> ConsoleProtocol:
    """Return the current backend instance."""
    return _backend


# ---------------------------------------------------------------------------
# Proxy object -- ``from fsbench.console import console``
# ---------------------------------------------------------------------------


class _ConsoleProxy:
    """Transparent proxy that delegates to the current ``_backend``.

    This lets callers import ``console`` once at module level and
    automatically pick up any later ``configure()`` call.
    """

    def __getattr__(self, name: str) -> object:
        return getattr(_backend, name)


console: ConsoleProtocol = _ConsoleProxy()  # type: ignore[assignment]
