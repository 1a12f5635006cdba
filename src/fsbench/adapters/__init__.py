"""Filesystem backends selectable by name."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fsbench.adapters.local_fs import InlineFileSystem, ThreadPoolFileSystem

if TYPE_CHECKING:
    from fsbench.domain.protocols import AsyncFileSystem

_BACKENDS: dict[str, type[ThreadPoolFileSystem] | type[InlineFileSystem]] = {
    ThreadPoolFileSystem.name: ThreadPoolFileSystem,
    InlineFileSystem.name: InlineFileSystem,
}


def get_filesystem(name: str) -> AsyncFileSystem:
    """Return a fresh backend instance for *name*.

    Raises:
        KeyError: If no backend is registered under *name*.
    """
    try:
        factory = _BACKENDS[name]
    except KeyError:
        msg = f"unknown backend {name!r} (known: {', '.join(_BACKENDS)})"
        raise KeyError(msg) from None
    return factory()


__all__ = ["InlineFileSystem", "ThreadPoolFileSystem", "get_filesystem"]
