"""Protocol interfaces for fsbench components."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from fsbench.domain.models import DirEntry, FileMetadata


class AsyncFileSystem(Protocol):
    """Filesystem capability surface the benchmarks measure.

    Every operation is a suspension point. Whether a backend serves it from
    a worker thread or blocks the loop is exactly what a run compares.
    """

    name: str

    async def create_directory(self, path: str) -> None:
        """Create a single directory. Raises FileExistsError if present."""
        ...

    async def remove_entry(self, path: str) -> None:
        """Remove a file. Raises FileNotFoundError if absent."""
        ...

    async def remove_directory(self, path: str) -> None:
        """Remove an empty directory."""
        ...

    async def list_directory_entries(self, path: str) -> list[DirEntry]:
        """Return the entries of a directory."""
        ...

    async def write_bytes(self, path: str, data: bytes) -> None:
        """Create or truncate *path* and write *data*."""
        ...

    async def read_bytes(self, path: str) -> bytes:
        """Return the full contents of *path*."""
        ...

    async def write_text(self, path: str, content: str) -> None:
        """Write UTF-8 text."""
        ...

    async def read_text(self, path: str) -> str:
        """Read UTF-8 text."""
        ...

    async def stat_metadata(self, path: str) -> FileMetadata:
        """Return metadata for *path*."""
        ...
