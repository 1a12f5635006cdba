"""Shared pytest fixtures and fake filesystems for fsbench tests.

Provides:
- InMemoryFileSystem: stateful async fake that records every call and can
  slow I/O down to expose overlap between concurrent chains
- Fixtures for both real backends rooted in ``tmp_path``
- Small BenchSettings so suite-level tests finish quickly
"""

from __future__ import annotations

import asyncio
import errno
from typing import TYPE_CHECKING

import pytest

from fsbench.adapters import InlineFileSystem, ThreadPoolFileSystem, get_filesystem
from fsbench.config import SIZE_BUCKETS, BenchSettings
from fsbench.console import configure
from fsbench.domain.models import DirEntry, FileMetadata

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from fsbench.domain.protocols import AsyncFileSystem


# ── Fake AsyncFileSystem ──────────────────────────────────────────────────


class InMemoryFileSystem:
    """Stateful in-memory AsyncFileSystem.

    Tracks file contents, directories and the ordered list of calls.
    ``delay`` makes every data operation sleep so overlapping calls are
    observable through ``max_in_flight``.
    """

    name = "memory"

    def __init__(self, *, delay: float = 0.0) -> None:
        self.files: dict[str, bytes] = {}
        self.dirs: set[str] = set()
        self.calls: list[tuple[str, str]] = []
        self.created: list[tuple[str, int]] = []
        self.delay = delay
        self.in_flight = 0
        self.max_in_flight = 0
        self.fail_on: dict[str, BaseException] = {}

    async def _io(self, op: str, path: str) -> None:
        self.calls.append((op, path))
        if op in self.fail_on:
            raise self.fail_on[op]
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
        finally:
            self.in_flight -= 1

    def names_in(self, directory: str) -> list[str]:
        """Return the file names directly under *directory*."""
        prefix = directory + "/"
        return sorted(p[len(prefix) :] for p in self.files if p.startswith(prefix))

    async def create_directory(self, path: str) -> None:
        await self._io("create_directory", path)
        if path in self.dirs:
            raise FileExistsError(errno.EEXIST, "File exists", path)
        self.dirs.add(path)

    async def remove_entry(self, path: str) -> None:
        await self._io("remove_entry", path)
        if path not in self.files:
            raise FileNotFoundError(errno.ENOENT, "No such file", path)
        del self.files[path]

    async def remove_directory(self, path: str) -> None:
        await self._io("remove_directory", path)
        if path not in self.dirs:
            raise FileNotFoundError(errno.ENOENT, "No such directory", path)
        if self.names_in(path):
            raise OSError(errno.ENOTEMPTY, "Directory not empty", path)
        self.dirs.remove(path)

    async def list_directory_entries(self, path: str) -> list[DirEntry]:
        await self._io("list_directory_entries", path)
        if path not in self.dirs:
            raise FileNotFoundError(errno.ENOENT, "No such directory", path)
        return [DirEntry(name=n, is_file=True) for n in self.names_in(path)]

    async def write_bytes(self, path: str, data: bytes) -> None:
        await self._io("write_bytes", path)
        self.files[path] = bytes(data)
        self.created.append((path, len(data)))

    async def read_bytes(self, path: str) -> bytes:
        await self._io("read_bytes", path)
        if path not in self.files:
            raise FileNotFoundError(errno.ENOENT, "No such file", path)
        return self.files[path]

    async def write_text(self, path: str, content: str) -> None:
        await self._io("write_text", path)
        self.files[path] = content.encode("utf-8")
        self.created.append((path, len(self.files[path])))

    async def read_text(self, path: str) -> str:
        await self._io("read_text", path)
        if path not in self.files:
            raise FileNotFoundError(errno.ENOENT, "No such file", path)
        return self.files[path].decode("utf-8")

    async def stat_metadata(self, path: str) -> FileMetadata:
        await self._io("stat_metadata", path)
        if path not in self.files:
            raise FileNotFoundError(errno.ENOENT, "No such file", path)
        return FileMetadata(size=len(self.files[path]), is_file=True, modified=0.0)

    def ops(self, op: str) -> list[str]:
        """Paths passed to *op*, in call order."""
        return [path for name, path in self.calls if name == op]


# ── Pytest Fixtures ──────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def _plain_console() -> None:
    """Keep console output deterministic and escape-free."""
    configure(backend="plain")


@pytest.fixture
def memory_fs() -> InMemoryFileSystem:
    """Provide an in-memory filesystem with the ``ws`` workspace created."""
    fs = InMemoryFileSystem()
    fs.dirs.add("ws")
    return fs


@pytest.fixture
def make_memory_fs() -> Callable[..., InMemoryFileSystem]:
    """Factory for InMemoryFileSystem with the ``ws`` workspace created."""

    def _factory(*, delay: float = 0.0) -> InMemoryFileSystem:
        fs = InMemoryFileSystem(delay=delay)
        fs.dirs.add("ws")
        return fs

    return _factory


@pytest.fixture(params=[ThreadPoolFileSystem.name, InlineFileSystem.name])
def disk_fs(request: pytest.FixtureRequest) -> AsyncFileSystem:
    """Provide each real backend in turn."""
    return get_filesystem(request.param)


@pytest.fixture
def disk_workspace(tmp_path: Path) -> str:
    """An existing, empty workspace directory on disk."""
    ws = tmp_path / "ws"
    ws.mkdir()
    return str(ws)


@pytest.fixture
def fast_settings(tmp_path: Path) -> BenchSettings:
    """Settings small enough for whole-suite tests."""
    return BenchSettings(
        iterations=3,
        concurrency=4,
        workspace=str(tmp_path / "bench_tmp"),
        buckets=SIZE_BUCKETS[:2],
    )
