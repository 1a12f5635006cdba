"""Local filesystem adapters implementing AsyncFileSystem.

Both backends perform the same blocking calls through pathlib/os. They
differ only in how a call is dispatched: ``ThreadPoolFileSystem`` hands it to
a worker thread and suspends the caller, ``InlineFileSystem`` runs it on the
event loop thread. Paths are used exactly as given.
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path

from fsbench.domain.models import DirEntry, FileMetadata


def _create_directory(path: str) -> None:
    os.mkdir(path)


def _remove_entry(path: str) -> None:
    os.unlink(path)


def _remove_directory(path: str) -> None:
    os.rmdir(path)


def _list_directory_entries(path: str) -> list[DirEntry]:
    with os.scandir(path) as it:
        return [DirEntry(name=e.name, is_file=e.is_file(follow_symlinks=False)) for e in it]


def _write_bytes(path: str, data: bytes) -> None:
    Path(path).write_bytes(data)


def _read_bytes(path: str) -> bytes:
    return Path(path).read_bytes()


def _write_text(path: str, content: str) -> None:
    Path(path).write_text(content, encoding="utf-8")


def _read_text(path: str) -> str:
    return Path(path).read_text(encoding="utf-8")


def _stat_metadata(path: str) -> FileMetadata:
    st = os.stat(path)
    return FileMetadata(
        size=st.st_size,
        is_file=Path(path).is_file(),
        modified=st.st_mtime,
    )


class ThreadPoolFileSystem:
    """AsyncFileSystem that runs every call in the default thread pool.

    This is the blocking-thread-pool path: the coroutine suspends while a
    worker thread performs the syscall.
    """

    name = "thread"

    async def create_directory(self, path: str) -> None:
        await asyncio.to_thread(_create_directory, path)

    async def remove_entry(self, path: str) -> None:
        await asyncio.to_thread(_remove_entry, path)

    async def remove_directory(self, path: str) -> None:
        await asyncio.to_thread(_remove_directory, path)

    async def list_directory_entries(self, path: str) -> list[DirEntry]:
        return await asyncio.to_thread(_list_directory_entries, path)

    async def write_bytes(self, path: str, data: bytes) -> None:
        await asyncio.to_thread(_write_bytes, path, data)

    async def read_bytes(self, path: str) -> bytes:
        return await asyncio.to_thread(_read_bytes, path)

    async def write_text(self, path: str, content: str) -> None:
        await asyncio.to_thread(_write_text, path, content)

    async def read_text(self, path: str) -> str:
        return await asyncio.to_thread(_read_text, path)

    async def stat_metadata(self, path: str) -> FileMetadata:
        return await asyncio.to_thread(_stat_metadata, path)


class InlineFileSystem:
    """AsyncFileSystem that blocks the event loop for each call.

    Zero dispatch overhead; concurrent chains degrade to serial execution.
    Used as the baseline the thread pool is compared against.
    """

    name = "inline"

    async def create_directory(self, path: str) -> None:
        _create_directory(path)

    async def remove_entry(self, path: str) -> None:
        _remove_entry(path)

    async def remove_directory(self, path: str) -> None:
        _remove_directory(path)

    async def list_directory_entries(self, path: str) -> list[DirEntry]:
        return _list_directory_entries(path)

    async def write_bytes(self, path: str, data: bytes) -> None:
        _write_bytes(path, data)

    async def read_bytes(self, path: str) -> bytes:
        return _read_bytes(path)

    async def write_text(self, path: str, content: str) -> None:
        _write_text(path, content)

    async def read_text(self, path: str) -> str:
        return _read_text(path)

    async def stat_metadata(self, path: str) -> FileMetadata:
        return _stat_metadata(path)
