"""Tests for suite orchestration."""

from __future__ import annotations

import asyncio
import errno
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from fsbench.runner import run_benchmarks, run_suite

if TYPE_CHECKING:
    from collections.abc import Callable

    from conftest import InMemoryFileSystem

    from fsbench.config import BenchSettings
    from fsbench.domain.protocols import AsyncFileSystem


class TestRunSuite:
    async def test_full_suite_on_disk(
        self,
        disk_fs: AsyncFileSystem,
        fast_settings: BenchSettings,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        report = await run_suite(disk_fs, fast_settings)

        assert report.backend == disk_fs.name
        assert [t.bucket for t in report.single] == list(fast_settings.buckets)
        assert [t.bucket for t in report.concurrent] == list(fast_settings.buckets)
        assert all(t.concurrency == 4 for t in report.concurrent)
        assert report.scenario is not None
        assert not Path(fast_settings.workspace).exists()

        out = capsys.readouterr().out
        assert "Single File Operations" in out
        assert "Testing 1KB files (3 iterations):" in out
        assert "Concurrent File Operations (4 concurrent ops)" in out
        assert "Per operation:" in out
        assert "Processing time:" in out

    async def test_cleanup_runs_after_every_bucket(
        self, memory_fs: InMemoryFileSystem, fast_settings: BenchSettings
    ) -> None:
        settings = replace(fast_settings, workspace="ws")
        await run_suite(memory_fs, settings)

        buckets = len(settings.buckets)
        # one listing per bucket in each phase, plus the final cleanup
        assert len(memory_fs.ops("list_directory_entries")) == 2 * buckets + 1
        assert memory_fs.files == {}
        assert "ws" not in memory_fs.dirs

    async def test_phase_never_sees_previous_phase_files(
        self, memory_fs: InMemoryFileSystem, fast_settings: BenchSettings
    ) -> None:
        settings = replace(fast_settings, workspace="ws")
        seen: list[list[str]] = []
        original = memory_fs.write_text

        async def _spy(path: str, content: str) -> None:
            seen.append(memory_fs.names_in("ws"))
            await original(path, content)

        memory_fs.write_text = _spy  # type: ignore[method-assign]
        await run_suite(memory_fs, settings)

        assert seen[0] == []

    async def test_failure_aborts_and_clears_workspace(
        self, memory_fs: InMemoryFileSystem, fast_settings: BenchSettings
    ) -> None:
        settings = replace(fast_settings, workspace="ws")
        memory_fs.fail_on["stat_metadata"] = OSError(errno.EIO, "I/O error")

        with pytest.raises(OSError, match="I/O error"):
            await run_suite(memory_fs, settings)

        assert memory_fs.ops("write_text") == []
        assert memory_fs.files == {}
        assert "ws" not in memory_fs.dirs

    async def test_cancellation_mid_phase_clears_workspace(
        self,
        make_memory_fs: Callable[..., InMemoryFileSystem],
        fast_settings: BenchSettings,
    ) -> None:
        fs = make_memory_fs(delay=0.005)
        settings = replace(fast_settings, workspace="ws", iterations=50)

        task = asyncio.create_task(run_suite(fs, settings))
        while len(fs.names_in("ws")) < 3:
            await asyncio.sleep(0.005)
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task

        assert fs.files == {}
        assert "ws" not in fs.dirs


class TestRunBenchmarks:
    async def test_probes_once_then_runs_each_backend(
        self, fast_settings: BenchSettings, capsys: pytest.CaptureFixture[str]
    ) -> None:
        reports = await run_benchmarks(fast_settings, ["thread", "inline"])

        assert [r.backend for r in reports] == ["thread", "inline"]
        out = capsys.readouterr().out
        assert out.count("System Information") == 1
        assert "Backend: thread" in out
        assert "Backend: inline" in out

    async def test_single_backend_has_no_backend_line(
        self, fast_settings: BenchSettings, capsys: pytest.CaptureFixture[str]
    ) -> None:
        reports = await run_benchmarks(fast_settings, ["inline"])
        assert len(reports) == 1
        assert "Backend:" not in capsys.readouterr().out
