"""Single-operation benchmarks -- serial write, read and stat latency.

Each benchmark allocates its payload once, performs any setup untimed, then
times N strictly sequential operations and reports the mean in ms.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fsbench.config import READ_PREFIX, STAT_FILENAME, STAT_PAYLOAD, TEMP_SUFFIX, WRITE_PREFIX
from fsbench.domain.models import SingleOpTimings
from fsbench.phases.timing import elapsed_ms, now
from fsbench.workspace import scratch_path

if TYPE_CHECKING:
    from fsbench.domain.models import SizeBucket
    from fsbench.domain.protocols import AsyncFileSystem

logger = logging.getLogger("fsbench.single_ops")


def indexed_name(prefix: str, index: int) -> str:
    """Return ``<prefix><index>.tmp``."""
    return f"{prefix}{index}{TEMP_SUFFIX}"


def _require_iterations(iterations: int) -> None:
    if iterations < 1:
        msg = f"iterations must be at least 1, got {iterations}"
        raise ValueError(msg)


async def bench_write(fs: AsyncFileSystem, workspace: str, size: int, iterations: int) -> float:
    """Mean latency of writing *size* zero bytes to N fresh files."""
    _require_iterations(iterations)
    data = bytes(size)
    paths = [scratch_path(workspace, indexed_name(WRITE_PREFIX, i)) for i in range(iterations)]

    start = now()
    for path in paths:
        await fs.write_bytes(path, data)
    return elapsed_ms(start) / iterations


async def bench_read(fs: AsyncFileSystem, workspace: str, size: int, iterations: int) -> float:
    """Mean latency of reading back N files of *size* bytes.

    The N files are written before the clock starts; only the read loop is
    timed.
    """
    _require_iterations(iterations)
    data = bytes(size)
    paths = [scratch_path(workspace, indexed_name(READ_PREFIX, i)) for i in range(iterations)]
    for path in paths:
        await fs.write_bytes(path, data)

    start = now()
    for path in paths:
        await fs.read_bytes(path)
    return elapsed_ms(start) / iterations


async def bench_stat(fs: AsyncFileSystem, workspace: str, iterations: int) -> float:
    """Mean latency of N metadata queries against one small file."""
    _require_iterations(iterations)
    path = scratch_path(workspace, STAT_FILENAME)
    await fs.write_bytes(path, STAT_PAYLOAD)

    start = now()
    for _ in range(iterations):
        await fs.stat_metadata(path)
    return elapsed_ms(start) / iterations


async def run_single_ops(
    fs: AsyncFileSystem, workspace: str, bucket: SizeBucket, iterations: int
) -> SingleOpTimings:
    """Run write, read and stat for one bucket, one after another."""
    write_ms = await bench_write(fs, workspace, bucket.byte_count, iterations)
    read_ms = await bench_read(fs, workspace, bucket.byte_count, iterations)
    stat_ms = await bench_stat(fs, workspace, iterations)
    logger.debug(
        "%s x%d: write=%.4fms read=%.4fms stat=%.4fms",
        bucket.label,
        iterations,
        write_ms,
        read_ms,
        stat_ms,
    )
    return SingleOpTimings(bucket=bucket, write_ms=write_ms, read_ms=read_ms, stat_ms=stat_ms)
