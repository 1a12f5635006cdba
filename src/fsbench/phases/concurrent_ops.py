"""Concurrent-operation benchmark -- a fixed batch of write->read->stat chains.

All chains start without waiting for one another and are joined with
``asyncio.gather``; the first failure propagates. Only the wall-clock time
of the whole batch is measured.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from fsbench.config import CONCURRENT_PREFIX
from fsbench.domain.models import ConcurrentTiming
from fsbench.phases.single_ops import indexed_name
from fsbench.phases.timing import elapsed_ms, now
from fsbench.workspace import scratch_path

if TYPE_CHECKING:
    from fsbench.domain.models import SizeBucket
    from fsbench.domain.protocols import AsyncFileSystem

logger = logging.getLogger("fsbench.concurrent_ops")


async def run_chain(fs: AsyncFileSystem, path: str, payload: bytes) -> None:
    """Write *payload* to *path*, read it back, then stat it."""
    await fs.write_bytes(path, payload)
    await fs.read_bytes(path)
    await fs.stat_metadata(path)


async def bench_concurrent(
    fs: AsyncFileSystem, workspace: str, bucket: SizeBucket, concurrency: int
) -> ConcurrentTiming:
    """Time *concurrency* independent chains from launch to last completion."""
    if concurrency < 1:
        msg = f"concurrency must be at least 1, got {concurrency}"
        raise ValueError(msg)
    payload = bytes(bucket.byte_count)
    paths = [
        scratch_path(workspace, indexed_name(CONCURRENT_PREFIX, i)) for i in range(concurrency)
    ]

    start = now()
    await asyncio.gather(*(run_chain(fs, path, payload) for path in paths))
    total_ms = elapsed_ms(start)

    logger.debug("%s x%d concurrent: %.4fms total", bucket.label, concurrency, total_ms)
    return ConcurrentTiming(bucket=bucket, concurrency=concurrency, total_ms=total_ms)
