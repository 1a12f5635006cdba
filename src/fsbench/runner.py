"""
fsbench/runner.py -- Suite orchestration.

One suite is a strict sequence over a single backend:

  ensure workspace
  -> single-op phase per bucket (cleanup after each bucket)
  -> concurrent phase per bucket (cleanup after each bucket)
  -> composite scenario
  -> cleanup + teardown

No phase retries or skips. The first failure aborts the suite; the
workspace is still cleared on the way out, including on cancellation.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fsbench.adapters import get_filesystem
from fsbench.console import console
from fsbench.domain.models import SuiteReport
from fsbench.environment import probe_environment, report_environment
from fsbench.phases.concurrent_ops import bench_concurrent
from fsbench.phases.scenario import bench_scenario
from fsbench.phases.single_ops import run_single_ops
from fsbench.workspace import cleanup, ensure_workspace, teardown

if TYPE_CHECKING:
    from fsbench.config import BenchSettings
    from fsbench.domain.models import ConcurrentTiming, ScenarioTiming, SingleOpTimings
    from fsbench.domain.protocols import AsyncFileSystem

logger = logging.getLogger("fsbench.runner")


async def run_single_phase(
    fs: AsyncFileSystem, settings: BenchSettings
) -> tuple[SingleOpTimings, ...]:
    """Serial write/read/stat for every bucket."""
    console.section("Single File Operations")
    results: list[SingleOpTimings] = []
    for bucket in settings.buckets:
        console.heading(f"Testing {bucket.label} files ({settings.iterations} iterations):")
        timings = await run_single_ops(fs, settings.workspace, bucket, settings.iterations)
        console.timing("Write", timings.write_ms, "avg")
        console.timing("Read ", timings.read_ms, "avg")
        console.timing("Stat ", timings.stat_ms, "avg")
        await cleanup(fs, settings.workspace)
        console.blank()
        results.append(timings)
    return tuple(results)


async def run_concurrent_phase(
    fs: AsyncFileSystem, settings: BenchSettings
) -> tuple[ConcurrentTiming, ...]:
    """One concurrent batch per bucket."""
    console.section(f"Concurrent File Operations ({settings.concurrency} concurrent ops)")
    results: list[ConcurrentTiming] = []
    for bucket in settings.buckets:
        console.heading(f"Testing {bucket.label} files ({settings.concurrency} concurrent):")
        timing = await bench_concurrent(fs, settings.workspace, bucket, settings.concurrency)
        console.timing("Concurrent", timing.total_ms, "total")
        console.timing("Per operation", timing.per_chain_ms, "avg")
        await cleanup(fs, settings.workspace)
        console.blank()
        results.append(timing)
    return tuple(results)


async def run_scenario_phase(fs: AsyncFileSystem, settings: BenchSettings) -> ScenarioTiming:
    """The composite configuration-loading scenario."""
    console.section("Real-World Scenario: Processing Multiple Files")
    timing = await bench_scenario(fs, settings.workspace)
    console.timing("Processing time", timing.total_ms, "")
    console.blank()
    return timing


async def run_suite(fs: AsyncFileSystem, settings: BenchSettings) -> SuiteReport:
    """Run every phase against *fs* and return what was printed."""
    logger.info("Starting suite on backend %s in %s", fs.name, settings.workspace)
    await ensure_workspace(fs, settings.workspace)
    try:
        single = await run_single_phase(fs, settings)
        concurrent = await run_concurrent_phase(fs, settings)
        scenario = await run_scenario_phase(fs, settings)
    except BaseException:
        # includes CancelledError, which asyncio.run raises in the task on Ctrl-C
        await _discard_workspace_after_failure(fs, settings.workspace)
        raise

    await cleanup(fs, settings.workspace)
    await teardown(fs, settings.workspace)
    logger.info("Suite on backend %s finished", fs.name)
    return SuiteReport(
        backend=fs.name, single=single, concurrent=concurrent, scenario=scenario
    )


async def run_benchmarks(settings: BenchSettings, backends: list[str]) -> list[SuiteReport]:
    """Probe the environment once, then run one suite per backend in order."""
    probe_fs = get_filesystem(backends[0])
    report_environment(await probe_environment(probe_fs))

    reports: list[SuiteReport] = []
    for name in backends:
        fs = get_filesystem(name)
        if len(backends) > 1:
            console.info(f"Backend: {name}")
            console.blank()
        reports.append(await run_suite(fs, settings))
    return reports


async def _discard_workspace_after_failure(fs: AsyncFileSystem, workspace: str) -> None:
    try:
        await cleanup(fs, workspace)
        await teardown(fs, workspace)
    except OSError:
        logger.warning("Could not clear %s after a failed run", workspace, exc_info=True)
