"""Core data types for fsbench.

All types are frozen dataclasses with complete type annotations.
This module has ZERO imports from outside the Python standard library.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SizeBucket:
    """A named payload size used to parameterize a benchmark pass."""

    label: str
    byte_count: int


@dataclass(frozen=True)
class ScenarioDocument:
    """A fixed structured document written by the composite scenario."""

    name: str
    content: str


def validate_buckets(buckets: Sequence[SizeBucket]) -> tuple[SizeBucket, ...]:
    """Return *buckets* as a tuple after checking ordering and uniqueness.

    Raises:
        ValueError: If the sequence is empty, has a non-positive size,
            repeats a label, or is not strictly increasing in byte count.
    """
    if not buckets:
        msg = "at least one size bucket is required"
        raise ValueError(msg)

    seen: set[str] = set()
    previous = 0
    for bucket in buckets:
        if bucket.byte_count <= 0:
            msg = f"bucket {bucket.label!r} has non-positive size {bucket.byte_count}"
            raise ValueError(msg)
        if bucket.label in seen:
            msg = f"duplicate bucket label {bucket.label!r}"
            raise ValueError(msg)
        if bucket.byte_count <= previous:
            msg = f"bucket {bucket.label!r} is not larger than the bucket before it"
            raise ValueError(msg)
        seen.add(bucket.label)
        previous = bucket.byte_count
    return tuple(buckets)


# ---------------------------------------------------------------------------
# Filesystem surface types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DirEntry:
    """One entry returned by a directory listing."""

    name: str
    is_file: bool


@dataclass(frozen=True)
class FileMetadata:
    """Subset of stat results the harness cares about."""

    size: int
    is_file: bool
    modified: float


@dataclass(frozen=True)
class EnvironmentInfo:
    """Diagnostic identifiers printed before a run.

    ``kernel_release`` is None when the release could not be read (or the
    platform has none); ``async_io_capable`` is None when it is unknown.
    """

    python_version: str
    implementation: str
    platform: str
    machine: str
    cpu_count: int
    kernel_release: str | None = None
    async_io_capable: bool | None = None


# ---------------------------------------------------------------------------
# Timing reports
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SingleOpTimings:
    """Mean per-operation latency (ms) for one bucket of the serial phase."""

    bucket: SizeBucket
    write_ms: float
    read_ms: float
    stat_ms: float


@dataclass(frozen=True)
class ConcurrentTiming:
    """Wall-clock time (ms) for one batch of concurrent chains."""

    bucket: SizeBucket
    concurrency: int
    total_ms: float

    @property
    def per_chain_ms(self) -> float:
        """Batch time divided evenly across the chains.

        ``bench_concurrent`` only builds batches with at least one chain.
        """
        return self.total_ms / self.concurrency


@dataclass(frozen=True)
class ScenarioTiming:
    """Elapsed time (ms) for the composite scenario."""

    total_ms: float
    documents: int


@dataclass(frozen=True)
class SuiteReport:
    """Every timing produced by one suite pass against one backend."""

    backend: str
    single: tuple[SingleOpTimings, ...] = ()
    concurrent: tuple[ConcurrentTiming, ...] = ()
    scenario: ScenarioTiming | None = None


@dataclass(frozen=True)
class Comparison:
    """Baseline vs. candidate timing for one measured operation."""

    operation: str
    baseline_ms: float
    candidate_ms: float

    @property
    def speedup(self) -> float:
        """How many times faster the candidate is (inf if it took no time)."""
        if self.candidate_ms <= 0:
            return float("inf")
        return self.baseline_ms / self.candidate_ms

    @property
    def diff_percent(self) -> float:
        """Relative improvement of the candidate over the baseline."""
        if self.baseline_ms <= 0:
            return 0.0
        return (self.baseline_ms - self.candidate_ms) / self.baseline_ms * 100.0

    @property
    def indicator(self) -> str:
        """Coarse verdict: ``faster``, ``ok``, ``same`` or ``slower``."""
        speedup = self.speedup
        if speedup > 1.2:
            return "faster"
        if speedup > 1.0:
            return "ok"
        if speedup > 0.9:
            return "same"
        return "slower"
