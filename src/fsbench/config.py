"""
fsbench/config.py -- Fixture constants and run settings.

All tuning constants live here. ``BenchSettings`` carries the effective
values for one run; ``load_settings`` layers an optional YAML file on top
of the defaults.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

from fsbench.domain.models import SizeBucket, validate_buckets

logger = logging.getLogger("fsbench.config")

# ---------------------------------------------------------------------------
# Measurement constants
# ---------------------------------------------------------------------------

KIB = 1024
MIB = 1024 * KIB

SIZE_BUCKETS: tuple[SizeBucket, ...] = (
    SizeBucket("1KB", KIB),
    SizeBucket("4KB", 4 * KIB),
    SizeBucket("16KB", 16 * KIB),
    SizeBucket("64KB", 64 * KIB),
    SizeBucket("256KB", 256 * KIB),
    SizeBucket("1MB", MIB),
    SizeBucket("4MB", 4 * MIB),
)

# Serial repetitions per operation per bucket
ITERATIONS = 100

# Independent write->read->stat chains per concurrent batch
CONCURRENT_OPS = 10

# ---------------------------------------------------------------------------
# Workspace layout
# ---------------------------------------------------------------------------

WORKSPACE_DIR = "./bench_fsbench_tmp"

TEMP_SUFFIX = ".tmp"
WRITE_PREFIX = "write_"
READ_PREFIX = "read_"
CONCURRENT_PREFIX = "concurrent_"
STAT_FILENAME = "stat" + TEMP_SUFFIX
STAT_PAYLOAD = bytes([1, 2, 3])

# Cleanup must be extended whenever a new fixture name pattern is added.
SCENARIO_FILENAMES: tuple[str, ...] = (
    "config.json",
    "settings.json",
    "data.json",
    "cache.json",
)

# ---------------------------------------------------------------------------
# Environment probe
# ---------------------------------------------------------------------------

KERNEL_RELEASE_FILE = "/proc/sys/kernel/osrelease"
MIN_KERNEL_VERSION = (5, 6)

# ---------------------------------------------------------------------------
# Backends
# ---------------------------------------------------------------------------

DEFAULT_BACKEND = "thread"
BACKEND_NAMES: tuple[str, ...] = ("thread", "inline")


class SettingsError(ValueError):
    """Raised when a settings file or override is invalid."""


@dataclass(frozen=True)
class BenchSettings:
    """Effective settings for one benchmark run."""

    iterations: int = ITERATIONS
    concurrency: int = CONCURRENT_OPS
    workspace: str = WORKSPACE_DIR
    backend: str = DEFAULT_BACKEND
    buckets: tuple[SizeBucket, ...] = SIZE_BUCKETS

    def with_overrides(self, **overrides: Any) -> BenchSettings:
        """Return a copy with every non-None override applied and validated."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if "sizes" in changes:
            changes["buckets"] = select_buckets(changes.pop("sizes"))
        settings = replace(self, **changes)
        settings.validate()
        return settings

    def validate(self) -> None:
        """Raise SettingsError if any value is out of range."""
        if self.iterations < 1:
            msg = f"iterations must be at least 1, got {self.iterations}"
            raise SettingsError(msg)
        if self.concurrency < 1:
            msg = f"concurrency must be at least 1, got {self.concurrency}"
            raise SettingsError(msg)
        if not self.workspace:
            msg = "workspace path must not be empty"
            raise SettingsError(msg)
        if self.backend not in BACKEND_NAMES:
            msg = f"unknown backend {self.backend!r} (known: {', '.join(BACKEND_NAMES)})"
            raise SettingsError(msg)
        try:
            validate_buckets(self.buckets)
        except ValueError as exc:
            raise SettingsError(str(exc)) from exc


def select_buckets(labels: list[str] | tuple[str, ...]) -> tuple[SizeBucket, ...]:
    """Pick the named buckets from SIZE_BUCKETS, keeping their canonical order."""
    by_label = {b.label.lower(): b for b in SIZE_BUCKETS}
    wanted: set[str] = set()
    for label in labels:
        key = str(label).strip().lower()
        if key not in by_label:
            known = ", ".join(b.label for b in SIZE_BUCKETS)
            msg = f"unknown size bucket {label!r} (known: {known})"
            raise SettingsError(msg)
        wanted.add(key)
    return tuple(b for b in SIZE_BUCKETS if b.label.lower() in wanted)


_SETTINGS_KEYS = frozenset({"iterations", "concurrency", "workspace", "backend", "sizes"})


def load_settings(path: Path | None = None) -> BenchSettings:
    """Load settings from a YAML file, or return the defaults.

    Recognised keys: ``iterations``, ``concurrency``, ``workspace``,
    ``backend`` and ``sizes`` (a list of bucket labels).
    """
    settings = BenchSettings()
    if path is None:
        return settings

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        msg = f"could not read {path}: {exc}"
        raise SettingsError(msg) from exc
    except yaml.YAMLError as exc:
        msg = f"could not parse {path}: {exc}"
        raise SettingsError(msg) from exc

    if raw is None:
        return settings
    if not isinstance(raw, dict):
        msg = f"{path} must contain a mapping at the top level"
        raise SettingsError(msg)

    data: dict[str, Any] = raw
    unknown = set(data) - _SETTINGS_KEYS
    if unknown:
        msg = f"unknown settings in {path}: {', '.join(sorted(unknown))}"
        raise SettingsError(msg)

    sizes = data.get("sizes")
    if sizes is not None and not isinstance(sizes, list):
        msg = "sizes must be a list of bucket labels"
        raise SettingsError(msg)

    logger.debug("Loaded settings from %s: %s", path, data)
    return settings.with_overrides(
        iterations=_as_int(data, "iterations"),
        concurrency=_as_int(data, "concurrency"),
        workspace=_as_str(data, "workspace"),
        backend=_as_str(data, "backend"),
        sizes=sizes,
    )


def _as_int(data: dict[str, Any], key: str) -> int | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{key} must be an integer, got {value!r}"
        raise SettingsError(msg)
    return value


def _as_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        msg = f"{key} must be a string, got {value!r}"
        raise SettingsError(msg)
    return value
