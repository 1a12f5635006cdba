"""Environment probe -- runtime/platform identifiers and kernel capability hint.

Reading the kernel release is optional: any failure degrades to an
"unknown" label and never aborts the run.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from typing import TYPE_CHECKING

from fsbench.config import KERNEL_RELEASE_FILE, MIN_KERNEL_VERSION
from fsbench.console import console
from fsbench.domain.models import EnvironmentInfo

if TYPE_CHECKING:
    from fsbench.domain.protocols import AsyncFileSystem

logger = logging.getLogger("fsbench.environment")


def parse_kernel_version(text: str) -> tuple[int, int] | None:
    """Parse ``"<major>.<minor>..."`` into ``(major, minor)``.

    Accepts releases such as ``"5.10.0-1-amd64"`` or ``"6.1"``. Returns None
    for anything it cannot read rather than raising.
    """
    parts = text.strip().split(".")
    if len(parts) < 2:
        return None
    minor_text = parts[1].split("-", 1)[0]
    if not parts[0].isdigit() or not minor_text.isdigit():
        return None
    try:
        return int(parts[0]), int(minor_text)
    except ValueError:
        # isdigit() accepts superscripts and other non-decimal digits
        return None


def supports_async_io(major: int, minor: int) -> bool:
    """Return True if the kernel version has the asynchronous I/O ring."""
    return (major, minor) >= MIN_KERNEL_VERSION


async def probe_environment(
    fs: AsyncFileSystem, *, release_file: str = KERNEL_RELEASE_FILE
) -> EnvironmentInfo:
    """Collect runtime and platform identifiers.

    On Linux the kernel release is read through *fs* so the probe uses the
    same surface the benchmarks measure.
    """
    kernel_release: str | None = None
    capable: bool | None = None

    if sys.platform.startswith("linux"):
        try:
            kernel_release = (await fs.read_text(release_file)).strip()
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Kernel release unavailable from %s: %s", release_file, exc)
        else:
            version = parse_kernel_version(kernel_release)
            if version is None:
                logger.debug("Unparsable kernel release %r", kernel_release)
            else:
                capable = supports_async_io(*version)

    return EnvironmentInfo(
        python_version=platform.python_version(),
        implementation=platform.python_implementation(),
        platform=sys.platform,
        machine=platform.machine() or "unknown",
        cpu_count=os.cpu_count() or 1,
        kernel_release=kernel_release,
        async_io_capable=capable,
    )


def report_environment(info: EnvironmentInfo) -> None:
    """Print the diagnostic banner for *info*."""
    data = {
        "Python": f"{info.python_version} ({info.implementation})",
        "OS": info.platform,
        "Arch": info.machine,
        "CPUs": str(info.cpu_count),
    }
    if info.platform.startswith("linux"):
        data["Kernel"] = info.kernel_release or "unknown"
    console.kv(data, title="System Information")

    if info.async_io_capable is True:
        major, minor = MIN_KERNEL_VERSION
        console.success(f"Kernel supports io_uring (>= {major}.{minor})")
    elif info.async_io_capable is False:
        major, minor = MIN_KERNEL_VERSION
        console.warning(f"Kernel does NOT support io_uring (< {major}.{minor})")
    console.blank()
