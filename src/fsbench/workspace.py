"""Workspace manager -- best-effort lifecycle of the scratch directory.

Housekeeping must never abort a run, but only an enumerated set of benign
faults is ignored: a directory that already exists, an entry that is
already gone, and (on teardown) a directory that is not empty. Everything
else propagates.
"""

from __future__ import annotations

import errno
import logging
from typing import TYPE_CHECKING

from fsbench.config import SCENARIO_FILENAMES, TEMP_SUFFIX

if TYPE_CHECKING:
    from fsbench.domain.protocols import AsyncFileSystem

logger = logging.getLogger("fsbench.workspace")

_NOT_EMPTY = frozenset({errno.ENOTEMPTY, errno.EEXIST})


def scratch_path(workspace: str, name: str) -> str:
    """Join a scratch file name onto the workspace root."""
    return f"{workspace}/{name}"


async def ensure_workspace(fs: AsyncFileSystem, workspace: str) -> None:
    """Create the workspace directory; an existing one is fine."""
    try:
        await fs.create_directory(workspace)
    except FileExistsError:
        logger.debug("Workspace %s already exists", workspace)
    else:
        logger.debug("Created workspace %s", workspace)


async def cleanup(fs: AsyncFileSystem, workspace: str) -> int:
    """Remove every scratch file from *workspace*.

    Deletes each regular file whose name ends with ``.tmp`` plus the fixed
    scenario file names. A missing workspace is a no-op.

    Returns:
        The number of entries actually removed.
    """
    try:
        entries = await fs.list_directory_entries(workspace)
    except (FileNotFoundError, NotADirectoryError):
        logger.debug("Workspace %s not listable, nothing to clean", workspace)
        return 0

    removed = 0
    for entry in entries:
        if entry.is_file and entry.name.endswith(TEMP_SUFFIX):
            if await _remove_quietly(fs, scratch_path(workspace, entry.name)):
                removed += 1

    for name in SCENARIO_FILENAMES:
        if await _remove_quietly(fs, scratch_path(workspace, name)):
            removed += 1

    logger.debug("Removed %d scratch file(s) from %s", removed, workspace)
    return removed


async def teardown(fs: AsyncFileSystem, workspace: str) -> None:
    """Remove the workspace directory itself after a final cleanup."""
    try:
        await fs.remove_directory(workspace)
    except FileNotFoundError:
        logger.debug("Workspace %s already removed", workspace)
    except OSError as exc:
        if exc.errno not in _NOT_EMPTY:
            raise
        logger.debug("Workspace %s not empty, leaving it in place", workspace)


async def _remove_quietly(fs: AsyncFileSystem, path: str) -> bool:
    try:
        await fs.remove_entry(path)
    except FileNotFoundError:
        return False
    return True
