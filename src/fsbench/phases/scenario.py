"""Composite scenario -- a small configuration-loading workload.

Four JSON documents are written concurrently, read back concurrently,
parsed one by one and finally stat-checked concurrently. Each step finishes
for every document before the next begins. A document that fails to parse
is a fixture bug, so ``json.JSONDecodeError`` propagates.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import TYPE_CHECKING

from fsbench.config import SCENARIO_FILENAMES
from fsbench.domain.models import ScenarioDocument, ScenarioTiming
from fsbench.phases.timing import elapsed_ms, now
from fsbench.workspace import scratch_path

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fsbench.domain.protocols import AsyncFileSystem

logger = logging.getLogger("fsbench.scenario")


def _build_documents() -> tuple[ScenarioDocument, ...]:
    payloads = (
        {"app": "fsbench", "version": "1.0"},
        {"theme": "dark", "lang": "en"},
        {"items": [{"id": 1, "value": "test"}] * 100},
        {"cache": ["x" * 100] * 1000},
    )
    return tuple(
        ScenarioDocument(name=name, content=json.dumps(payload))
        for name, payload in zip(SCENARIO_FILENAMES, payloads, strict=True)
    )


SCENARIO_DOCUMENTS: tuple[ScenarioDocument, ...] = _build_documents()


async def bench_scenario(
    fs: AsyncFileSystem,
    workspace: str,
    documents: Sequence[ScenarioDocument] = SCENARIO_DOCUMENTS,
) -> ScenarioTiming:
    """Time write -> read -> parse -> stat across *documents*."""
    paths = [scratch_path(workspace, doc.name) for doc in documents]

    start = now()

    await asyncio.gather(
        *(fs.write_text(path, doc.content) for path, doc in zip(paths, documents, strict=True))
    )

    contents = await asyncio.gather(*(fs.read_text(path) for path in paths))

    for content in contents:
        json.loads(content)

    await asyncio.gather(*(fs.stat_metadata(path) for path in paths))

    total_ms = elapsed_ms(start)
    logger.debug("Scenario over %d document(s): %.4fms", len(documents), total_ms)
    return ScenarioTiming(total_ms=total_ms, documents=len(documents))
