"""Backend comparison -- side-by-side timings from two suite reports.

The baseline is the first backend run, the candidate the second. Rows are
produced per bucket and operation, then per concurrent batch, then for the
scenario.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fsbench.console import console
from fsbench.domain.models import Comparison

if TYPE_CHECKING:
    from fsbench.domain.models import SuiteReport

_GLYPHS = {"faster": "🚀", "ok": "✓", "same": "≈", "slower": "⚠"}


def compare_reports(baseline: SuiteReport, candidate: SuiteReport) -> list[Comparison]:
    """Pair up every timing the two reports have in common."""
    rows: list[Comparison] = []

    candidate_single = {t.bucket.label: t for t in candidate.single}
    for base in baseline.single:
        other = candidate_single.get(base.bucket.label)
        if other is None:
            continue
        label = base.bucket.label
        rows.append(Comparison(f"{label} write", base.write_ms, other.write_ms))
        rows.append(Comparison(f"{label} read", base.read_ms, other.read_ms))
        rows.append(Comparison(f"{label} stat", base.stat_ms, other.stat_ms))

    candidate_concurrent = {t.bucket.label: t for t in candidate.concurrent}
    for base_batch in baseline.concurrent:
        other_batch = candidate_concurrent.get(base_batch.bucket.label)
        if other_batch is None:
            continue
        rows.append(
            Comparison(
                f"{base_batch.bucket.label} concurrent",
                base_batch.total_ms,
                other_batch.total_ms,
            )
        )

    if baseline.scenario is not None and candidate.scenario is not None:
        rows.append(
            Comparison("scenario", baseline.scenario.total_ms, candidate.scenario.total_ms)
        )
    return rows


def report_comparisons(baseline: str, candidate: str, rows: list[Comparison]) -> None:
    """Render *rows* as a table headed by the two backend names."""
    console.section(f"Comparison: {baseline} vs {candidate}")
    table_rows = [
        [
            row.operation,
            f"{row.baseline_ms:.2f}",
            f"{row.candidate_ms:.2f}",
            f"{row.speedup:.2f}x",
            f"{row.diff_percent:+.1f}%",
            f"{_GLYPHS[row.indicator]} {row.indicator}",
        ]
        for row in rows
    ]
    console.table(
        ["Operation", f"{baseline} (ms)", f"{candidate} (ms)", "Speedup", "Diff", ""],
        table_rows,
    )
    console.blank()
