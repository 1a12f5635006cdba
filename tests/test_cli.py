"""Tests for the fsbench command line."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from fsbench.cli import (
    EXIT_INTERRUPTED,
    EXIT_SETTINGS,
    backends_for,
    build_parser,
    main,
    resolve_settings,
)
from fsbench.config import BenchSettings


def _fast_argv(tmp_path: Path, *extra: str) -> list[str]:
    return [
        "--console",
        "plain",
        "--iterations",
        "2",
        "--concurrency",
        "3",
        "--sizes",
        "1KB",
        "--workspace",
        str(tmp_path / "bench_tmp"),
        *extra,
    ]


class TestResolveSettings:
    def test_defaults(self) -> None:
        settings = resolve_settings(build_parser().parse_args([]))
        assert settings == BenchSettings()

    def test_flags_override_yaml(self, tmp_path: Path) -> None:
        cfg = tmp_path / "bench.yaml"
        cfg.write_text("iterations: 7\nconcurrency: 5\n")
        args = build_parser().parse_args(["--config", str(cfg), "--iterations", "9"])

        settings = resolve_settings(args)

        assert settings.iterations == 9
        assert settings.concurrency == 5

    def test_sizes_are_comma_separated(self) -> None:
        args = build_parser().parse_args(["--sizes", "64kb,1KB"])
        settings = resolve_settings(args)
        assert [b.label for b in settings.buckets] == ["1KB", "64KB"]


class TestBackendsFor:
    def test_single(self) -> None:
        assert backends_for(BenchSettings(backend="inline"), compare=False) == ["inline"]

    def test_compare_puts_selected_first(self) -> None:
        assert backends_for(BenchSettings(), compare=True) == ["thread", "inline"]
        assert backends_for(BenchSettings(backend="inline"), compare=True) == [
            "inline",
            "thread",
        ]


class TestMain:
    def test_runs_suite_and_removes_workspace(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(_fast_argv(tmp_path))

        out = capsys.readouterr().out
        assert "File I/O Performance Benchmark" in out
        assert "System Information:" in out
        assert "Testing 1KB files (2 iterations):" in out
        assert "Comparison:" not in out
        assert "Benchmark Complete" in out
        assert not (tmp_path / "bench_tmp").exists()

    def test_compare_prints_table(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(_fast_argv(tmp_path, "--compare"))

        out = capsys.readouterr().out
        assert "Backend: thread" in out
        assert "Backend: inline" in out
        assert "Comparison: thread vs inline" in out
        assert "1KB write" in out
        assert "scenario" in out

    def test_bad_settings_exit_2(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--console", "plain", "--iterations", "0"])

        assert exc_info.value.code == EXIT_SETTINGS
        out = capsys.readouterr().out
        assert "[error]" in out
        assert "File I/O Performance Benchmark" not in out

    def test_unknown_size_exit_2(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--console", "plain", "--sizes", "3KB"])
        assert exc_info.value.code == EXIT_SETTINGS

    def test_unknown_backend_is_a_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--backend", "uring"])
        assert exc_info.value.code == 2

    def test_interrupt_exit_130(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with (
            patch("fsbench.cli.run_benchmarks", side_effect=KeyboardInterrupt),
            pytest.raises(SystemExit) as exc_info,
        ):
            main(_fast_argv(tmp_path))

        assert exc_info.value.code == EXIT_INTERRUPTED
        assert "Interrupted." in capsys.readouterr().out

    def test_settings_error_with_brackets_under_rich(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--console", "rich", "--sizes", "[/x]"])

        assert exc_info.value.code == EXIT_SETTINGS
        assert "'[/x]'" in capsys.readouterr().out
