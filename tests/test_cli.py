"""Tests for the command-line entry point."""

import pytest

from fcfs_seek.cli import build_report, run
from fcfs_seek.workload import DEFAULT_WORKLOAD, Workload


class TestBuildReport:
    """Verify the pure half of the CLI."""

    def test_uses_default_workload(self) -> None:
        """Without arguments the fixed workload is measured."""
        report = build_report()
        assert report.tracks == DEFAULT_WORKLOAD.tracks
        assert report.total == 238

    def test_custom_workload(self) -> None:
        """Another workload can be passed in."""
        report = build_report(Workload(tracks=(10, 0), initial_head=5))
        assert report.total == 15

    def test_empty_workload_raises(self) -> None:
        """An empty workload propagates the error."""
        with pytest.raises(ValueError, match="zero requests"):
            build_report(Workload(tracks=(), initial_head=5))


class TestRun:
    """Verify what gets printed."""

    def test_prints_report(self, capsys: pytest.CaptureFixture[str]) -> None:
        """run() should print exactly the four report lines."""
        run()
        out = capsys.readouterr().out
        assert out == (
            "Track positions: 55 58 60 70 18 90 150 160 184 \n"
            "Initial head position: 50\n"
            "Total head movement: 238\n"
            "Average head movement: 26.44\n"
        )
