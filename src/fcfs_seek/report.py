"""Render a ``MovementReport`` for display.

The text layout is fixed: the track list (each number followed by a
space, so the line ends in a trailing space), the initial head
position, the integer total, and the average to two decimal places.
"""

from typing import Any

from fcfs_seek.movement import MovementReport


def format_tracks(tracks: tuple[int, ...]) -> str:
    """Return the ``Track positions`` line without its newline."""
    return "Track positions: " + "".join(f"{track} " for track in tracks)


def format_report(report: MovementReport) -> str:
    """Return the four-line text report, ending with a newline."""
    lines = [
        format_tracks(report.tracks),
        f"Initial head position: {report.initial_head}",
        f"Total head movement: {report.total}",
        f"Average head movement: {report.average:.2f}",
    ]
    return "\n".join(lines) + "\n"


def report_as_dict(report: MovementReport) -> dict[str, Any]:
    """Return a JSON-ready mapping of *report*."""
    return {
        "tracks": list(report.tracks),
        "initial_head": report.initial_head,
        "total": report.total,
        "average": report.average,
        "seeks": [
            {"start": seek.start, "end": seek.end, "distance": seek.distance}
            for seek in report.seeks
        ],
    }
