"""Command-line entry point.

Takes no arguments: it measures the fixed workload and prints the
report.  ``build_report`` is the pure, testable half; ``run`` is the
thin I/O wrapper.
"""

from fcfs_seek.logging import Logger
from fcfs_seek.movement import MovementReport, compute
from fcfs_seek.report import format_report
from fcfs_seek.workload import DEFAULT_WORKLOAD, Workload


def build_report(
    workload: Workload = DEFAULT_WORKLOAD,
    *,
    logger: Logger | None = None,
) -> MovementReport:
    """Compute the movement report for *workload*."""
    return compute(workload.tracks, head=workload.initial_head, logger=logger)


def run() -> None:
    """Print the head-movement report for the fixed workload.

    This is the ``fcfs-seek`` console entry point.
    """
    print(format_report(build_report()), end="")  # noqa: T201
