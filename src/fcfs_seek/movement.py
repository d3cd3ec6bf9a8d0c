"""Head-movement calculator — how far the arm travels under FCFS.

Every request moves the head from where it is to the requested track.
The cost of one move is the absolute distance between the two tracks;
the total is the sum over the whole batch, starting from the initial
head position.  The average divides that total by the number of
requests.

Worked example (head at 50, requests 55 58 60 70 18 90 150 160 184)::

    5 + 3 + 2 + 10 + 52 + 72 + 60 + 10 + 24 = 238
    238 / 9 = 26.44

An empty batch has a total of zero but no average, so averaging it
raises ``EmptyRequestsError`` instead of dividing by zero.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from fcfs_seek.disk import DiskScheduler, FCFSPolicy
from fcfs_seek.logging import Logger, LogLevel

_SOURCE = "movement"


class EmptyRequestsError(ValueError):
    """Raise when head movement is averaged over zero requests."""


@dataclass(frozen=True)
class Seek:
    """One arm movement from ``start`` to ``end``."""

    start: int
    end: int

    @property
    def distance(self) -> int:
        """Return the number of tracks crossed."""
        return abs(self.end - self.start)


@dataclass(frozen=True)
class MovementReport:
    """The result of servicing a batch of requests.

    Attributes:
        tracks: The requests, in the order they were serviced.
        initial_head: Where the head started.
        seeks: Each individual move, in order.
        total: Sum of all seek distances.
        average: ``total`` divided by the number of requests.

    """

    tracks: tuple[int, ...]
    initial_head: int
    seeks: tuple[Seek, ...]
    total: int
    average: float


def seek_path(tracks: Sequence[int], *, head: int) -> list[Seek]:
    """Return the moves the head makes visiting *tracks* in order."""
    seeks: list[Seek] = []
    current = head
    for track in tracks:
        seeks.append(Seek(start=current, end=track))
        current = track
    return seeks


def total_head_movement(tracks: Sequence[int], *, head: int) -> int:
    """Return the total distance travelled visiting *tracks* in order.

    Args:
        tracks: Track numbers in service order.
        head: Starting head position.

    Returns:
        The sum of absolute differences between successive positions
        (zero for an empty sequence).

    """
    total = 0
    current = head
    for track in tracks:
        total += abs(current - track)
        current = track
    return total


def average_head_movement(tracks: Sequence[int], *, head: int) -> float:
    """Return the mean distance travelled per request.

    Raises:
        EmptyRequestsError: If *tracks* is empty.

    """
    if not tracks:
        msg = "Cannot compute average of zero requests"
        raise EmptyRequestsError(msg)
    return total_head_movement(tracks, head=head) / len(tracks)


def compute(
    tracks: Sequence[int],
    *,
    head: int,
    logger: Logger | None = None,
) -> MovementReport:
    """Service *tracks* first come, first served and measure the movement.

    The requests are queued on a ``DiskScheduler`` with an FCFS policy,
    so the order measured is exactly the order the scheduler produces.

    Args:
        tracks: Track requests in arrival order.
        head: Starting head position.
        logger: Optional log buffer; receives one DEBUG entry per seek
            and an INFO summary.

    Returns:
        A ``MovementReport`` for the batch.

    Raises:
        EmptyRequestsError: If *tracks* is empty.

    """
    if not tracks:
        if logger is not None:
            logger.log(LogLevel.ERROR, "Rejected empty request batch", source=_SOURCE)
        msg = "Cannot compute average of zero requests"
        raise EmptyRequestsError(msg)

    scheduler = DiskScheduler(policy=FCFSPolicy(), head=head)
    for track in tracks:
        scheduler.add_request(track)
    order = scheduler.run()

    seeks = seek_path(order, head=head)
    total = sum(seek.distance for seek in seeks)
    average = average_head_movement(order, head=head)

    if logger is not None:
        for seek in seeks:
            logger.log(
                LogLevel.DEBUG,
                f"Seek {seek.start} -> {seek.end} ({seek.distance} tracks)",
                source=_SOURCE,
            )
        logger.log(
            LogLevel.INFO,
            f"Serviced {len(order)} requests: total={total}, average={average:.2f}",
            source=_SOURCE,
        )

    return MovementReport(
        tracks=tuple(order),
        initial_head=head,
        seeks=tuple(seeks),
        total=total,
        average=average,
    )
