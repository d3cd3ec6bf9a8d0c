"""The fixed workload the program measures.

There is no user input: the request list and the starting head
position are baked in, the way a textbook exercise states them.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Workload:
    """A batch of track requests and where the head starts.

    Frozen because the workload is immutable for the whole run.
    """

    tracks: tuple[int, ...]
    """Track numbers in arrival order."""

    initial_head: int
    """The head position before any request is serviced."""


DEFAULT_WORKLOAD = Workload(
    tracks=(55, 58, 60, 70, 18, 90, 150, 160, 184),
    initial_head=50,
)
