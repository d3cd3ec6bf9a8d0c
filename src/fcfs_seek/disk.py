"""Disk scheduling — the order in which track requests are serviced.

When processes request disk I/O, the disk arm moves between tracks
(cylinders) to service them.  A scheduling policy decides the *order*.
This package only ever uses one policy:

    - **FCFS** — stop at every track in the order the requests arrived.

Think of an elevator that visits floors in the order the buttons were
pressed, regardless of direction.  Fair (nobody starves), but the arm
zigzags across the disk.

The policy is kept behind the ``DiskPolicy`` protocol (Strategy
pattern) so the scheduler does not care how the order is chosen.
"""

from typing import Protocol


class DiskPolicy(Protocol):
    """Protocol for disk scheduling policies (Strategy pattern)."""

    def schedule(self, requests: list[int], *, head: int) -> list[int]:
        """Return the order in which requests should be serviced.

        Args:
            requests: List of track numbers to visit.
            head: Current position of the disk head.

        Returns:
            Ordered list of track numbers.

        """
        ...


class FCFSPolicy:
    """First Come, First Served — service in arrival order.

    No reordering and no optimisation: the head position is irrelevant
    to the decision.
    """

    def schedule(self, requests: list[int], *, head: int) -> list[int]:  # noqa: ARG002
        """Return requests in their original order."""
        return list(requests)


class DiskScheduler:
    """Disk scheduler — ties a policy to a request queue.

    Requests are queued with ``add_request`` and serviced in one batch
    by ``run``, which also moves the head to the last serviced track.
    """

    def __init__(self, *, policy: DiskPolicy, head: int = 0) -> None:
        """Create a disk scheduler with a policy and initial head position."""
        self._policy = policy
        self._head = head
        self._queue: list[int] = []

    @property
    def head(self) -> int:
        """Return current head position."""
        return self._head

    @property
    def policy(self) -> DiskPolicy:
        """Return the scheduling policy."""
        return self._policy

    @property
    def pending(self) -> list[int]:
        """Return the current request queue."""
        return list(self._queue)

    def add_request(self, track: int) -> None:
        """Add an I/O request for a track."""
        self._queue.append(track)

    def run(self) -> list[int]:
        """Run the scheduling policy on queued requests.

        Returns the service order and updates the head position
        to the last serviced track.  Clears the queue.

        Returns:
            Ordered list of tracks as serviced.

        """
        if not self._queue:
            return []
        order = self._policy.schedule(self._queue, head=self._head)
        if order:
            self._head = order[-1]
        self._queue.clear()
        return order
