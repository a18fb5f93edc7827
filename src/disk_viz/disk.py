"""Disk scheduling algorithms — ordering requests to move the arm.

When several requests wait for the disk, the arm has to travel between
cylinders to service them.  The dominant cost is **seek distance**:
how far the arm moves in total.  A scheduling algorithm decides the
*order* in which the pending requests are visited.

Think of the disk arm as an elevator in a building:
    - **SSTF** — serve floors in order of how close they are to where
      the elevator started.
    - **SCAN** — ride to the end of the shaft, then turn around.
    - **C-SCAN** — ride to the end, drop to the opposite end, and keep
      riding in the original direction.
    - **C-LOOK** — like C-SCAN, but only go as far as the last waiting
      passenger instead of the end of the shaft.

Every algorithm is a pure function of ``(requests, head, ...)`` — no
state, no I/O, inputs are never mutated.  The ``DiskPolicy`` classes
wrap them in the Strategy pattern so a caller can swap algorithms
without caring about their extra parameters.

SCAN and C-SCAN visit the physical edge of the disk even when no
request lives there.  Those synthetic visits (cylinder ``0`` and the
highest cylinder) appear in the output so that plotting and seek
accounting see the full sweep.  An empty request list always gives an
empty visit order: with nothing to service, the arm does not sweep.
"""

from collections.abc import Sequence
from enum import StrEnum
from typing import Protocol


class Direction(StrEnum):
    """The way the arm is currently travelling.

    - LEFT  — toward cylinder 0.
    - RIGHT — toward the highest cylinder.
    """

    LEFT = "left"
    RIGHT = "right"


def closeness_order(requests: Sequence[int], head: int) -> list[int]:
    """Return requests ordered by distance from the starting head.

    This is a one-shot sort on ``|x - head|``; ``sorted`` is stable, so
    two requests at the same distance keep their input order.  With
    ``head=50`` the requests ``[60, 40]`` come back as ``[60, 40]`` and
    ``[40, 60]`` as ``[40, 60]``.

    Args:
        requests: Cylinder numbers in arrival order.
        head: Current arm position.

    Returns:
        A new list, nearest request first.

    """
    return sorted(requests, key=lambda cylinder: abs(cylinder - head))


def _sweep(
    requests: Sequence[int],
    head: int,
    *,
    direction: Direction,
    wrap: bool,
    edges: Sequence[int] = (),
) -> list[int]:
    """Partition around the head, sort both halves, and join them.

    The half the arm is moving toward is always visited first, sorted
    in the direction of travel.  The other half is sorted the same way
    when ``wrap`` is set (the arm jumps and keeps going) and the
    opposite way otherwise (the arm reverses).  ``edges`` are boundary
    cylinders placed between the halves unless already requested.
    With no requests the arm stays put and no edge is visited.
    """
    if not requests:
        return []

    left =[r for r in requests if r < head]
    right = [r for r in requests if r >= head]

    if direction is Direction.LEFT:
        first = sorted(left, reverse=True)
        rest = right
    else:
        first = sorted(right)
        rest = left
    rest = sorted(rest, reverse=(direction is Direction.LEFT) == wrap)

    injected: list[int] = []
    for edge in edges:
        if edge not in requests and edge not in injected:
            injected.append(edge)
    return first + injected + rest


def scan(
    requests: Sequence[int],
    head: int,
    direction: Direction,
    cylinder_count: int,
) -> list[int]:
    """Return requests in SCAN (elevator) order.

    The arm sweeps toward ``direction``, touches the edge of the disk,
    then reverses and services everything on the other side.

    Args:
        requests: Cylinder numbers in arrival order.
        head: Current arm position.
        direction: Initial sweep direction.
        cylinder_count: Highest cylinder on the disk.

    Returns:
        The visit order, including the edge cylinder when it was not
        itself requested.

    """
    edge = 0 if direction is Direction.LEFT else cylinder_count
    return _sweep(requests, head, direction=direction, wrap=False, edges=(edge,))


def cscan(
    requests: Sequence[int],
    head: int,
    direction: Direction,
    cylinder_count: int,
) -> list[int]:
    """Return requests in circular SCAN order.

    The arm sweeps to the near edge, jumps to the far edge and resumes
    in the same direction.  Both edges appear back to back in the
    output, and the jump between them is charged as ordinary seek
    distance.

    Args:
        requests: Cylinder numbers in arrival order.
        head: Current arm position.
        direction: Sweep direction.
        cylinder_count: Highest cylinder on the disk.

    Returns:
        The visit order, including whichever edges were not requested.

    """
    if direction is Direction.LEFT:
        edges = (0, cylinder_count)
    else:
        edges = (cylinder_count, 0)
    return _sweep(requests, head, direction=direction, wrap=True, edges=edges)


def clook(requests: Sequence[int], head: int, direction: Direction) -> list[int]:
    """Return requests in circular LOOK order.

    Same shape as C-SCAN, but the arm never travels to an edge that
    nobody asked for, so the result is an exact permutation of
    ``requests``.
    """
    return _sweep(requests, head, direction=direction, wrap=True)


class DiskPolicy(Protocol):
    """Protocol for disk scheduling policies (Strategy pattern)."""

    def schedule(self, requests: list[int], *, head: int) -> list[int]:
        """Return the order in which requests should be serviced.

        Args:
            requests: List of cylinder numbers to visit.
            head: Current position of the disk head.

        Returns:
            Ordered list of cylinder numbers.

        """
        ...


class SSTFPolicy:
    """Shortest Seek Time First — nearest to the starting head first."""

    def schedule(self, requests: list[int], *, head: int) -> list[int]:
        """Return requests ordered by closeness to the head."""
        return closeness_order(requests, head)


class SCANPolicy:
    """SCAN (elevator) — sweep to the edge, then reverse.

    Args:
        direction: Initial sweep direction.
        cylinder_count: Highest cylinder number on the disk.

    """

    def __init__(self, *, direction: Direction = Direction.LEFT, cylinder_count: int = 199) -> None:
        """Create a SCAN policy with an initial direction."""
        self._direction = direction
        self._cylinder_count = cylinder_count

    def schedule(self, requests: list[int], *, head: int) -> list[int]:
        """Return requests in SCAN order."""
        return scan(requests, head, self._direction, self._cylinder_count)


class CSCANPolicy:
    """Circular SCAN — sweep to the edge, jump to the other edge, continue.

    Args:
        direction: Sweep direction.
        cylinder_count: Highest cylinder number on the disk.

    """

    def __init__(self, *, direction: Direction = Direction.LEFT, cylinder_count: int = 199) -> None:
        """Create a C-SCAN policy with a sweep direction."""
        self._direction = direction
        self._cylinder_count = cylinder_count

    def schedule(self, requests: list[int], *, head: int) -> list[int]:
        """Return requests in C-SCAN order."""
        return cscan(requests, head, self._direction, self._cylinder_count)


class CLOOKPolicy:
    """Circular LOOK — C-SCAN without the trips to the disk edges."""

    def __init__(self, *, direction: Direction = Direction.LEFT) -> None:
        """Create a C-LOOK policy with a sweep direction."""
        self._direction = direction

    def schedule(self, requests: list[int], *, head: int) -> list[int]:
        """Return requests in C-LOOK order."""
        return clook(requests, head, self._direction)


class Algorithm(StrEnum):
    """The four selectable algorithms.

    Switching the selection only changes which ordering function runs;
    it carries no other state.
    """

    SSTF = "sstf"
    SCAN = "scan"
    CSCAN = "cscan"
    CLOOK = "clook"

    @property
    def label(self) -> str:
        """Return the human-readable name shown in front-ends."""
        return _LABELS[self]

    def policy(self, *, direction: Direction, cylinder_count: int) -> DiskPolicy:
        """Build the policy object for this algorithm.

        Args:
            direction: Sweep direction (ignored by SSTF).
            cylinder_count: Highest cylinder (used by SCAN and C-SCAN).

        Returns:
            A ``DiskPolicy`` ready to schedule requests.

        """
        match self:
            case Algorithm.SSTF:
                return SSTFPolicy()
            case Algorithm.SCAN:
                return SCANPolicy(direction=direction, cylinder_count=cylinder_count)
            case Algorithm.CSCAN:
                return CSCANPolicy(direction=direction, cylinder_count=cylinder_count)
            case Algorithm.CLOOK:
                return CLOOKPolicy(direction=direction)


_LABELS = {
    Algorithm.SSTF: "Shortest Seek Time First",
    Algorithm.SCAN: "Scan",
    Algorithm.CSCAN: "Circular Scan",
    Algorithm.CLOOK: "Circular Look",
}
