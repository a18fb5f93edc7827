"""Seek accounting — how far the arm travels, and which way.

Once an algorithm has produced a visit order, two questions remain for
the renderer:

- **How much did it cost?**  ``total_seek`` walks the path
  ``[start] + order`` and adds up every hop.
- **Which way did each hop go?**  ``classify`` labels a single hop so
  the plot can draw the arrowhead pointing the right way;
  ``segments`` applies it along the whole path.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum


class Movement(StrEnum):
    """Direction of a single arm movement, as annotated on the plot."""

    LEFT = "left"
    RIGHT = "right"
    STATIONARY = "stationary"


@dataclass(frozen=True)
class Segment:
    """One hop of the arm between two consecutive path points.

    Attributes:
        step: Position of the hop in the path (0 = leaving the start).
        start: Cylinder the hop leaves from.
        end: Cylinder the hop arrives at.
        movement: Classification of the hop.

    """

    step: int
    start: int
    end: int
    movement: Movement

    @property
    def distance(self) -> int:
        """Return the number of cylinders crossed by this hop."""
        return abs(self.end - self.start)


def total_seek(visit_order: Sequence[int], start: int) -> int:
    """Return the total seek distance for a visit order.

    Args:
        visit_order: Cylinders in the order they are serviced.
        start: Arm position before the first visit.

    Returns:
        Sum of absolute differences along ``[start] + visit_order``;
        0 when nothing is visited.

    """
    total = 0
    current = start
    for cylinder in visit_order:
        total += abs(cylinder - current)
        current = cylinder
    return total


def classify(prev: int, cur: int) -> Movement:
    """Classify the hop from ``prev`` to ``cur``.

    Equality is tested first, so only a strictly positive delta is
    ``RIGHT``; everything else that moves is ``LEFT``.
    """
    if cur == prev:
        return Movement.STATIONARY
    if cur - prev <= 0:
        return Movement.LEFT
    return Movement.RIGHT


def segments(visit_order: Sequence[int], start: int) -> list[Segment]:
    """Split the path ``[start] + visit_order`` into classified hops."""
    result: list[Segment] = []
    current = start
    for step, cylinder in enumerate(visit_order):
        result.append(Segment(step, current, cylinder, classify(current, cylinder)))
        current = cylinder
    return result
