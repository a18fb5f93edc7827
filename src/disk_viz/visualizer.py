"""The visualizer — configuration in, schedule out.

``Visualizer`` is what the front-ends (shell, web) talk to.  It owns
the current ``DiskConfig`` and an event ``Logger``, and turns the
configuration into a ``Schedule`` whenever a front-end needs to draw.

Nothing is cached: every ``redraw()`` runs the selected algorithm from
scratch on the current configuration.  The inputs are small (at most
``MAX_CYLINDERS`` cylinders) so recomputation is cheap, and it means a
schedule can never be stale.

Every setter builds a candidate configuration, validates it, and only
then commits it.  A rejected update raises ``OutOfRangeError`` and
leaves the previous configuration untouched.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from pathlib import Path

from disk_viz.config import DiskConfig, dump_config, load_config
from disk_viz.disk import Algorithm, Direction
from disk_viz.logging import Logger
from disk_viz.seek import Segment, segments, total_seek


@dataclass(frozen=True)
class Schedule:
    """The result of running one algorithm on one configuration.

    Attributes:
        algorithm: Which algorithm produced the order.
        head: Arm position before the first visit.
        order: Cylinders in visit order (may include disk edges).
        segments: Classified hops along ``[head] + order``.
        total_seek: Total cylinders travelled.

    """

    algorithm: Algorithm
    head: int
    order: list[int]
    segments: list[Segment]
    total_seek: int

    @property
    def path(self) -> list[int]:
        """Return every point the arm passes through, starting at the head."""
        return [self.head, *self.order]


def compute_schedule(config: DiskConfig, algorithm: Algorithm | None = None) -> Schedule:
    """Run an algorithm on a configuration.

    Args:
        config: The disk configuration to schedule.
        algorithm: Override the configured algorithm.

    Returns:
        The resulting schedule.

    """
    chosen = algorithm if algorithm is not None else config.algorithm
    policy = chosen.policy(direction=config.direction, cylinder_count=config.cylinder_count)
    head = config.arm_position
    order = policy.schedule(config.sequence, head=head)
    return Schedule(
        algorithm=chosen,
        head=head,
        order=order,
        segments=segments(order, head),
        total_seek=total_seek(order, head),
    )


class Visualizer:
    """Holds the user's configuration and produces schedules from it."""

    def __init__(self, config: DiskConfig | None = None, *, logger: Logger | None = None) -> None:
        """Create a visualizer.

        Args:
            config: Starting configuration (defaults when omitted).
            logger: Event log to write to (a fresh one when omitted).

        Raises:
            OutOfRangeError: If the starting configuration is invalid.

        """
        self._config = config if config is not None else DiskConfig()
        self._config.validate()
        self._logger = logger if logger is not None else Logger()

    @property
    def config(self) -> DiskConfig:
        """Return a copy of the current configuration."""
        return dataclasses.replace(self._config, sequence=list(self._config.sequence))

    @property
    def logger(self) -> Logger:
        """Return the event log."""
        return self._logger

    # -- Configuration -------------------------------------------------------

    def update(self, **changes: object) -> DiskConfig:
        """Apply several field changes at once, all or nothing.

        Args:
            **changes: ``DiskConfig`` field names mapped to new values.

        Returns:
            The new configuration.

        Raises:
            OutOfRangeError: If the result would be out of range.
            TypeError: If a field name is unknown.

        """
        candidate = dataclasses.replace(self.config, **changes)  # type: ignore[arg-type]
        try:
            candidate.validate()
        except ValueError as e:
            self._logger.warning(f"rejected {_describe(changes)}: {e}", source="config")
            raise
        self._config = candidate
        self._logger.info(f"set {_describe(changes)}", source="config")
        return self.config

    def set_cylinder_count(self, count: int) -> None:
        """Change the highest cylinder on the disk."""
        self.update(cylinder_count=count)

    def set_arm_position(self, position: int) -> None:
        """Move the arm's starting position."""
        self.update(arm_position=position)

    def set_direction(self, direction: Direction) -> None:
        """Change the sweep direction."""
        self.update(direction=direction)

    def select(self, algorithm: Algorithm) -> None:
        """Select the algorithm used by ``redraw()``."""
        self.update(algorithm=algorithm)

    def add_request(self, cylinder: int) -> None:
        """Append a request to the sequence."""
        self.update(sequence=[*self._config.sequence, cylinder])

    def remove_request(self) -> int | None:
        """Remove the most recently added request.

        Returns:
            The removed cylinder, or None if the sequence was empty.

        """
        if not self._config.sequence:
            return None
        removed = self._config.sequence[-1]
        self.update(sequence=self._config.sequence[:-1])
        return removed

    def set_request(self, index: int, cylinder: int) -> None:
        """Replace the request at ``index``.

        Raises:
            IndexError: If there is no request at ``index``.
            OutOfRangeError: If ``cylinder`` is outside the disk.

        """
        sequence = list(self._config.sequence)
        if not 0 <= index < len(sequence):
            msg = f"no request at index {index}"
            raise IndexError(msg)
        sequence[index] = cylinder
        self.update(sequence=sequence)

    def clear_requests(self) -> None:
        """Remove every request."""
        self.update(sequence=[])

    # -- Scheduling ----------------------------------------------------------

    def redraw(self, algorithm: Algorithm | None = None) -> Schedule:
        """Compute a fresh schedule from the current configuration."""
        schedule = compute_schedule(self._config, algorithm)
        self._logger.debug(
            f"{schedule.algorithm.label}: {schedule.order} (seek {schedule.total_seek})",
            source="scheduler",
        )
        return schedule

    def compare(self) -> dict[Algorithm, Schedule]:
        """Run every algorithm on the current configuration."""
        return {algorithm: self.redraw(algorithm) for algorithm in Algorithm}

    # -- Storage -------------------------------------------------------------

    def save(self, path: Path) -> None:
        """Write the current configuration to ``path``."""
        dump_config(self._config, path)
        self._logger.info(f"saved state to {path}", source="storage")

    def load(self, path: Path) -> None:
        """Replace the configuration with the one stored at ``path``.

        Raises:
            FileNotFoundError: If the path does not exist.
            ConfigError: If the file cannot be parsed.
            OutOfRangeError: If the stored values are out of range.

        """
        config = load_config(path)
        config.validate()
        self._config = config
        self._logger.info(f"loaded state from {path}", source="storage")

    @classmethod
    def restore(cls, path: Path, *, logger: Logger | None = None) -> Visualizer:
        """Create a visualizer from saved state, or with defaults.

        A missing, unreadable or out-of-range state file is not fatal:
        the visualizer starts from the default configuration and the
        problem is logged as a warning.
        """
        visualizer = cls(logger=logger)
        try:
            visualizer.load(path)
        except FileNotFoundError:
            visualizer.logger.info(f"no saved state at {path}, using defaults", source="storage")
        except (OSError, ValueError) as e:
            visualizer.logger.warning(f"ignoring saved state at {path}: {e}", source="storage")
        return visualizer


def _describe(changes: dict[str, object]) -> str:
    """Render field changes as ``name=value`` pairs for the log."""
    return ", ".join(f"{name}={value}" for name, value in changes.items())
