"""Visualizer configuration — the fields a user edits, and their storage.

The configuration is a plain record: cylinder count, arm position,
the request sequence, the sweep direction and the selected algorithm.
It is the only state the application keeps between runs.

Two concerns live here:

- **Validation** — a position outside ``0..cylinder_count`` makes the
  scheduling output meaningless.  ``DiskConfig.validate`` rejects such
  a configuration with ``OutOfRangeError`` and never clamps, so what
  the algorithms see is exactly what the user asked for.
- **Persistence** — ``dump_config`` / ``load_config`` write and read
  JSON.  Missing keys fall back to their defaults, so a state file
  saved by an older version still loads after a field is added.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from disk_viz.disk import Algorithm, Direction

MAX_CYLINDERS = 1000
STATE_ENV_VAR = "DISK_VIZ_STATE"
_DEFAULT_STATE_FILE = ".disk_viz.json"


class OutOfRangeError(ValueError):
    """Raise when a cylinder count, arm position or request is out of range."""


class ConfigError(ValueError):
    """Raise when stored configuration data cannot be understood."""


@dataclass
class DiskConfig:
    """Everything needed to compute a schedule.

    Attributes:
        cylinder_count: Highest valid cylinder (inclusive).
        arm_position: Where the arm is before servicing anything.
        sequence: Requested cylinders in arrival order.
        direction: Current sweep direction.
        algorithm: The selected scheduling algorithm.

    """

    cylinder_count: int = 0
    arm_position: int = 0
    sequence: list[int] = field(default_factory=lambda: [0])
    direction: Direction = Direction.LEFT
    algorithm: Algorithm = Algorithm.SSTF

    def validate(self) -> None:
        """Check every position against the disk size.

        Raises:
            OutOfRangeError: If any field is outside its allowed range.

        """
        if not 0 <= self.cylinder_count <= MAX_CYLINDERS:
            msg = f"cylinder count {self.cylinder_count} is outside 0..{MAX_CYLINDERS}"
            raise OutOfRangeError(msg)
        if not 0 <= self.arm_position <= self.cylinder_count:
            msg = f"arm position {self.arm_position} is outside 0..{self.cylinder_count}"
            raise OutOfRangeError(msg)
        for index, cylinder in enumerate(self.sequence):
            if not 0 <= cylinder <= self.cylinder_count:
                msg = f"request #{index} ({cylinder}) is outside 0..{self.cylinder_count}"
                raise OutOfRangeError(msg)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-ready dictionary."""
        return {
            "cylinder_count": self.cylinder_count,
            "arm_position": self.arm_position,
            "sequence": list(self.sequence),
            "direction": self.direction.value,
            "algorithm": self.algorithm.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DiskConfig:
        """Deserialize from a dictionary produced by ``to_dict()``.

        Keys that are absent take their default values; unknown keys
        are ignored.

        Raises:
            ConfigError: If a present value has the wrong shape.

        """
        if not isinstance(data, dict):
            msg = f"expected a JSON object, got {type(data).__name__}"
            raise ConfigError(msg)
        defaults = cls()
        try:
            sequence = data.get("sequence", defaults.sequence)
            if not isinstance(sequence, list):
                msg = "sequence must be a list"
                raise ConfigError(msg)
            return cls(
                cylinder_count=_as_int(data.get("cylinder_count", defaults.cylinder_count)),
                arm_position=_as_int(data.get("arm_position", defaults.arm_position)),
                sequence=[_as_int(item) for item in sequence],
                direction=Direction(data.get("direction", defaults.direction)),
                algorithm=Algorithm(data.get("algorithm", defaults.algorithm)),
            )
        except ConfigError:
            raise
        except ValueError as e:
            raise ConfigError(str(e)) from e


def _as_int(value: object) -> int:
    """Accept only real integers (``bool`` is not a cylinder)."""
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"expected an integer, got {value!r}"
        raise ConfigError(msg)
    return value


def dump_config(config: DiskConfig, path: Path) -> None:
    """Save a configuration to a JSON file.

    Args:
        config: The configuration to save.
        path: The file path to write to.

    """
    path.write_text(json.dumps(config.to_dict(), indent=2))


def load_config(path: Path) -> DiskConfig:
    """Load a configuration from a JSON file.

    Args:
        path: The file path to read from.

    Returns:
        The stored configuration, with defaults for missing fields.

    Raises:
        FileNotFoundError: If the path does not exist.
        ConfigError: If the file is not valid configuration JSON.

    """
    text = path.read_text()
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        msg = f"{path}: {e}"
        raise ConfigError(msg) from e
    return DiskConfig.from_dict(data)


def default_state_path() -> Path:
    """Return the state file path, honouring ``DISK_VIZ_STATE``."""
    override = os.environ.get(STATE_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / _DEFAULT_STATE_FILE
