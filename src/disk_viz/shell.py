"""The shell — command interpreter for the visualizer.

The shell reads a command string, splits it into a command name and
arguments, dispatches to a handler, and returns a string result.  It
never prints; the REPL decides how output is shown, which keeps every
command testable.

Commands mirror the controls on the web page:

- ``cylinders``, ``arm`` — the two disk settings.
- ``add``, ``remove``, ``set``, ``clear`` — the request sequence.
- ``direction``, ``algorithm`` — sweep direction and algorithm tabs.
- ``run``, ``compare``, ``plot`` — draw (as text or to a file).
- ``save``, ``load`` — state persistence.
- ``log`` — the newest entries of the event log.

Errors from the visualizer (``OutOfRangeError`` and friends) are
turned into ``Error: ...`` strings at this boundary.
"""

from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

from disk_viz.disk import Algorithm, Direction
from disk_viz.plot import render_png, render_svg
from disk_viz.seek import Movement
from disk_viz.visualizer import Schedule, Visualizer

# Type alias for a command handler: takes a list of args, returns output.
_Handler: TypeAlias = Callable[[list[str]], str]

_DEFAULT_LOG_LINES = 20

_ARROWS = {Movement.LEFT: "<-", Movement.RIGHT: "->", Movement.STATIONARY: "=="}


def format_schedule(schedule: Schedule) -> str:
    """Render a schedule as a short text report.

    Args:
        schedule: The schedule to describe.

    Returns:
        The algorithm, the visit order, one line per hop, and the total.

    """
    lines = [
        f"{schedule.algorithm.label} ({schedule.algorithm})",
        "Order: " + (" ".join(str(c) for c in schedule.order) or "(empty)"),
    ]
    lines.extend(
        f"  {s.step + 1:>3}. {s.start:>4} {_ARROWS[s.movement]} {s.end:<4} ({s.distance})"
        for s in schedule.segments
    )
    lines.append(f"Total seek distance: {schedule.total_seek}")
    return "\n".join(lines)


class Shell:
    """Command interpreter that operates on a visualizer.

    Args:
        visualizer: The visualizer to drive.
        state_path: Default file for ``save`` and ``load``.

    """

    EXIT_SENTINEL = "__EXIT__"

    def __init__(self, *, visualizer: Visualizer, state_path: Path | None = None) -> None:
        """Create a shell attached to a visualizer."""
        self._visualizer = visualizer
        self._state_path = state_path

        # Command dispatch table — maps command names to handler methods.
        self._commands: dict[str, _Handler] = {
            "help": self._cmd_help,
            "show": self._cmd_show,
            "cylinders": self._cmd_cylinders,
            "arm": self._cmd_arm,
            "add": self._cmd_add,
            "remove": self._cmd_remove,
            "set": self._cmd_set,
            "clear": self._cmd_clear,
            "direction": self._cmd_direction,
            "algorithm": self._cmd_algorithm,
            "run": self._cmd_run,
            "compare": self._cmd_compare,
            "plot": self._cmd_plot,
            "save": self._cmd_save,
            "load": self._cmd_load,
            "log": self._cmd_log,
            "exit": self._cmd_exit,
        }

    @property
    def visualizer(self) -> Visualizer:
        """Return the visualizer this shell drives."""
        return self._visualizer

    @property
    def command_names(self) -> list[str]:
        """Return the sorted list of command names."""
        return sorted(self._commands)

    def execute(self, command: str) -> str:
        """Parse and execute a single command.

        Args:
            command: The raw command string (e.g. "add 82 170").

        Returns:
            The command output, or an error message.

        """
        parts = command.split()
        if not parts:
            return ""
        name, args = parts[0], parts[1:]
        handler = self._commands.get(name)
        if handler is None:
            return f"Unknown command: {name}"
        return handler(args)

    # -- Command handlers ------------------------------------------------

    def _cmd_help(self, _args: list[str]) -> str:
        """List available commands."""
        return "Available commands: " + ", ".join(self.command_names)

    def _cmd_show(self, _args: list[str]) -> str:
        """Show the current configuration."""
        config = self._visualizer.config
        sequence = " ".join(str(c) for c in config.sequence) or "(empty)"
        return "\n".join(
            [
                f"Cylinders:  {config.cylinder_count}",
                f"Arm:        {config.arm_position}",
                f"Sequence:   {sequence}",
                f"Direction:  {config.direction}",
                f"Algorithm:  {config.algorithm.label} ({config.algorithm})",
            ]
        )

    def _cmd_cylinders(self, args: list[str]) -> str:
        """Set the highest cylinder."""
        if len(args) != 1:
            return "Usage: cylinders <count>"
        return self._apply_int(args[0], self._visualizer.set_cylinder_count)

    def _cmd_arm(self, args: list[str]) -> str:
        """Set the arm position."""
        if len(args) != 1:
            return "Usage: arm <cylinder>"
        return self._apply_int(args[0], self._visualizer.set_arm_position)

    def _cmd_add(self, args: list[str]) -> str:
        """Append one or more requests."""
        if not args:
            return "Usage: add <cylinder> [cylinder ...]"
        try:
            cylinders = [int(arg) for arg in args]
        except ValueError:
            return f"Error: invalid cylinder in '{' '.join(args)}'"
        try:
            self._visualizer.update(sequence=[*self._visualizer.config.sequence, *cylinders])
        except ValueError as e:
            return f"Error: {e}"
        return ""

    def _cmd_remove(self, _args: list[str]) -> str:
        """Remove the last request."""
        removed = self._visualizer.remove_request()
        if removed is None:
            return "Error: sequence is empty"
        return f"Removed {removed}"

    def _cmd_set(self, args: list[str]) -> str:
        """Replace the request at an index."""
        if len(args) != 2:  # noqa: PLR2004
            return "Usage: set <index> <cylinder>"
        try:
            index, cylinder = int(args[0]), int(args[1])
        except ValueError:
            return f"Error: invalid arguments '{' '.join(args)}'"
        try:
            self._visualizer.set_request(index, cylinder)
        except (IndexError, ValueError) as e:
            return f"Error: {e}"
        return ""

    def _cmd_clear(self, _args: list[str]) -> str:
        """Remove every request."""
        self._visualizer.clear_requests()
        return ""

    def _cmd_direction(self, args: list[str]) -> str:
        """Show or set the sweep direction."""
        if not args:
            return f"Direction: {self._visualizer.config.direction}"
        try:
            direction = Direction(args[0].lower())
        except ValueError:
            return f"Error: unknown direction '{args[0]}'. Use left or right."
        self._visualizer.set_direction(direction)
        return ""

    def _cmd_algorithm(self, args: list[str]) -> str:
        """Show or switch the selected algorithm."""
        if not args:
            algorithm = self._visualizer.config.algorithm
            return f"Current algorithm: {algorithm.label}"
        algorithm = _parse_algorithm(args[0])
        if algorithm is None:
            return f"Error: unknown algorithm '{args[0]}'. Use sstf, scan, cscan, or clook."
        self._visualizer.select(algorithm)
        return f"Algorithm set to {algorithm.label}"

    def _cmd_run(self, args: list[str]) -> str:
        """Schedule the sequence and describe the head movement."""
        algorithm = None
        if args:
            algorithm = _parse_algorithm(args[0])
            if algorithm is None:
                return f"Error: unknown algorithm '{args[0]}'"
        return format_schedule(self._visualizer.redraw(algorithm))

    def _cmd_compare(self, _args: list[str]) -> str:
        """Show the total seek distance under every algorithm."""
        lines = ["ALGORITHM                  SEEK"]
        lines.extend(
            f"{algorithm.label:<26} {schedule.total_seek}"
            for algorithm, schedule in self._visualizer.compare().items()
        )
        return "\n".join(lines)

    def _cmd_plot(self, args: list[str]) -> str:
        """Write the head-movement plot to an SVG or PNG file."""
        if not args:
            return "Usage: plot <file.svg|file.png> [algorithm]"
        path = Path(args[0])
        algorithm = None
        if len(args) > 1:
            algorithm = _parse_algorithm(args[1])
            if algorithm is None:
                return f"Error: unknown algorithm '{args[1]}'"
        schedule = self._visualizer.redraw(algorithm)
        cylinder_count = self._visualizer.config.cylinder_count
        try:
            if path.suffix.lower() == ".png":
                path.write_bytes(render_png(schedule, cylinder_count=cylinder_count))
            else:
                path.write_text(render_svg(schedule, cylinder_count=cylinder_count))
        except OSError as e:
            return f"Error: {e}"
        return f"Plot written to {path}"

    def _cmd_save(self, args: list[str]) -> str:
        """Save the configuration."""
        path = self._resolve_path(args)
        if path is None:
            return "Usage: save <file>"
        try:
            self._visualizer.save(path)
        except OSError as e:
            return f"Error: {e}"
        return f"Saved to {path}"

    def _cmd_load(self, args: list[str]) -> str:
        """Load a saved configuration."""
        path = self._resolve_path(args)
        if path is None:
            return "Usage: load <file>"
        try:
            self._visualizer.load(path)
        except FileNotFoundError:
            return f"Error: {path} not found"
        except (ValueError, OSError) as e:
            return f"Error: {e}"
        return f"Loaded {path}"

    def _cmd_log(self, args: list[str]) -> str:
        """Show the most recent log entries (``log [count]``)."""
        count = _DEFAULT_LOG_LINES
        if args:
            try:
                count = int(args[0])
            except ValueError:
                return f"Error: invalid number '{args[0]}'"
        entries = self._visualizer.logger.tail(count)
        return "\n".join(str(e) for e in entries) if entries else "No log entries."

    def _cmd_exit(self, _args: list[str]) -> str:
        """Signal the REPL to stop."""
        return self.EXIT_SENTINEL

    # -- Helpers ---------------------------------------------------------

    def _apply_int(self, raw: str, setter: Callable[[int], None]) -> str:
        """Parse ``raw`` as an integer and hand it to ``setter``."""
        try:
            value = int(raw)
        except ValueError:
            return f"Error: invalid number '{raw}'"
        try:
            setter(value)
        except ValueError as e:
            return f"Error: {e}"
        return ""

    def _resolve_path(self, args: list[str]) -> Path | None:
        """Pick the explicit path argument, or the default state file."""
        if args:
            return Path(args[0])
        return self._state_path


def _parse_algorithm(name: str) -> Algorithm | None:
    """Look up an algorithm by name, accepting ``c-scan`` style spellings."""
    try:
        return Algorithm(name.lower().replace("-", ""))
    except ValueError:
        return None
