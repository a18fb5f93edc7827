"""Interactive REPL (Read-Eval-Print Loop) for the visualizer.

The REPL restores the saved configuration, creates a shell, and runs
the classic loop:

    1. **Read** — display a prompt and read user input.
    2. **Eval** — pass the command to ``shell.execute()``.
    3. **Print** — display the result.
    4. **Loop** — repeat until the shell returns the exit sentinel.

On the way out the configuration is written back to the state file,
so the next session starts where this one stopped.

The helper functions (``build_prompt``, ``format_banner``) are pure
and testable.  ``run()`` is the I/O entrypoint.
"""

import readline  # noqa: F401  (line editing and history for input())
from pathlib import Path

from disk_viz.config import default_state_path
from disk_viz.shell import Shell
from disk_viz.visualizer import Visualizer

_BANNER_WIDTH = 38


def format_banner(state_path: Path) -> str:
    """Format the start-up banner.

    Args:
        state_path: Where the configuration is loaded from and saved to.

    Returns:
        A formatted string suitable for printing to the console.

    """
    border = "=" * _BANNER_WIDTH
    header = f"\n  {border}\n           disk-viz v0.1.0\n   Disk scheduling visualizer\n  {border}\n\n"
    body = f"  State file: {state_path}\n"
    footer = "\nType 'help' for commands, 'exit' to quit.\n"
    return header + body + footer


def build_prompt(visualizer: Visualizer) -> str:
    """Build the prompt showing the selected algorithm and direction.

    Returns:
        A prompt string like ``sstf/left $ ``.

    """
    config = visualizer.config
    return f"{config.algorithm}/{config.direction} $ "


def run() -> None:
    """Restore state and run the interactive REPL.

    This is the ``disk-viz`` console entry point.  It handles Ctrl+C
    and Ctrl+D as a normal exit and always saves state before leaving.
    """
    state_path = default_state_path()
    visualizer = Visualizer.restore(state_path)
    shell = Shell(visualizer=visualizer, state_path=state_path)

    print(format_banner(state_path))  # noqa: T201

    try:
        while True:
            try:
                command = input(build_prompt(visualizer))
            except EOFError:
                # Ctrl+D — graceful exit
                print()  # noqa: T201
                break

            result = shell.execute(command)
            if result == Shell.EXIT_SENTINEL:
                break
            if result:
                print(result)  # noqa: T201

    except KeyboardInterrupt:
        # Ctrl+C — graceful exit
        print("\nInterrupted.")  # noqa: T201

    finally:
        try:
            visualizer.save(state_path)
        except OSError as e:
            print(f"Could not save state: {e}")  # noqa: T201
        else:
            print(f"State saved to {state_path}.")  # noqa: T201
