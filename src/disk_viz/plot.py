"""Head-movement plot — the picture the visualizer is named for.

The arm's path is drawn top to bottom: the x axis is the cylinder and
every hop moves one step down the y axis (``-5`` per step, so the
first hop runs from ``y=0`` to ``y=-5``).  The end of each hop carries
a marker pointing the way the arm moved, chosen by ``classify``:

    - ``<`` for a move toward cylinder 0,
    - ``>`` for a move toward the high end,
    - a dot when the arm stayed put.

Figures are built with ``matplotlib.figure.Figure`` directly rather
than ``pyplot`` so no global figure state or GUI backend is involved;
this keeps rendering safe inside the web server.
"""

import io

from matplotlib.figure import Figure

from disk_viz.seek import Movement
from disk_viz.visualizer import Schedule

STEP_HEIGHT = 5.0

_MARKERS = {
    Movement.LEFT: "<",
    Movement.RIGHT: ">",
    Movement.STATIONARY: "o",
}

_LINE_COLOR = "#1f77b4"
_START_COLOR = "#d62728"


def build_figure(schedule: Schedule, *, cylinder_count: int) -> Figure:
    """Draw a schedule's head movement.

    Args:
        schedule: The schedule to draw.
        cylinder_count: Highest cylinder, used for the x axis range.

    Returns:
        A matplotlib figure with one line per hop.

    """
    fig = Figure(figsize=(8, 5), dpi=100)
    ax = fig.add_subplot(111)

    ax.plot([schedule.head], [0.0], marker="s", color=_START_COLOR, linestyle="none")
    for segment in schedule.segments:
        y_from = -STEP_HEIGHT * segment.step
        y_to = y_from - STEP_HEIGHT
        ax.plot([segment.start, segment.end], [y_from, y_to], color=_LINE_COLOR)
        ax.plot(
            [segment.end],
            [y_to],
            marker=_MARKERS[segment.movement],
            color=_LINE_COLOR,
            linestyle="none",
        )
        ax.annotate(
            str(segment.end),
            (segment.end, y_to),
            textcoords="offset points",
            xytext=(6, -2),
            fontsize=8,
        )

    ax.set_xlim(-1, max(cylinder_count, *schedule.path) + 1)
    ax.set_xlabel("Cylinder")
    ax.set_yticks([])
    ax.xaxis.set_ticks_position("top")
    ax.xaxis.set_label_position("top")
    ax.grid(axis="x", linestyle=":", alpha=0.5)
    ax.set_title(
        f"{schedule.algorithm.label}: total seek {schedule.total_seek}",
        pad=24,
    )
    fig.tight_layout()
    return fig


def render_svg(schedule: Schedule, *, cylinder_count: int) -> str:
    """Render the plot as an SVG document."""
    buf = io.StringIO()
    build_figure(schedule, cylinder_count=cylinder_count).savefig(buf, format="svg")
    return buf.getvalue()


def render_png(schedule: Schedule, *, cylinder_count: int, dpi: int = 160) -> bytes:
    """Render the plot as PNG bytes."""
    buf = io.BytesIO()
    build_figure(schedule, cylinder_count=cylinder_count).savefig(
        buf, format="png", dpi=dpi, bbox_inches="tight"
    )
    return buf.getvalue()
