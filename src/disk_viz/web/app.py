"""Flask application factory for the disk-viz web UI.

The ``create_app`` function restores a visualizer from the state file
(if any) and returns a Flask app whose routes read and update its
configuration.  Every page load or plot request recomputes the schedule
from the current configuration; nothing is cached between requests.

Validation failures (``ConfigError``, ``OutOfRangeError``) become
``400`` responses with an ``error`` field.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from flask import Flask, Response, jsonify, render_template, request

from disk_viz.config import DiskConfig, default_state_path
from disk_viz.disk import Algorithm
from disk_viz.plot import render_svg
from disk_viz.visualizer import Schedule, Visualizer, compute_schedule

_HTTP_BAD_REQUEST = 400
_CONFIG_FIELDS = ("cylinder_count", "arm_position", "sequence", "direction", "algorithm")


def schedule_to_dict(schedule: Schedule) -> dict[str, Any]:
    """Serialize a schedule for the JSON API."""
    return {
        "algorithm": schedule.algorithm.value,
        "label": schedule.algorithm.label,
        "head": schedule.head,
        "order": schedule.order,
        "path": schedule.path,
        "segments": [
            {
                "from": s.start,
                "to": s.end,
                "classification": s.movement.value,
            }
            for s in schedule.segments
        ],
        "total_seek": schedule.total_seek,
    }


def create_app(*, state_path: Path | None = None, visualizer: Visualizer | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        state_path: JSON file to restore from and save to after each
            update.  Nothing is persisted when omitted.
        visualizer: Use this visualizer instead of restoring one.

    Returns:
        A configured Flask application ready to serve.

    """
    if visualizer is None:
        visualizer = Visualizer.restore(state_path) if state_path is not None else Visualizer()
    viz = visualizer

    app = Flask(__name__)

    def _requested_algorithm() -> Algorithm | None:
        name = request.args.get("algorithm")
        if name is None:
            return None
        return Algorithm(name)

    @app.route("/")
    def index() -> str:  # pyright: ignore[reportUnusedFunction]
        """Render the visualizer page."""
        return render_template(
            "index.html",
            settings=viz.config,
            algorithms=list(Algorithm),
            schedule=viz.redraw(),
        )

    @app.route("/api/config", methods=["GET"])
    def get_config() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return the current configuration."""
        return jsonify(viz.config.to_dict())

    @app.route("/api/config", methods=["POST"])
    def update_config() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Update any subset of the configuration fields.

        Expects a JSON object such as ``{"arm_position": 50}``.

        Returns:
            The new configuration, or ``400`` with an ``error`` field.

        """
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Expected a JSON object"}), _HTTP_BAD_REQUEST
        changes = {key: data[key] for key in _CONFIG_FIELDS if key in data}
        if not changes:
            return jsonify({"error": "No configuration fields given"}), _HTTP_BAD_REQUEST

        try:
            parsed = DiskConfig.from_dict(viz.config.to_dict() | changes)
            viz.update(**{key: getattr(parsed, key) for key in changes})
        except ValueError as e:
            return jsonify({"error": str(e)}), _HTTP_BAD_REQUEST

        if state_path is not None:
            viz.save(state_path)
        return jsonify(viz.config.to_dict())

    @app.route("/api/schedule")
    def schedule() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Return the schedule for the selected (or requested) algorithm."""
        try:
            algorithm = _requested_algorithm()
        except ValueError:
            return jsonify({"error": "Unknown algorithm"}), _HTTP_BAD_REQUEST
        return jsonify(schedule_to_dict(viz.redraw(algorithm)))

    @app.route("/api/compare")
    def compare() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return the total seek distance under every algorithm."""
        return jsonify({a.value: s.total_seek for a, s in viz.compare().items()})

    @app.route("/plot.svg")
    def plot() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Return the head-movement plot as SVG."""
        try:
            algorithm = _requested_algorithm()
        except ValueError:
            return jsonify({"error": "Unknown algorithm"}), _HTTP_BAD_REQUEST
        config = viz.config
        svg = render_svg(compute_schedule(config, algorithm), cylinder_count=config.cylinder_count)
        return Response(svg, mimetype="image/svg+xml")

    return app


def main() -> None:
    """Run the web UI development server.

    This is the ``disk-viz-web`` console entry point.
    """
    app = create_app(state_path=default_state_path())
    app.run(debug=True, port=8080)
