"""Tests for the browser-based web UI.

The web UI serves the plot and a JSON API over the visualizer.  Tests
use ``pytest.importorskip`` so they are skipped gracefully when Flask
is not installed.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

flask = pytest.importorskip("flask")

from disk_viz.config import DiskConfig  # noqa: E402
from disk_viz.disk import Algorithm, Direction  # noqa: E402
from disk_viz.visualizer import Schedule, Visualizer  # noqa: E402
from disk_viz.web.app import create_app  # noqa: E402

HTTP_OK = 200
HTTP_BAD_REQUEST = 400


def _create_client(state_path: Path | None = None) -> Any:
    """Create a test client on the 200-cylinder worked example."""
    visualizer = Visualizer(
        DiskConfig(
            cylinder_count=200,
            arm_position=50,
            sequence=[82, 170, 23, 140, 110],
            direction=Direction.LEFT,
        )
    )
    app = create_app(state_path=state_path, visualizer=visualizer)
    app.config["TESTING"] = True
    return app.test_client()


# -- Cycle 1: App creation and index page -----------------------------------


class TestAppCreation:
    """Verify app factory and landing page."""

    def test_create_app_returns_flask(self) -> None:
        """create_app should return a Flask application."""
        assert isinstance(create_app(), flask.Flask)

    def test_index_returns_html(self) -> None:
        """GET / should return the page with the current order."""
        response = _create_client().get("/")
        assert response.status_code == HTTP_OK
        assert "text/html" in response.content_type
        assert b"disk-viz" in response.data
        assert b"23 82 110 140 170" in response.data

    def test_restores_state_file(self, tmp_path: Path) -> None:
        """create_app with only a state path restores from it."""
        path = tmp_path / "state.json"
        path.write_text(json.dumps({"cylinder_count": 9, "arm_position": 4, "sequence": [1]}))
        client = create_app(state_path=path).test_client()
        assert client.get("/api/config").get_json()["cylinder_count"] == 9  # noqa: PLR2004


# -- Cycle 2: Config endpoint -------------------------------------------------


class TestConfigEndpoint:
    """Verify reading and updating the configuration."""

    def test_get_config(self) -> None:
        """GET /api/config returns every field."""
        data = _create_client().get("/api/config").get_json()
        assert data["arm_position"] == 50  # noqa: PLR2004
        assert data["direction"] == "left"
        assert data["algorithm"] == "sstf"

    def test_partial_update(self) -> None:
        """POST /api/config changes only the given fields."""
        client = _create_client()
        response = client.post("/api/config", json={"direction": "right", "algorithm": "clook"})
        assert response.status_code == HTTP_OK
        data = response.get_json()
        assert data["direction"] == "right"
        assert data["algorithm"] == "clook"
        assert data["sequence"] == [82, 170, 23, 140, 110]

    def test_out_of_range(self) -> None:
        """Out-of-range values give 400 and change nothing."""
        client = _create_client()
        response = client.post("/api/config", json={"arm_position": 999})
        assert response.status_code == HTTP_BAD_REQUEST
        assert "arm position" in response.get_json()["error"]
        assert client.get("/api/config").get_json()["arm_position"] == 50  # noqa: PLR2004

    def test_wrong_type(self) -> None:
        """A non-integer cylinder gives 400."""
        response = _create_client().post("/api/config", json={"sequence": ["a"]})
        assert response.status_code == HTTP_BAD_REQUEST

    def test_unknown_algorithm(self) -> None:
        """An unknown algorithm gives 400."""
        response = _create_client().post("/api/config", json={"algorithm": "fcfs"})
        assert response.status_code == HTTP_BAD_REQUEST

    def test_no_json_body(self) -> None:
        """POST without JSON gives 400."""
        response = _create_client().post("/api/config", data="not json")
        assert response.status_code == HTTP_BAD_REQUEST

    def test_no_known_fields(self) -> None:
        """POST with only unknown fields gives 400."""
        response = _create_client().post("/api/config", json={"speed": 3})
        assert response.status_code == HTTP_BAD_REQUEST

    def test_update_persists(self, tmp_path: Path) -> None:
        """With a state path every accepted update is saved."""
        path = tmp_path / "state.json"
        client = _create_client(state_path=path)
        client.post("/api/config", json={"arm_position": 60})
        assert json.loads(path.read_text())["arm_position"] == 60  # noqa: PLR2004


# -- Cycle 3: Schedule endpoints ---------------------------------------------


class TestScheduleEndpoint:
    """Verify the schedule and comparison endpoints."""

    def test_schedule_worked_example(self) -> None:
        """C-LOOK on the worked example."""
        data = _create_client().get("/api/schedule?algorithm=clook").get_json()
        assert data["order"] == [23, 170, 140, 110, 82]
        assert data["path"] == [50, 23, 170, 140, 110, 82]
        assert data["total_seek"] == 262  # noqa: PLR2004
        assert data["label"] == "Circular Look"

    def test_segments(self) -> None:
        """Segments carry from, to and classification."""
        data = _create_client().get("/api/schedule?algorithm=clook").get_json()
        assert data["segments"][0] == {"from": 50, "to": 23, "classification": "left"}
        assert data["segments"][1]["classification"] == "right"

    def test_uses_selected_algorithm(self) -> None:
        """Without a query parameter the selected algorithm runs."""
        client = _create_client()
        client.post("/api/config", json={"algorithm": "scan"})
        data = client.get("/api/schedule").get_json()
        assert data["order"] == [23, 0, 82, 110, 140, 170]

    def test_unknown_algorithm(self) -> None:
        """An unknown algorithm name gives 400."""
        response = _create_client().get("/api/schedule?algorithm=elevator")
        assert response.status_code == HTTP_BAD_REQUEST

    def test_compare(self) -> None:
        """GET /api/compare lists the total for every algorithm."""
        data = _create_client().get("/api/compare").get_json()
        assert set(data) == {"sstf", "scan", "cscan", "clook"}
        assert data["clook"] == 262  # noqa: PLR2004


# -- Cycle 4: Plot -----------------------------------------------------------


class TestPlotEndpoint:
    """Verify the SVG plot endpoint."""

    def test_plot_svg(self) -> None:
        """GET /plot.svg returns an SVG image."""
        response = _create_client().get("/plot.svg?algorithm=cscan")
        assert response.status_code == HTTP_OK
        assert response.mimetype == "image/svg+xml"
        assert b"<svg" in response.data

    def test_plot_unknown_algorithm(self) -> None:
        """An unknown algorithm gives 400."""
        response = _create_client().get("/plot.svg?algorithm=nope")
        assert response.status_code == HTTP_BAD_REQUEST

    def test_plot_uses_one_configuration(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The plotted schedule and the axis come from the same configuration."""

        class _ResizingVisualizer(Visualizer):
            """Grows the disk right after every redraw, like a concurrent update."""

            def redraw(self, algorithm: Algorithm | None = None) -> Schedule:
                """Redraw, then resize the disk."""
                schedule = super().redraw(algorithm)
                self.set_cylinder_count(self.config.cylinder_count + 100)
                return schedule

        rendered: list[tuple[Schedule, int]] = []

        def _capture(schedule: Schedule, *, cylinder_count: int) -> str:
            """Record what would have been rendered."""
            rendered.append((schedule, cylinder_count))
            return "<svg/>"

        monkeypatch.setattr("disk_viz.web.app.render_svg", _capture)
        visualizer = _ResizingVisualizer(
            DiskConfig(cylinder_count=200, arm_position=50, sequence=[82, 23], direction=Direction.RIGHT)
        )
        client = create_app(visualizer=visualizer).test_client()
        assert client.get("/plot.svg?algorithm=scan").status_code == HTTP_OK
        [(schedule, cylinder_count)] = rendered
        assert max(schedule.order) == cylinder_count
