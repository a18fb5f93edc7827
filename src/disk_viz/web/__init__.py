"""Browser-based web UI for disk-viz.

This package provides a Flask application that shows the head-movement
plot in a browser.  It is an **optional** extra — install with::

    pip install disk-viz[web]

The ``create_app`` factory in ``app.py`` restores a visualizer and
serves these endpoints:

- ``GET /`` — HTML page with the configuration form and the plot.
- ``GET /api/config`` / ``POST /api/config`` — read or update settings.
- ``GET /api/schedule`` — visit order, segments and total seek.
- ``GET /api/compare`` — total seek under every algorithm.
- ``GET /plot.svg`` — the plot itself.
"""
