"""disk-viz — an interactive visualizer for disk-head scheduling."""
