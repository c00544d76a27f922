"""Test package for complaint-hotmap.

This package contains:
- Unit tests for the spatial core (test_geo.py, test_grid.py, test_clustering.py,
  test_focus.py, test_density.py, test_points.py)
- Configuration tests (test_config_loader.py)
- HTTP action tests (test_actions.py)
- Test configuration (conftest.py)
"""
