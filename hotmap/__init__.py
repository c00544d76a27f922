"""Complaint hotspot clustering and map focus selection."""

__version__ = "0.1.0"
