"""FastAPI actions server for complaint hotspots."""
