"""Service applications built on the hotmap library."""
