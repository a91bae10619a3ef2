"""Implementation modules for circlesweep; import public names from ``circlesweep``."""
