"""Algorithm drills, worked exercises and small in-memory JSON web services."""

__version__ = "0.1.0"