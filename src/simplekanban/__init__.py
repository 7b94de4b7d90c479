"""simplekanban - personal task board with a self-healing ordering engine."""

__version__ = "0.1.0"
