"""Two-dimensional rigid-body simulation with gravitational attraction, elastic collisions and a pygame view."""

__version__ = "0.1.0"