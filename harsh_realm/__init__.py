"""Core of a turn-based solar system strategy game: orbits, bodies, turns and view layout."""

__version__ = "0.1.0"