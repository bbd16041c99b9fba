"""Ski resort simulation: terrain, lifts, path finding, cameras, input and skiers."""

__version__ = "0.1.0"