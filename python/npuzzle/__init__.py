"""Sliding N-puzzle engine: board model, shuffle, move rules, and sessions."""

__version__ = "0.1.0"
