"""Conflict-aware greedy scheduling of fraud alerts onto investigation teams."""

__version__ = "1.0.0"
