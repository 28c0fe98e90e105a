"""Aggregates the public repositories of a GitHub user's organizations."""

__version__ = "0.1.0"
