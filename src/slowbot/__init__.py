"""A Discord bot that changes channel slowmode when mentioned."""

__version__ = "0.1.0"
