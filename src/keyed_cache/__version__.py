"""Version information for keyed-cache."""

__version__ = "1.0.0"
