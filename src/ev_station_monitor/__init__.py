"""EV charging station availability monitor."""

__version__ = "0.1.0"
