"""A terminal memory-matching card game for two to four players, with a self-playing simulation."""

__version__ = "0.1.0"
__all__ = ["__version__"]