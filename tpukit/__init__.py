"""Memory map, byte and word values, and the T language compiler front-end pieces."""

__version__ = "0.1.0"