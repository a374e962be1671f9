"""Building blocks for an HTTP response cache: configuration, liveness probing and locale tables."""

__version__ = "0.1.0"