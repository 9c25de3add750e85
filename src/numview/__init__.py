"""numview: inspect how a number is represented in memory."""

__version__ = "0.1.0"
