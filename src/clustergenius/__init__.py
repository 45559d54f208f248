"""BA transaction aggregation and AI clustering."""

__version__ = "1.0.0"
