"""Classic algorithms, data structures and small everyday programs."""

__version__ = "0.1.0"