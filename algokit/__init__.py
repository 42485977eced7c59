"""Classic algorithms, small data structures and console games."""

__version__ = "0.1.0"