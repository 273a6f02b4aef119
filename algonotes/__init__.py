"""Classic algorithms and data structures as small, readable Python functions."""

__version__ = "0.1.0"