"""AI proxy - forwards queries to AI providers behind a uniform JSON envelope."""

__version__ = "0.1.0"
