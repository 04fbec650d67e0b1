"""Core package - settings and shared messages."""
