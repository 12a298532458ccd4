"""Run a file through a chain of piped commands, with small string, memory, formatting and line-reading helpers."""

__version__ = "0.1.0"