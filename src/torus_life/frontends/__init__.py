"""Frontend interfaces for the toroidal Game of Life."""

from .cli import CLIGameOfLife

__all__ = ["CLIGameOfLife"]
