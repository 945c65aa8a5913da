"""Commands module - One handler per CLI mode"""

from . import compare, dump

__all__ = ["compare", "dump"]
