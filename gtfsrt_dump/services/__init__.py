"""Services module - Rendering and diff logic"""

from .config_manager import ConfigManager
from .diff_formatter import DiffFormatter
from .diff_generator import DiffGenerator
from .feed_renderer import FeedDecodeError, decode_feed, read_feed, render, render_feed
from .timestamp_annotator import annotate, format_timestamp

__all__ = [
    "ConfigManager",
    "DiffFormatter",
    "DiffGenerator",
    "FeedDecodeError",
    "decode_feed",
    "read_feed",
    "render",
    "render_feed",
    "annotate",
    "format_timestamp",
]
