"""GTFS-realtime feed dump and diff tool"""

__version__ = "1.0.0"
