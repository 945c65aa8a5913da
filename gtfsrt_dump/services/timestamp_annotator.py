"""
Timestamp Annotator - Append readable date/time to epoch-second fields
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

from .config_manager import TIME_ZONE_OFFSET_HOURS

# A trailing " NNNNNNNNNN" starting with 1 or 2 (roughly years 2001-2033)
EPOCH_SECONDS_PATTERN = re.compile(r" ([12][0-9]{9})\Z")
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S %z"
DISPLAY_ZONE = timezone(timedelta(hours=TIME_ZONE_OFFSET_HOURS))


def format_timestamp(seconds: int) -> str:
    """Format epoch seconds in the display zone, e.g. 2023-04-01 09:00:00 +0900"""
    return datetime.fromtimestamp(seconds, tz=DISPLAY_ZONE).strftime(TIMESTAMP_FORMAT)


def annotate(line: str) -> str:
    """Return line with a '  # <time>' comment if it ends in an epoch timestamp"""
    match = EPOCH_SECONDS_PATTERN.search(line)
    if not match:
        return line
    return f"{line}  # {format_timestamp(int(match.group(1)))}"
