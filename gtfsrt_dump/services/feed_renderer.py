"""
Feed Renderer - Decode GTFS-realtime FeedMessage bytes into annotated text lines
"""

from __future__ import annotations

import re

from google.protobuf import text_format
from google.protobuf.message import DecodeError, Message
from google.transit import gtfs_realtime_pb2

from .timestamp_annotator import annotate

LINE_BREAK = re.compile(r"\r?\n")


class FeedDecodeError(ValueError):
    """Input bytes are not a valid, complete FeedMessage"""


def decode_feed(data: bytes) -> gtfs_realtime_pb2.FeedMessage:
    """Parse serialized bytes into a FeedMessage. Raises FeedDecodeError."""
    feed = gtfs_realtime_pb2.FeedMessage()
    try:
        feed.ParseFromString(data)
    except DecodeError as e:
        raise FeedDecodeError(f"Failed to decode feed message: {e}") from e

    # Parsing alone does not enforce proto2 required fields
    if not feed.IsInitialized():
        missing = ", ".join(feed.FindInitializationErrors())
        raise FeedDecodeError(f"Feed message is missing required fields: {missing}")

    return feed


def split_lines(text: str) -> list[str]:
    """Split on LF or CRLF, dropping trailing empty lines"""
    lines = LINE_BREAK.split(text)
    while lines and lines[-1] == "":
        lines.pop()
    return lines


def render(message: Message) -> list[str]:
    """Render a decoded message as canonical text, one annotated line per entry"""
    text = text_format.MessageToString(message)
    return [annotate(line) for line in split_lines(text)]


def render_feed(data: bytes) -> list[str]:
    """Decode and render in one step"""
    return render(decode_feed(data))


def read_feed(path: str) -> list[str]:
    """Read a whole file and render it; OSError and FeedDecodeError propagate"""
    with open(path, "rb") as f:
        return render_feed(f.read())
