"""Shared fixtures: real FeedMessage payloads written to disk"""

import pytest
from google.transit import gtfs_realtime_pb2

from gtfsrt_dump.services.config_manager import ConfigManager


def build_feed(timestamp=1680310800, trip_ids=("trip-1",)):
    feed = gtfs_realtime_pb2.FeedMessage()
    feed.header.gtfs_realtime_version = "2.0"
    feed.header.timestamp = timestamp
    for index, trip_id in enumerate(trip_ids):
        entity = feed.entity.add()
        entity.id = str(index)
        entity.trip_update.trip.trip_id = trip_id
    return feed


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    monkeypatch.delenv("GTFSRT_DUMP_VERBOSE", raising=False)
    ConfigManager.reset_instance()
    yield
    ConfigManager.reset_instance()


@pytest.fixture
def write_feed(tmp_path):
    """Serialize a feed (or raw bytes) into tmp_path/<name> and return the path"""

    def _write(name, feed=None, data=None):
        path = tmp_path / name
        path.write_bytes(data if data is not None else (feed or build_feed()).SerializeToString())
        return str(path)

    return _write
