"""Tests for plain and compare mode error policies."""

import io

import pytest

from gtfsrt_dump.commands.compare import compare_files, compare_pair
from gtfsrt_dump.commands.dump import dump_files, dump_stream
from gtfsrt_dump.services.feed_renderer import render
from tests.conftest import build_feed


class TestDumpStream:
    """Test reading one feed from a stream."""

    def test_prints_rendering(self):
        out = io.StringIO()

        ok = dump_stream(io.BytesIO(build_feed().SerializeToString()), out)

        assert ok is True
        assert out.getvalue().splitlines() == render(build_feed())

    def test_decode_failure_prints_nothing(self, capsys):
        out = io.StringIO()

        ok = dump_stream(io.BytesIO(b"\xff"), out)

        assert ok is False
        assert out.getvalue() == ""
        assert "<stdin>" in capsys.readouterr().err


class TestDumpFiles:
    """Test plain multi-file mode."""

    def test_prints_each_file_in_order(self, write_feed):
        first = write_feed("first.pb", build_feed(trip_ids=("first",)))
        second = write_feed("second.pb", build_feed(trip_ids=("second",)))
        out = io.StringIO()

        failures = dump_files([first, second], out)

        assert failures == 0
        expected = render(build_feed(trip_ids=("first",))) + render(build_feed(trip_ids=("second",)))
        assert out.getvalue().splitlines() == expected

    def test_decode_failure_continues(self, write_feed, capsys):
        bad = write_feed("bad.pb", data=b"\xff")
        good = write_feed("good.pb")
        out = io.StringIO()

        failures = dump_files([bad, good], out)

        assert failures == 1
        assert out.getvalue().splitlines() == render(build_feed())
        assert bad in capsys.readouterr().err

    def test_missing_file_halts_batch(self, write_feed, tmp_path):
        good = write_feed("good.pb")
        missing = str(tmp_path / "missing.pb")
        after = write_feed("after.pb", build_feed(trip_ids=("after",)))
        out = io.StringIO()

        with pytest.raises(FileNotFoundError):
            dump_files([good, missing, after], out)

        assert out.getvalue().splitlines() == render(build_feed())

    def test_verbose_reports_line_counts(self, write_feed, monkeypatch, capsys):
        monkeypatch.setenv("GTFSRT_DUMP_VERBOSE", "1")
        path = write_feed("feed.pb")

        dump_files([path], io.StringIO())

        err = capsys.readouterr().err
        assert f"[DumpCommand] Rendered {len(render(build_feed()))} lines from {path}" in err


class TestComparePair:
    """Test diffing two files."""

    def test_identical_files_print_nothing(self, write_feed):
        a = write_feed("a.pb")
        b = write_feed("b.pb")
        out = io.StringIO()

        result = compare_pair(a, b, out)

        assert out.getvalue() == ""
        assert not result.has_changes

    def test_changed_timestamp(self, write_feed):
        a = write_feed("a.pb", build_feed(timestamp=1680310800))
        b = write_feed("b.pb", build_feed(timestamp=1680310830))
        out = io.StringIO()

        compare_pair(a, b, out)

        source = "  timestamp: 1680310800  # 2023-04-01 10:00:00 +0900"
        target = "  timestamp: 1680310830  # 2023-04-01 10:00:30 +0900"
        assert out.getvalue().splitlines() == [
            f"{a:>60} @ {b}",
            " " * 59 + "2 =>",
            f"{source:<60} | {target}",
        ]

    def test_banner_uses_result_names(self, write_feed):
        a = write_feed("a.pb", build_feed(timestamp=1680310800))
        b = write_feed("b.pb", build_feed(timestamp=1680310830))
        out = io.StringIO()

        result = compare_pair(a, b, out)

        assert (result.source_name, result.target_name) == (a, b)
        assert out.getvalue().splitlines()[0] == f"{result.source_name:>60} @ {result.target_name}"


class TestCompareFiles:
    """Test compare mode over several files."""

    def test_compares_consecutive_pairs(self, write_feed):
        a = write_feed("a.pb", build_feed(trip_ids=("one",)))
        b = write_feed("b.pb", build_feed(trip_ids=("one",)))
        c = write_feed("c.pb", build_feed(trip_ids=("one", "two")))
        out = io.StringIO()

        failures = compare_files([a, b, c], out)

        lines = out.getvalue().splitlines()
        assert failures == 0
        assert lines[0] == f"{b:>60} @ {c}"
        assert sum(1 for line in lines if " @ " in line) == 1

    def test_missing_file_is_reported_and_skipped(self, write_feed, tmp_path, capsys):
        missing = str(tmp_path / "missing.pb")
        a = write_feed("a.pb", build_feed(timestamp=1680310800))
        b = write_feed("b.pb", build_feed(timestamp=1680310830))
        out = io.StringIO()

        failures = compare_files([missing, a, b], out)

        assert failures == 1
        assert out.getvalue().splitlines()[0] == f"{a:>60} @ {b}"
        assert "missing.pb" in capsys.readouterr().err

    def test_decode_failure_is_reported_and_skipped(self, write_feed, capsys):
        bad = write_feed("bad.pb", data=b"\xff")
        a = write_feed("a.pb", build_feed(timestamp=1680310800))
        b = write_feed("b.pb", build_feed(timestamp=1680310830))
        out = io.StringIO()

        failures = compare_files([bad, a, b], out)

        assert failures == 1
        assert out.getvalue().splitlines()[0] == f"{a:>60} @ {b}"
        assert bad in capsys.readouterr().err

    def test_single_path_compares_nothing(self, write_feed):
        out = io.StringIO()

        assert compare_files([write_feed("a.pb")], out) == 0
        assert out.getvalue() == ""
