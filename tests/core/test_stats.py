"""Tests for throughput reporting."""

from httpsql.core.models import ProgressStats
from httpsql.core.stats import Throughput, format_stats


def test_no_stats_no_line():
    assert format_stats(None, 1000) is None


def test_throughput_compute():
    stats = ProgressStats(read_rows=1_000_000, read_bytes=2_000_000)

    throughput = Throughput.compute(stats, elapsed_ms=2000)

    assert throughput.rows_per_sec == 500_000
    assert throughput.bytes_per_sec == 1_000_000


def test_throughput_rounds_rows():
    stats = ProgressStats(read_rows=10, read_bytes=0)

    assert Throughput.compute(stats, elapsed_ms=3000).rows_per_sec == 3


def test_format_stats_line():
    stats = ProgressStats(read_rows=1_000_000, read_bytes=2_000_000)

    line = format_stats(stats, elapsed_ms=2000)

    assert line == (
        "read rows: 1,000,000, read bytes: 2.0 MB, "
        "rows/sec: 500,000, bytes/sec: 1.0 MB/sec"
    )


def test_format_stats_scales_units_independently():
    stats = ProgressStats(read_rows=1, read_bytes=1_500_000)

    line = format_stats(stats, elapsed_ms=1_000_000)

    assert "read bytes: 1.5 MB" in line
    assert "bytes/sec: 1.5 kB/sec" in line


def test_format_stats_zero_elapsed_is_unavailable():
    stats = ProgressStats(read_rows=5, read_bytes=40)

    assert Throughput.compute(stats, elapsed_ms=0) == Throughput(None, None)
    assert format_stats(stats, elapsed_ms=0) == (
        "read rows: 5, read bytes: 40 bytes, rows/sec: n/a, bytes/sec: n/a"
    )
