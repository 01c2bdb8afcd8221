"""Throughput reporting from server progress counters."""

from dataclasses import dataclass

from rich.filesize import decimal

from .models import ProgressStats

UNAVAILABLE = "n/a"


@dataclass(frozen=True)
class Throughput:
    """Per second rates of a statement, unset when elapsed time is zero."""

    rows_per_sec: int | None
    bytes_per_sec: int | None

    @classmethod
    def compute(cls, stats: ProgressStats, elapsed_ms: int) -> "Throughput":
        if elapsed_ms <= 0:
            return cls(rows_per_sec=None, bytes_per_sec=None)

        elapsed_seconds = elapsed_ms / 1000
        return cls(
            rows_per_sec=round(stats.read_rows / elapsed_seconds),
            bytes_per_sec=round(stats.read_bytes / elapsed_seconds),
        )


def format_count(value: int) -> str:
    return f"{value:,}"


def format_stats(stats: ProgressStats | None, elapsed_ms: int) -> str | None:
    """
    Format the throughput line of one statement.

    Returns:
        None when the server reported no stats, otherwise a line such as
        ``read rows: 1,000, read bytes: 2.0 kB, rows/sec: 500, bytes/sec: 1.0 kB/sec``.
    """
    if stats is None:
        return None

    throughput = Throughput.compute(stats, elapsed_ms)

    if throughput.rows_per_sec is None:
        rows_per_sec = UNAVAILABLE
    else:
        rows_per_sec = format_count(throughput.rows_per_sec)

    if throughput.bytes_per_sec is None:
        bytes_per_sec = UNAVAILABLE
    else:
        bytes_per_sec = f"{decimal(throughput.bytes_per_sec)}/sec"

    return (
        f"read rows: {format_count(stats.read_rows)}, "
        f"read bytes: {decimal(stats.read_bytes)}, "
        f"rows/sec: {rows_per_sec}, "
        f"bytes/sec: {bytes_per_sec}"
    )
