"""Per-file samples and run-level totals."""

from dataclasses import dataclass

BYTES_PER_MIB = 1024 * 1024


@dataclass(frozen=True)
class FileSample:
    """Size, duration and item count recorded for one processed file.

    ``duration_seconds`` spans read + transform + write.
    """

    relative_path: str
    size_bytes: int
    duration_seconds: float
    item_count: int

    @property
    def size_mib(self) -> float:
        return self.size_bytes / BYTES_PER_MIB


@dataclass(frozen=True)
class RunTotals:
    total_size_mib: float = 0.0
    total_items: int = 0
    total_time_seconds: float = 0.0
    file_count: int = 0


@dataclass(frozen=True)
class Averages:
    avg_size_mib: float
    avg_time_seconds: float


EMPTY_TOTALS = RunTotals()

# Returned by average() when there is nothing to average over
NO_DATA = Averages(avg_size_mib=0.0, avg_time_seconds=0.0)
