"""Folding of file samples into run totals and averages."""

from collections.abc import Iterable
from functools import reduce

from .models import EMPTY_TOTALS, NO_DATA, Averages, FileSample, RunTotals


def fold(totals: RunTotals, sample: FileSample) -> RunTotals:
    """Add one sample to the totals, returning a new RunTotals."""
    return RunTotals(
        total_size_mib=totals.total_size_mib + sample.size_mib,
        total_items=totals.total_items + sample.item_count,
        total_time_seconds=totals.total_time_seconds + sample.duration_seconds,
        file_count=totals.file_count + 1,
    )


def aggregate(samples: Iterable[FileSample]) -> RunTotals:
    return reduce(fold, samples, EMPTY_TOTALS)


def average(totals: RunTotals, count: int) -> Averages:
    """
    Average size and time per file.

    Returns NO_DATA instead of dividing when ``count`` is zero.
    """
    if count <= 0:
        return NO_DATA
    return Averages(
        avg_size_mib=totals.total_size_mib / count,
        avg_time_seconds=totals.total_time_seconds / count,
    )
