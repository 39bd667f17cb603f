"""Run statistics: samples, totals, averages."""

from .aggregator import aggregate, average, fold
from .models import EMPTY_TOTALS, NO_DATA, Averages, FileSample, RunTotals

__all__ = [
    "FileSample",
    "RunTotals",
    "Averages",
    "EMPTY_TOTALS",
    "NO_DATA",
    "fold",
    "aggregate",
    "average",
]
