"""Tests for sample folding and averages."""

import pytest

from textbench.stats import (
    EMPTY_TOTALS,
    NO_DATA,
    FileSample,
    RunTotals,
    aggregate,
    average,
    fold,
)
from textbench.stats.models import BYTES_PER_MIB


def make_sample(path="a.txt", size_bytes=BYTES_PER_MIB, duration=0.5, items=10):
    return FileSample(
        relative_path=path, size_bytes=size_bytes, duration_seconds=duration, item_count=items
    )


class TestFileSample:
    def test_size_mib(self):
        assert make_sample(size_bytes=3 * BYTES_PER_MIB // 2).size_mib == pytest.approx(1.5)

    def test_is_immutable(self):
        sample = make_sample()
        with pytest.raises(AttributeError):
            sample.item_count = 5


class TestFold:
    def test_fold_is_additive(self):
        totals = fold(EMPTY_TOTALS, make_sample(duration=0.25, items=4))
        totals = fold(totals, make_sample(size_bytes=BYTES_PER_MIB * 2, duration=0.75, items=6))
        assert totals.total_size_mib == pytest.approx(3.0)
        assert totals.total_time_seconds == pytest.approx(1.0)
        assert totals.total_items == 10
        assert totals.file_count == 2

    def test_fold_returns_new_value(self):
        before = RunTotals()
        after = fold(before, make_sample())
        assert before == EMPTY_TOTALS
        assert after is not before

    def test_aggregate_matches_repeated_fold(self):
        samples = [make_sample(f"{i}.txt", items=i) for i in range(5)]
        expected = EMPTY_TOTALS
        for s in samples:
            expected = fold(expected, s)
        assert aggregate(samples) == expected

    def test_aggregate_of_nothing(self):
        assert aggregate([]) == EMPTY_TOTALS


class TestAverage:
    def test_average(self):
        totals = aggregate([make_sample(duration=1.0), make_sample(duration=3.0)])
        averages = average(totals, 2)
        assert averages.avg_size_mib == pytest.approx(1.0)
        assert averages.avg_time_seconds == pytest.approx(2.0)

    def test_zero_count_returns_sentinel(self):
        assert average(EMPTY_TOTALS, 0) is NO_DATA
