"""Throughput reporting: text summary on stdout and a scatter plot."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional

import numpy as np
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..logging_config import get_logger
from ..stats import NO_DATA, FileSample, RunTotals, average
from ..transforms.base import Metric, TextTransform
from .sink import PlotSink

logger = get_logger(__name__)

DEFAULT_MARKER_STYLE = "bo"  # blue circle markers


@dataclass(frozen=True)
class ThroughputSeries:
    """Scatter points (x = MiB, y = throughput) plus the paths left out."""

    xs: list[float] = field(default_factory=list)
    ys: list[float] = field(default_factory=list)
    excluded: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.xs)


def throughput_series(samples: Sequence[FileSample], metric: Metric) -> ThroughputSeries:
    """
    Compute one throughput value per sample.

    For the "size" metric y is MiB/second, for "items" it is items/second.
    A sample with zero duration has unbounded throughput; it is left out
    of the series and listed in ``excluded`` instead.
    """
    if not samples:
        return ThroughputSeries()

    sizes = np.array([s.size_mib for s in samples], dtype=float)
    durations = np.array([s.duration_seconds for s in samples], dtype=float)
    if metric == "size":
        numerators = sizes
    else:
        numerators = np.array([s.item_count for s in samples], dtype=float)

    valid = durations > 0
    rates = np.divide(numerators, durations, out=np.zeros_like(numerators), where=valid)

    excluded = [s.relative_path for s, ok in zip(samples, valid) if not ok]
    for path in excluded:
        logger.info(f"Instantaneous processing for {path}; left out of the plot")

    return ThroughputSeries(
        xs=sizes[valid].tolist(),
        ys=rates[valid].tolist(),
        excluded=excluded,
    )


class ThroughputReporter:
    """Prints the run summary and hands the scatter series to a plot sink."""

    def __init__(
        self,
        transform: TextTransform,
        console: Optional[Console] = None,
        sink: Optional[PlotSink] = None,
        marker_style: str = DEFAULT_MARKER_STYLE,
        show_file_table: bool = True,
    ):
        self.transform = transform
        self.console = console or Console()
        self.sink = sink
        self.marker_style = marker_style
        self.show_file_table = show_file_table

    def report(
        self,
        samples: Sequence[FileSample],
        totals: RunTotals,
        failures: Sequence = (),
    ) -> ThroughputSeries:
        series = throughput_series(samples, self.transform.metric)

        if self.show_file_table and samples:
            self.console.print(self._file_table(samples, series))

        self._print_summary(samples, totals, failures)

        if self.sink is not None:
            self._plot(series)

        return series

    def _print_summary(self, samples, totals: RunTotals, failures) -> None:
        if self.transform.metric == "size":
            self.console.print(f"Total size of processed files: {totals.total_size_mib:.6f} MiB")
            averages = average(totals, len(samples))
            if averages is NO_DATA:
                self.console.print("[dim]No files processed[/dim]")
            else:
                self.console.print(
                    f"Average size of processed files: {averages.avg_size_mib:.6f} MiB"
                )
                self.console.print(
                    f"Average processing time per file: {averages.avg_time_seconds:.6f} seconds"
                )
        else:
            self.console.print(f"Total words in all files: {totals.total_items}")
            self.console.print(
                f"Total time taken for processing: {totals.total_time_seconds:.6f} seconds"
            )

        if failures:
            self.console.print(f"[yellow]Skipped {len(failures)} file(s) due to I/O errors[/yellow]")
            for failure in failures:
                self.console.print(
                    f"  [dim]{escape(failure.relative_path)}[/dim]: {escape(failure.reason)}"
                )

    def _file_table(self, samples: Sequence[FileSample], series: ThroughputSeries) -> Table:
        table = Table(title=self.transform.title, show_lines=False)
        table.add_column("File", style="cyan", no_wrap=True)
        table.add_column("Size (MiB)", justify="right")
        table.add_column("Time (s)", justify="right")
        table.add_column(self.transform.y_label, justify="right")

        excluded = set(series.excluded)
        rates = iter(series.ys)
        for sample in samples:
            if sample.relative_path in excluded:
                rate = "instantaneous"
            else:
                rate = f"{next(rates):.3f}"
            table.add_row(
                escape(sample.relative_path),
                f"{sample.size_mib:.6f}",
                f"{sample.duration_seconds:.6f}",
                rate,
            )
        return table

    def _plot(self, series: ThroughputSeries) -> None:
        self.sink.plot(series.xs, series.ys, self.marker_style)
        self.sink.set_xlabel(self.transform.x_label)
        self.sink.set_ylabel(self.transform.y_label)
        self.sink.set_title(self.transform.title)
        self.sink.show()
