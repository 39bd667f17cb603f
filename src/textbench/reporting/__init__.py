"""Throughput reporting and plot sinks."""

from .reporter import ThroughputReporter, ThroughputSeries, throughput_series
from .sink import MatplotlibSink, NullSink, PlotSink

__all__ = [
    "ThroughputReporter",
    "ThroughputSeries",
    "throughput_series",
    "PlotSink",
    "MatplotlibSink",
    "NullSink",
]
