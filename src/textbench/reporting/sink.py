"""Plot sinks that receive the throughput scatter series."""

from collections.abc import Sequence
from pathlib import Path
from typing import Optional, Protocol

import matplotlib.pyplot as plt

from ..logging_config import get_logger

logger = get_logger(__name__)


class PlotSink(Protocol):
    def plot(self, xs: Sequence[float], ys: Sequence[float], style: str) -> None: ...

    def set_xlabel(self, label: str) -> None: ...

    def set_ylabel(self, label: str) -> None: ...

    def set_title(self, title: str) -> None: ...

    def show(self) -> None: ...


class NullSink:
    """Accepts a plot and discards it."""

    def plot(self, xs: Sequence[float], ys: Sequence[float], style: str) -> None:
        pass

    def set_xlabel(self, label: str) -> None:
        pass

    def set_ylabel(self, label: str) -> None:
        pass

    def set_title(self, title: str) -> None:
        pass

    def show(self) -> None:
        pass


class MatplotlibSink:
    """Renders the series with matplotlib.

    ``show()`` saves the figure when ``save_path`` is set, opens the
    interactive window when ``interactive`` is set, and always closes the
    figure afterwards.
    """

    def __init__(self, save_path: Optional[Path] = None, interactive: bool = True, dpi: int = 200):
        self.save_path = Path(save_path) if save_path is not None else None
        self.interactive = interactive
        self.dpi = dpi
        self._figure = None
        self._axes = None

    def _ensure_axes(self):
        if self._axes is None:
            self._figure, self._axes = plt.subplots()
        return self._axes

    def plot(self, xs: Sequence[float], ys: Sequence[float], style: str) -> None:
        self._ensure_axes().plot(list(xs), list(ys), style)

    def set_xlabel(self, label: str) -> None:
        self._ensure_axes().set_xlabel(label)

    def set_ylabel(self, label: str) -> None:
        self._ensure_axes().set_ylabel(label)

    def set_title(self, title: str) -> None:
        self._ensure_axes().set_title(title)

    def show(self) -> None:
        self._ensure_axes()
        try:
            if self.save_path is not None:
                self.save_path.parent.mkdir(parents=True, exist_ok=True)
                self._figure.tight_layout()
                self._figure.savefig(self.save_path, dpi=self.dpi)
                logger.info(f"Plot saved to {self.save_path}")
            if self.interactive:
                plt.show()
        finally:
            plt.close(self._figure)
            self._figure = None
            self._axes = None
