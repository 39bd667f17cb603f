"""Base class for per-file text transforms."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal

Metric = Literal["size", "items"]


@dataclass(frozen=True)
class TransformResult:
    """Output lines of one file plus the transform-defined item count."""

    lines: list[str] = field(default_factory=list)
    item_count: int = 0


class TextTransform(ABC):
    """Pure mapping from one file's lines to new lines.

    Subclasses declare how their throughput is reported: ``metric`` is
    "size" for MiB/second or "items" for item_count/second, and the label
    attributes are handed to the plot sink unchanged.
    """

    name: str
    description: str
    metric: Metric
    x_label: str
    y_label: str
    title: str

    @abstractmethod
    def apply(self, lines: Sequence[str]) -> TransformResult: ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
