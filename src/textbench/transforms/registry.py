"""Transform registry: the single place where names map to strategies."""

from ..exceptions import UnknownTransformError
from .base import TextTransform
from .sanitize import SanitizeLines
from .word_counts import ExtractAndSortWordCounts, ResortWordCounts

_ALL_TRANSFORMS: list[type[TextTransform]] = [
    SanitizeLines,
    ExtractAndSortWordCounts,
    ResortWordCounts,
]


def available_transforms() -> list[str]:
    """Return the registered transform names."""
    return [cls.name for cls in _ALL_TRANSFORMS]


def get_transform(name: str) -> TextTransform:
    """Instantiate a transform by name."""
    for cls in _ALL_TRANSFORMS:
        if cls.name == name:
            return cls()
    raise UnknownTransformError(name, available_transforms())
