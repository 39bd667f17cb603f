"""Word-count files: parse '<word> <count>' lines and sort by frequency."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from operator import attrgetter

from ..exceptions import WordCountParseError
from ..logging_config import get_logger
from .base import TextTransform, TransformResult

logger = get_logger(__name__)

# Only ASCII whitespace separates tokens; NBSP and other Unicode spaces stay
# inside a word.
TOKEN_SEPARATORS = " \t\n\v\f\r"
_TO_SPACE = str.maketrans(TOKEN_SEPARATORS, " " * len(TOKEN_SEPARATORS))


def split_tokens(line: str) -> list[str]:
    return [token for token in line.translate(_TO_SPACE).split(" ") if token]


@dataclass(frozen=True)
class WordCount:
    word: str
    count: int

    def render(self) -> str:
        return f"{self.word} {self.count}"


def parse_word_count(line: str) -> WordCount:
    """
    Parse one line of a word-count file.

    The line must hold exactly two tokens separated by ASCII whitespace, and the
    second must be a non-negative integer written in ASCII digits.

    Raises:
        WordCountParseError: If the line does not match that shape
    """
    tokens = split_tokens(line)
    if len(tokens) != 2:
        raise WordCountParseError(line, f"expected 2 tokens, got {len(tokens)}")

    word, raw_count = tokens
    if not (raw_count.isascii() and raw_count.isdigit()):
        raise WordCountParseError(line, f"count {raw_count!r} is not a non-negative integer")

    return WordCount(word=word, count=int(raw_count))


def parse_word_counts(lines: Iterable[str]) -> list[WordCount]:
    """Parse every valid line, silently dropping malformed ones."""
    entries = []
    dropped = 0
    for line in lines:
        try:
            entries.append(parse_word_count(line))
        except WordCountParseError as e:
            dropped += 1
            logger.debug(f"Dropped line: {e.reason}")
    if dropped:
        logger.debug(f"Dropped {dropped} malformed word-count lines")
    return entries


def sort_descending(entries: Iterable[WordCount]) -> list[WordCount]:
    """Sort by count, highest first; equal counts keep their input order."""
    # sorted() is stable, and reverse=True preserves that stability
    return sorted(entries, key=attrgetter("count"), reverse=True)


class ExtractAndSortWordCounts(TextTransform):
    name = "count"
    description = "Extract '<word> <count>' entries and sort them by count, descending"
    metric = "items"
    x_label = "MiB"
    y_label = "words/second"
    title = "Throughput vs. File Size"

    def apply(self, lines: Sequence[str]) -> TransformResult:
        entries = sort_descending(parse_word_counts(lines))
        return TransformResult(
            lines=[entry.render() for entry in entries],
            item_count=len(entries),
        )


class ResortWordCounts(ExtractAndSortWordCounts):
    """Re-sorts an already produced word-count file.

    Same parsing and ordering as ExtractAndSortWordCounts; applying it to
    its own output is a no-op.
    """

    name = "sort"
    description = "Re-sort an existing word-count file by count, descending"
    x_label = "File Size (MiB)"
    y_label = "(words/second)"
