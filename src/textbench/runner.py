"""Instrumented batch runner: walk, transform, mirror, measure."""

import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .config import DEFAULT_CONFIG, RunConfig
from .exceptions import FileAccessError
from .file_ops import file_size, read_lines, write_lines
from .logging_config import TIMING_LOGGER, get_logger
from .scanning import FileEntry, FileWalker, PathMirror
from .stats import EMPTY_TOTALS, FileSample, RunTotals, fold
from .transforms import TextTransform

logger = get_logger(__name__)
timing_logger = get_logger(TIMING_LOGGER)


@dataclass(frozen=True)
class FileFailure:
    """A file skipped because of an I/O error."""

    relative_path: str
    reason: str


@dataclass(frozen=True)
class RunResult:
    samples: tuple[FileSample, ...] = ()
    failures: tuple[FileFailure, ...] = ()
    totals: RunTotals = EMPTY_TOTALS

    @property
    def file_count(self) -> int:
        return len(self.samples)


class InstrumentedRunner:
    """Applies one transform to every matching file and times each file.

    Samples and totals live only inside a single ``run`` call and are
    handed back in the RunResult.
    """

    def __init__(
        self,
        transform: TextTransform,
        config: Optional[RunConfig] = None,
        clock: Callable[[], float] = time.perf_counter,
        on_file: Optional[Callable[[FileSample], None]] = None,
    ):
        """
        Initialize runner.

        Args:
            transform: Strategy applied to every file
            config: Run configuration (extension, encoding, symlinks)
            clock: Monotonic clock returning seconds
            on_file: Called with each sample as soon as a file is done
        """
        self.transform = transform
        self.config = config or DEFAULT_CONFIG
        self.clock = clock
        self.on_file = on_file
        self.walker = FileWalker(
            extension=self.config.extension,
            follow_symlinks=self.config.follow_symlinks,
        )
        logger.debug(f"Initialized {self.__class__.__name__} with {transform!r}")

    def run(self, input_root: Path, output_root: Path) -> RunResult:
        """
        Process every matching file under ``input_root``.

        Raises:
            InputRootNotFoundError: If ``input_root`` is missing or not a
                directory; nothing is processed in that case
        """
        input_root = Path(input_root)
        output_root = Path(output_root)

        entries = self.walker.walk(input_root, exclude=output_root)
        mirror = PathMirror(input_root, output_root)

        samples: list[FileSample] = []
        failures: list[FileFailure] = []
        totals = EMPTY_TOTALS

        for entry in entries:
            rel = entry.relative_path.as_posix()
            try:
                sample = self.process_file(entry, mirror)
            except FileAccessError as e:
                failures.append(FileFailure(relative_path=rel, reason=e.reason))
                logger.warning(f"Skipped {rel}: {e.reason}")
                continue

            samples.append(sample)
            totals = fold(totals, sample)
            timing_logger.info(
                f"Time taken for {entry.name}: {sample.duration_seconds:.6f} seconds"
            )

            if self.on_file is not None:
                self.on_file(sample)

        logger.info(
            f"Run complete: {len(samples)} processed, {len(failures)} skipped "
            f"({self.transform.name})"
        )
        return RunResult(samples=tuple(samples), failures=tuple(failures), totals=totals)

    def process_file(self, entry: FileEntry, mirror: PathMirror) -> FileSample:
        """
        Transform one file and measure read + transform + write.

        Raises:
            FileAccessError: If the input or output cannot be accessed
        """
        size_bytes = file_size(entry.absolute_path)
        output_path = mirror.prepare(entry.relative_path)

        start = self.clock()
        lines = read_lines(
            entry.absolute_path,
            encoding=self.config.encoding,
            errors=self.config.encoding_errors,
        )
        result = self.transform.apply(lines)
        write_lines(
            output_path,
            result.lines,
            encoding=self.config.encoding,
            errors=self.config.encoding_errors,
        )
        elapsed = self.clock() - start

        return FileSample(
            relative_path=entry.relative_path.as_posix(),
            size_bytes=size_bytes,
            duration_seconds=elapsed,
            item_count=result.item_count,
        )
