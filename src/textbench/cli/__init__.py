"""CLI entry points: one console script per transform."""

from ._common import EXIT_FATAL, EXIT_OK, EXIT_USAGE, build_tool, invoke

__all__ = ["EXIT_OK", "EXIT_USAGE", "EXIT_FATAL", "build_tool", "invoke"]
