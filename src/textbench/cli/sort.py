"""textbench-sort: re-sort existing word-count files by frequency."""

from typing import Optional

from ._common import build_tool, invoke

app = build_tool("sort")


def main(argv: Optional[list[str]] = None) -> int:
    return invoke(app, argv)
