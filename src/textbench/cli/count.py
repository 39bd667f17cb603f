"""textbench-count: extract word counts and sort them by frequency."""

from typing import Optional

from ._common import build_tool, invoke

app = build_tool("count")


def main(argv: Optional[list[str]] = None) -> int:
    return invoke(app, argv)
