"""textbench-sanitize: clean every line of every text file."""

from typing import Optional

from ._common import build_tool, invoke

app = build_tool("sanitize")


def main(argv: Optional[list[str]] = None) -> int:
    return invoke(app, argv)
