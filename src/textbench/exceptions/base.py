"""Root of the textbench error taxonomy."""

from typing import Any, Dict, Optional


class TextBenchError(Exception):
    """Base exception for all textbench errors.

    ``fatal`` errors end the whole run with exit status 2; the others are
    contained to a single file or line by whoever catches them.
    """

    fatal = False

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = {key: str(value) for key, value in (details or {}).items()}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"
