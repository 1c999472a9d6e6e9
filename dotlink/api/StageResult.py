"""StageResult dataclass for 4-stage command pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass
class StageResult:
    """Outcome of a dotlink command.

    A command returns at once with ``announce`` and ``progress_callback``.
    Running the callback does the work, yields ``(fraction, message)`` pairs
    and fills in ``result``, ``output`` and ``success``.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict[str, Any] = field(default_factory=dict)
    success: bool = False

    def drain(self) -> "StageResult":
        """Run the callback to completion, discarding progress messages."""
        for _ in self.progress_callback(self):
            pass
        return self
