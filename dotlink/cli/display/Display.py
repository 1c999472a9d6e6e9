"""Interface the CLI renders command stages through."""

from abc import ABC, abstractmethod
from typing import Any


class Display(ABC):
    """Sink for the four command stages.

    ``status``, ``info``, ``warning``, ``success`` and ``error`` carry
    human-readable messages; ``json_output`` receives the validated output
    dict with ``format`` set to "json" or "yaml".
    """

    @abstractmethod
    def status(self, message: str, **kwargs) -> None: ...

    @abstractmethod
    def info(self, message: str, **kwargs) -> None: ...

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None: ...

    @abstractmethod
    def success(self, message: str, **kwargs) -> None: ...

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        """Report failure; ``details`` holds one error per line."""

    @abstractmethod
    def json_output(self, data: Any, **kwargs) -> None: ...
