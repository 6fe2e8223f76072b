"""UFT host contracts.

The host process owns keyword registration, the reporter sink, and the
test lifecycle events.  Extensions only see this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Mapping, Optional

KeywordArgs = Optional[Mapping[str, Any]]
KeywordImpl = Callable[[KeywordArgs], dict[str, Any]]
LifecycleCallback = Callable[[], None]


class ReportStatus(str, Enum):
    DONE = "Done"
    FAILED = "Failed"
    WARNING = "Warning"


class UftHost(ABC):
    """Interface of the UFT host an extension is loaded into."""

    @abstractmethod
    def register(self, name: str, implementation: KeywordImpl) -> None:
        """Register a custom keyword callable from test scripts."""
        ...

    @abstractmethod
    def report(self, status: ReportStatus, title: str, details: str) -> None:
        """Write a step to the host's run results."""
        ...

    @abstractmethod
    def on_test_start(self, callback: LifecycleCallback) -> None:
        ...

    @abstractmethod
    def on_test_end(self, callback: LifecycleCallback) -> None:
        ...
