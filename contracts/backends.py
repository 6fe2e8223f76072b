"""UFT backend contracts.

Capability interfaces injected into the tools.  A live UFT integration
implements these; the runtime ships a simulated implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel

from contracts.uft import (
    AnalyzeTestResultsRequest,
    CaptureApplicationObjectsRequest,
    DebugTestFailureRequest,
    ExecuteUftTestRequest,
)


class ExecutionReport(BaseModel):
    """Outcome of one test or suite run."""

    execution_time: str
    passed: int
    failed: int
    warnings: int = 0


class AnalysisSummary(BaseModel):
    total_tests: int
    passed: int
    failed: int

    @property
    def pass_rate(self) -> str:
        if self.total_tests <= 0:
            return "0%"
        return f"{round(self.passed * 100 / self.total_tests)}%"


class CaptureReport(BaseModel):
    objects_captured: int


class FailureDiagnosis(BaseModel):
    suggestions: list[str]

    @property
    def issues_found(self) -> int:
        return len(self.suggestions)


class TestExecutor(ABC):
    """Runs UFT tests."""

    __test__ = False  # not a pytest class

    @abstractmethod
    async def execute(self, request: ExecuteUftTestRequest) -> ExecutionReport:
        ...


class ResultAnalyzer(ABC):
    """Reads UFT run results and summarises them."""

    @abstractmethod
    async def analyze(self, request: AnalyzeTestResultsRequest) -> AnalysisSummary:
        ...


class ObjectCapturer(ABC):
    """Learns test objects from a running application."""

    @abstractmethod
    async def capture(self, request: CaptureApplicationObjectsRequest) -> CaptureReport:
        ...


class FailureDebugger(ABC):
    """Inspects a failed run and proposes fixes."""

    @abstractmethod
    async def diagnose(self, request: DebugTestFailureRequest) -> FailureDiagnosis:
        ...
