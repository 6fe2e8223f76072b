"""Simulated UFT backend.

Stand-in for a live UFT installation: every method returns fixed
figures and performs no I/O.  Replace with a real implementation of the
contracts.backends interfaces to drive an actual UFT host.
"""

from __future__ import annotations

from contracts.backends import (
    AnalysisSummary,
    CaptureReport,
    ExecutionReport,
    FailureDebugger,
    FailureDiagnosis,
    ObjectCapturer,
    ResultAnalyzer,
    TestExecutor,
)
from contracts.uft import (
    AnalyzeTestResultsRequest,
    CaptureApplicationObjectsRequest,
    DebugTestFailureRequest,
    ExecuteUftTestRequest,
)

DEFAULT_SUGGESTIONS = [
    "Object not found - verify object repository is up to date",
    "Timing issue detected - consider adding wait conditions",
    "Data mismatch - check test data inputs",
]


class SimulatedUftBackend(TestExecutor, ResultAnalyzer, ObjectCapturer, FailureDebugger):
    """Canned results for every backend capability."""

    def __init__(
        self,
        *,
        passed: int = 8,
        failed: int = 2,
        warnings: int = 1,
        execution_time: str = "45s",
        objects_captured: int = 15,
        suggestions: list[str] | None = None,
    ) -> None:
        self.passed = passed
        self.failed = failed
        self.warnings = warnings
        self.execution_time = execution_time
        self.objects_captured = objects_captured
        self.suggestions = list(DEFAULT_SUGGESTIONS if suggestions is None else suggestions)

    async def execute(self, request: ExecuteUftTestRequest) -> ExecutionReport:
        return ExecutionReport(
            execution_time=self.execution_time,
            passed=self.passed,
            failed=self.failed,
            warnings=self.warnings,
        )

    async def analyze(self, request: AnalyzeTestResultsRequest) -> AnalysisSummary:
        return AnalysisSummary(
            total_tests=self.passed + self.failed,
            passed=self.passed,
            failed=self.failed,
        )

    async def capture(self, request: CaptureApplicationObjectsRequest) -> CaptureReport:
        return CaptureReport(objects_captured=self.objects_captured)

    async def diagnose(self, request: DebugTestFailureRequest) -> FailureDiagnosis:
        return FailureDiagnosis(suggestions=list(self.suggestions))
