"""UFT tool request variants.

One model per catalog tool.  Handlers parse their validated arguments
into these models; wire names are camelCase (``testName``,
``recordCount``) and map onto snake_case attributes.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _UftRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Enumerations ─────────────────────────────────────────────────────


class ReportFormat(str, Enum):
    HTML = "html"
    XML = "xml"
    JSON = "json"
    SUMMARY = "summary"


class RepositoryAction(str, Enum):
    ADD = "add"
    UPDATE = "update"
    QUERY = "query"
    DELETE = "delete"
    LIST = "list"


class DataType(str, Enum):
    EXCEL = "excel"
    CSV = "csv"
    XML = "xml"
    DATABASE = "database"


class CaptureMode(str, Enum):
    MANUAL = "manual"
    AUTOMATIC = "automatic"
    SMART = "smart"


class ExecutionOrder(str, Enum):
    SEQUENTIAL = "sequential"
    PARALLEL = "parallel"
    PRIORITY = "priority"


class ScheduleType(str, Enum):
    ONCE = "once"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class DocumentationType(str, Enum):
    DETAILED = "detailed"
    SUMMARY = "summary"
    TECHNICAL = "technical"
    USER_GUIDE = "user-guide"


class OutputFormat(str, Enum):
    HTML = "html"
    PDF = "pdf"
    WORD = "word"
    MARKDOWN = "markdown"


# ── Request variants ─────────────────────────────────────────────────


class UftAction(_UftRequest):
    """A single test step: ``<object>.<type> "<value>"``."""

    type: str
    object: str
    value: str | None = None
    description: str = ""


class CreateUftTestRequest(_UftRequest):
    test_name: str = Field(min_length=1)
    test_description: str | None = None
    application_under_test: str | None = None
    actions: list[UftAction]


class ExecuteUftTestRequest(_UftRequest):
    test_path: str
    parameters: dict[str, Any] = {}
    result_path: str | None = None


class AnalyzeTestResultsRequest(_UftRequest):
    result_path: str
    report_format: ReportFormat = ReportFormat.SUMMARY


class ManageObjectRepositoryRequest(_UftRequest):
    action: RepositoryAction
    repository_path: str | None = None
    object_name: str | None = None
    object_properties: dict[str, Any] = {}


class GenerateTestDataRequest(_UftRequest):
    data_type: DataType
    data_schema: dict[str, Any] = Field(alias="schema")
    record_count: int = Field(ge=0)
    output_path: str | None = None


class CaptureApplicationObjectsRequest(_UftRequest):
    application_path: str
    capture_mode: CaptureMode = CaptureMode.AUTOMATIC
    output_repository: str | None = None


class CreateTestSuiteRequest(_UftRequest):
    suite_name: str = Field(min_length=1)
    tests: list[str]
    execution_order: ExecutionOrder = ExecutionOrder.SEQUENTIAL
    configuration: dict[str, Any] = {}


class Schedule(_UftRequest):
    type: ScheduleType
    time: str
    date: str | None = None


class ScheduleTestExecutionRequest(_UftRequest):
    test_or_suite: str
    schedule: Schedule
    notifications: dict[str, Any] = {}


class GenerateTestDocumentationRequest(_UftRequest):
    test_path: str
    documentation_type: DocumentationType
    output_format: OutputFormat = OutputFormat.HTML
    include_screenshots: bool = False


class DebugTestFailureRequest(_UftRequest):
    failed_test_path: str
    error_logs: str | None = None
    screenshots: list[str] = []
