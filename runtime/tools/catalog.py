"""Static UFT tool catalog.

Declared once, independent of the handlers.  Each tool's definition()
returns its entry from here, and list order is catalog order.
"""

from __future__ import annotations

from contracts.tool_sdk import ToolDefinition

_DEFINITIONS = [
    ToolDefinition(
        name="create_uft_test",
        description="Create a new UFT test script with specified actions and verifications",
        input_schema={
            "type": "object",
            "properties": {
                "testName": {"type": "string", "description": "Name of the UFT test"},
                "testDescription": {
                    "type": "string",
                    "description": "Description of what the test does",
                },
                "applicationUnderTest": {
                    "type": "string",
                    "description": "Application being tested (web, desktop, mobile)",
                },
                "actions": {
                    "type": "array",
                    "description": "Array of test actions to perform",
                    "items": {
                        "type": "object",
                        "properties": {
                            "type": {
                                "type": "string",
                                "description": "Action type (click, input, verify, etc.)",
                            },
                            "object": {
                                "type": "string",
                                "description": "Target object identifier",
                            },
                            "value": {
                                "type": "string",
                                "description": "Value for the action (if applicable)",
                            },
                            "description": {
                                "type": "string",
                                "description": "Human readable description",
                            },
                        },
                        "required": ["type", "object"],
                    },
                },
            },
            "required": ["testName", "actions"],
        },
    ),
    ToolDefinition(
        name="execute_uft_test",
        description="Execute UFT test(s) and return results",
        input_schema={
            "type": "object",
            "properties": {
                "testPath": {"type": "string", "description": "Path to UFT test or test suite"},
                "parameters": {
                    "type": "object",
                    "description": "Test parameters to pass to UFT",
                },
                "resultPath": {
                    "type": "string",
                    "description": "Path where results should be stored",
                },
            },
            "required": ["testPath"],
        },
    ),
    ToolDefinition(
        name="analyze_test_results",
        description="Analyze UFT test execution results and generate reports",
        input_schema={
            "type": "object",
            "properties": {
                "resultPath": {"type": "string", "description": "Path to UFT test results"},
                "reportFormat": {
                    "type": "string",
                    "enum": ["html", "xml", "json", "summary"],
                    "description": "Format for the analysis report",
                },
            },
            "required": ["resultPath"],
        },
    ),
    ToolDefinition(
        name="manage_object_repository",
        description="Add, update, or query objects in UFT Object Repository",
        input_schema={
            "type": "object",
            "properties": {
                "action": {
                    "type": "string",
                    "enum": ["add", "update", "query", "delete", "list"],
                    "description": "Action to perform on Object Repository",
                },
                "repositoryPath": {
                    "type": "string",
                    "description": "Path to Object Repository file",
                },
                "objectName": {"type": "string", "description": "Name of the object"},
                "objectProperties": {
                    "type": "object",
                    "description": "Object properties and identification details",
                },
            },
            "required": ["action"],
        },
    ),
    ToolDefinition(
        name="generate_test_data",
        description="Generate test data for UFT data-driven testing",
        input_schema={
            "type": "object",
            "properties": {
                "dataType": {
                    "type": "string",
                    "enum": ["excel", "csv", "xml", "database"],
                    "description": "Type of test data to generate",
                },
                "schema": {
                    "type": "object",
                    "description": "Schema definition for test data",
                },
                "recordCount": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Number of test data records to generate",
                },
                "outputPath": {
                    "type": "string",
                    "description": "Path where test data should be saved",
                },
            },
            "required": ["dataType", "schema", "recordCount"],
        },
    ),
    ToolDefinition(
        name="capture_application_objects",
        description="Capture and identify objects from running applications",
        input_schema={
            "type": "object",
            "properties": {
                "applicationPath": {
                    "type": "string",
                    "description": "Path to application executable or URL",
                },
                "captureMode": {
                    "type": "string",
                    "enum": ["manual", "automatic", "smart"],
                    "description": "Object capture mode",
                },
                "outputRepository": {
                    "type": "string",
                    "description": "Output Object Repository file path",
                },
            },
            "required": ["applicationPath"],
        },
    ),
    ToolDefinition(
        name="create_test_suite",
        description="Create and organize UFT test suites",
        input_schema={
            "type": "object",
            "properties": {
                "suiteName": {"type": "string", "description": "Name of the test suite"},
                "tests": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Array of test paths to include in suite",
                },
                "executionOrder": {
                    "type": "string",
                    "enum": ["sequential", "parallel", "priority"],
                    "description": "Test execution order",
                },
                "configuration": {
                    "type": "object",
                    "description": "Suite configuration settings",
                },
            },
            "required": ["suiteName", "tests"],
        },
    ),
    ToolDefinition(
        name="schedule_test_execution",
        description="Schedule UFT tests for automated execution",
        input_schema={
            "type": "object",
            "properties": {
                "testOrSuite": {"type": "string", "description": "Path to test or test suite"},
                "schedule": {
                    "type": "object",
                    "properties": {
                        "type": {
                            "type": "string",
                            "enum": ["once", "daily", "weekly", "monthly"],
                        },
                        "time": {
                            "type": "string",
                            "description": "Execution time (HH:MM format)",
                        },
                        "date": {
                            "type": "string",
                            "description": "Execution date (for one-time execution)",
                        },
                    },
                    "required": ["type", "time"],
                },
                "notifications": {
                    "type": "object",
                    "description": "Notification settings for test completion",
                },
            },
            "required": ["testOrSuite", "schedule"],
        },
    ),
    ToolDefinition(
        name="generate_test_documentation",
        description="Generate documentation for UFT tests and test suites",
        input_schema={
            "type": "object",
            "properties": {
                "testPath": {"type": "string", "description": "Path to UFT test or test suite"},
                "documentationType": {
                    "type": "string",
                    "enum": ["detailed", "summary", "technical", "user-guide"],
                    "description": "Type of documentation to generate",
                },
                "outputFormat": {
                    "type": "string",
                    "enum": ["html", "pdf", "word", "markdown"],
                    "description": "Output format for documentation",
                },
                "includeScreenshots": {
                    "type": "boolean",
                    "description": "Include screenshots in documentation",
                },
            },
            "required": ["testPath", "documentationType"],
        },
    ),
    ToolDefinition(
        name="debug_test_failure",
        description="Analyze failed test steps and suggest fixes",
        input_schema={
            "type": "object",
            "properties": {
                "failedTestPath": {"type": "string", "description": "Path to failed UFT test"},
                "errorLogs": {
                    "type": "string",
                    "description": "Error logs from test execution",
                },
                "screenshots": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Paths to failure screenshots",
                },
            },
            "required": ["failedTestPath"],
        },
    ),
]

CATALOG: dict[str, ToolDefinition] = {d.name: d for d in _DEFINITIONS}
