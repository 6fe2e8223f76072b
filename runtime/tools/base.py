"""Tool base utilities: argument validation and request parsing."""

from __future__ import annotations

from typing import Any, TypeVar

import jsonschema
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from contracts.manifest import ValidationMode
from contracts.tool_sdk import HandlerError, ToolDefinition, ToolValidationError

RequestT = TypeVar("RequestT", bound=BaseModel)


def normalize_args(args: Any) -> dict[str, Any]:
    """Treat missing arguments as ``{}``; reject anything but an object."""
    if args is None:
        return {}
    if not isinstance(args, dict):
        raise ToolValidationError(
            f"Arguments must be an object, got {type(args).__name__}"
        )
    return args


def check_required(definition: ToolDefinition, args: dict[str, Any]) -> None:
    """Shallow check: every declared-required top-level field is present."""
    for field in definition.required:
        if field not in args or args[field] is None:
            raise ToolValidationError(f"Missing required field: {field}")


def validate_args(
    definition: ToolDefinition,
    args: dict[str, Any],
    mode: ValidationMode = ValidationMode.STRICT,
) -> None:
    """Validate *args* against the tool's input_schema.

    Raises ``ToolValidationError``.  In shallow mode only required
    top-level fields are checked; strict mode also applies the full
    JSON Schema (types, enums, nested required fields).
    """
    check_required(definition, args)
    if mode == ValidationMode.SHALLOW:
        return
    try:
        jsonschema.validate(instance=args, schema=definition.input_schema)
    except jsonschema.ValidationError as exc:
        location = ".".join(str(p) for p in exc.absolute_path)
        if location:
            raise ToolValidationError(f"Invalid value for '{location}': {exc.message}") from exc
        raise ToolValidationError(exc.message) from exc


def parse_request(model: type[RequestT], args: dict[str, Any]) -> RequestT:
    """Parse validated arguments into a request variant.

    Handlers call this regardless of the validation mode, so enum and
    nested-field violations are always rejected with a readable message.
    """
    try:
        return model.model_validate(args)
    except PydanticValidationError as exc:
        err = exc.errors()[0]
        location = ".".join(str(p) for p in err["loc"])
        if err["type"] == "missing":
            raise HandlerError(f"Missing required field: {location}") from exc
        raise HandlerError(f"Invalid value for '{location}': {err['msg']}") from exc
