# =============================================================================
# stripe_tax/validation.py  —  Schema Validator
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Checks untrusted tool arguments against a Draft 7 JSON Schema and, when
#   they pass, NARROWS them: only the fields the schema declares survive,
#   and declared defaults are filled in for omitted optional fields.
#
# TWO PASSES:
#   1. jsonschema.Draft7Validator collects every violation.  Required
#      fields, primitive types, enums and nested shapes are all enforced
#      here (e.g. address_source must be "shipping" or "billing").
#   2. _narrow() walks the schema and the (now known-good) value together
#      and rebuilds the value from declared properties only.
#
#   Handlers therefore never see a key the schema does not mention, and a
#   stray "starting_after" typo in a caller's bag cannot leak to Stripe.
# =============================================================================

import logging
from enum import Enum
from typing import Any

import jsonschema
from jsonschema import Draft7Validator

logger = logging.getLogger(__name__)


class ValidationErrorCode(str, Enum):
    """Standardized validation error codes."""

    SCHEMA_INVALID = "SCHEMA_INVALID"  # Input violates the JSON Schema
    SCHEMA_MALFORMED = "SCHEMA_MALFORMED"  # Schema itself is invalid


class SchemaValidationError(Exception):
    """Raised when schema validation fails.

    Attributes:
        code: Standardized error code
        message: Human-readable error description (all violations)
        path: Dotted path to the first invalid field ("" for the root)
        schema_path: Path within the schema that the first violation hit
        errors: Every violation rendered as "<path>: <message>"
    """

    def __init__(
        self,
        code: ValidationErrorCode,
        message: str,
        path: str = "",
        schema_path: str = "",
        errors: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.path = path
        self.schema_path = schema_path
        self.errors = errors or []


def _dotted(parts) -> str:
    return ".".join(str(p) for p in parts)


def _describe(error: jsonschema.ValidationError) -> str:
    """Render one violation as '<field path>: <message>'."""
    path = _dotted(error.absolute_path)
    return f"{path or '<arguments>'}: {error.message}"


class SchemaValidator:
    """Validates and narrows data against JSON Schema.

    Uses the Draft 7 JSON Schema specification.  Stateless; a single
    instance is shared by every invocation.
    """

    def validate(self, data: Any, schema: dict[str, Any]) -> Any:
        """Validate data against a schema and return the narrowed value.

        Args:
            data: Untrusted value (typically the tool's argument dict)
            schema: JSON Schema to validate against

        Returns:
            A new value holding only declared fields, with defaults applied

        Raises:
            SchemaValidationError: SCHEMA_INVALID if data violates the schema,
                SCHEMA_MALFORMED if the schema itself is broken
        """
        try:
            Draft7Validator.check_schema(schema)
        except jsonschema.exceptions.SchemaError as e:
            raise SchemaValidationError(
                code=ValidationErrorCode.SCHEMA_MALFORMED,
                message=f"Schema is malformed: {e.message}",
            ) from e

        validator = Draft7Validator(schema)
        errors = sorted(
            validator.iter_errors(data),
            key=lambda e: [str(p) for p in e.absolute_path],
        )
        if errors:
            first = errors[0]
            rendered = [_describe(e) for e in errors]
            raise SchemaValidationError(
                code=ValidationErrorCode.SCHEMA_INVALID,
                message="; ".join(rendered),
                path=_dotted(first.absolute_path),
                schema_path=_dotted(first.absolute_schema_path),
                errors=rendered,
            )

        return _narrow(schema, data)


def _narrow(schema: dict[str, Any], value: Any) -> Any:
    """Rebuild value from the fields schema declares.

    Only called on values that already passed validation, so shapes match.
    """
    if isinstance(value, dict) and "properties" in schema:
        narrowed = {}
        for key, subschema in schema["properties"].items():
            if key in value:
                narrowed[key] = _narrow(subschema, value[key])
            elif "default" in subschema:
                narrowed[key] = subschema["default"]
        dropped = set(value) - set(schema["properties"])
        if dropped:
            logger.debug("Dropping undeclared fields: %s", sorted(dropped))
        return narrowed

    if isinstance(value, list) and isinstance(schema.get("items"), dict):
        return [_narrow(schema["items"], item) for item in value]

    return value
