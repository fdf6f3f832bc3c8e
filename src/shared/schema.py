"""JSON Schema validation utilities and shared schema fragments."""

from typing import Any

from jsonschema import Draft7Validator

# Field kinds accepted by DocuSeal when defining template fields
FIELD_TYPES = [
    "text",
    "signature",
    "date",
    "checkbox",
    "radio",
    "select",
    "phone",
    "email",
    "number",
    "image",
    "file",
]

SUBMITTER_ORDERS = ["preserved", "random"]

MESSAGE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "subject": {"type": "string"},
        "body": {"type": "string"}
    },
    "description": "Custom email message"
}


def validate_schema(data: Any, schema: dict[str, Any]) -> tuple[bool, list[str]]:
    """
    Validate data against a JSON Schema.
    
    Args:
        data: The data to validate
        schema: JSON Schema to validate against
    
    Returns:
        Tuple of (is_valid, list of error messages)
    """
    if not schema:
        return True, []
    
    validator = Draft7Validator(schema)
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
    
    if not errors:
        return True, []
    
    error_messages = [
        f"{'.'.join(str(p) for p in e.path)}: {e.message}" if e.path else e.message
        for e in errors
    ]
    
    return False, error_messages


def id_property(description: str) -> dict[str, Any]:
    """Schema for a numeric DocuSeal resource id."""
    return {"type": "number", "description": description}


def limit_property(resource: str) -> dict[str, Any]:
    """Schema for the page size accepted by list endpoints."""
    return {
        "type": "number",
        "description": f"Number of {resource} to return (max 100)",
        "default": 10,
    }
