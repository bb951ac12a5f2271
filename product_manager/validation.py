"""Translation of validation errors into per-field messages.

Both the JSON API and the HTML forms report failed validation as a
mapping of field name to a list of human-readable messages.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

VALIDATION_TITLE = "One or more validation errors occurred."

# Request parts FastAPI prefixes onto error locations
REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}

FIELD_LABELS = {
    "name": "Product Name",
    "description": "Description",
    "price": "Price",
    "quantity": "Stock Quantity",
}

REQUIRED_MESSAGES = {
    "name": "Product name is required",
    "description": "Description is required",
    "price": "Price is required",
    "quantity": "Quantity is required",
}

RANGE_MESSAGES = {
    "name": "Name must be between 2 and 100 characters",
    "description": "Description must be between 10 and 500 characters",
    "price": "Price must be between 0.01 and 999,999.99",
    "quantity": "Quantity must be a positive number",
}

# Error types meaning the field was effectively not supplied
REQUIRED_ERROR_TYPES = {"missing", "blank"}

RANGE_ERROR_TYPES = {
    "string_too_short",
    "string_too_long",
    "greater_than",
    "greater_than_equal",
    "less_than",
    "less_than_equal",
}


def error_field(loc: Sequence[Any]) -> str:
    """Return the field name an error location points at.

    ("body", "name") -> "name"; ("body",) -> "" for a whole-body error.
    """
    parts = list(loc)
    if parts and parts[0] in REQUEST_LOCATIONS:
        parts = parts[1:]
    return str(parts[-1]) if parts else ""


def error_message(field: str, error_type: str, default: str) -> str:
    """Pick the message for a single validation error."""
    if error_type in REQUIRED_ERROR_TYPES and field in REQUIRED_MESSAGES:
        return REQUIRED_MESSAGES[field]
    if error_type in RANGE_ERROR_TYPES and field in RANGE_MESSAGES:
        return RANGE_MESSAGES[field]
    return default


def collect_errors(errors: Iterable[Mapping[str, Any]]) -> dict[str, list[str]]:
    """Group validation errors by field, dropping duplicate messages.

    Args:
        errors: Error dicts as returned by ``ValidationError.errors()``
            or ``RequestValidationError.errors()``.

    Returns:
        Mapping of field name to its messages, in first-seen order.
    """
    collected: dict[str, list[str]] = {}
    for error in errors:
        field = error_field(error.get("loc", ()))
        message = error_message(field, error.get("type", ""), error.get("msg", ""))
        messages = collected.setdefault(field, [])
        if message not in messages:
            messages.append(message)
    return collected


def validation_problem(errors: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
    """Build the JSON body returned for a failed request validation."""
    return {
        "type": "validation_error",
        "title": VALIDATION_TITLE,
        "status": 400,
        "errors": collect_errors(errors),
    }
