"""User-friendly error messages for Pydantic validation errors.

Belongs to the Application layer. Translates Pydantic machine errors
raised while validating front matter (signature pages) and settings into
messages fit for the one-line failure notice.
"""

from __future__ import annotations

from typing import Any

# Maps (field, error_type) → message
_ERROR_MAP: dict[tuple[str, str], str] = {
    ("name", "missing"): "Each signing entity needs a name.",
    ("name", "string_type"): "Signer and entity names must be text.",
    ("term", "string_type"): "The signature page term must be text, e.g. 'Landlord'.",
    ("information", "list_type"): "Signature information must be a list, e.g. [date, email].",
    ("entities", "list_type"): "Signature entities must be a list.",
    ("samePage", "bool_parsing"): "samePage must be true or false.",
    ("default_numbering", "literal_error"): "Default numbering must be 'outline' or 'decimal'.",
    ("log_level", "literal_error"): "Log level must be DEBUG, INFO, WARNING or ERROR.",
    ("encoding", "value_error"): "Encoding must be a known codec name, e.g. 'utf-8'.",
}


def friendly_error(
    field: str,
    error_type: str,
    fallback: str | None = None,
) -> str:
    """Return a user-friendly error message.

    Args:
        field: The dotted Pydantic location that failed validation.
        error_type: The Pydantic error type string (e.g., ``missing``).
        fallback: Fallback message if no mapping exists.

    Returns:
        A user-friendly error string.
    """
    leaf = field.rsplit(".", 1)[-1]
    message = _ERROR_MAP.get((leaf, error_type))
    if message:
        return message
    if error_type == "extra_forbidden":
        return f"Unknown field '{leaf}'."
    return fallback or f"Validation error on field '{field}'."


def format_validation_errors(errors: list[dict[str, Any]]) -> list[str]:
    """Convert a list of Pydantic error dicts to user-friendly messages.

    Args:
        errors: Output of ``ValidationError.errors()``.

    Returns:
        List of user-friendly error strings.
    """
    result: list[str] = []
    for err in errors:
        field = ".".join(str(loc) for loc in err.get("loc", []))
        error_type = err.get("type", "")
        result.append(friendly_error(field, error_type, fallback=err.get("msg")))
    return result
