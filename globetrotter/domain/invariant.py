"""Validation guards applied before any data access."""
from typing import Sequence

from globetrotter.domain.errors import InvalidInputError, NoDataError


def validate_catalog_not_empty(catalog: Sequence) -> None:
    """Raises if there is nothing to ask about."""
    if not catalog:
        raise NoDataError("No destinations available.")


def validate_positive_count(name: str, value: int) -> None:
    """Raises if a requested count is not a positive integer."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidInputError(f"{name} must be a positive integer. Got: {value!r}.")


def validate_required_fields(**fields) -> None:
    """Raises on the first missing or empty field."""
    for name, value in fields.items():
        if value is None or value == "":
            raise InvalidInputError(f"Missing required field: {name}.")


def validate_username(username: str | None) -> str:
    """Returns the normalized username or raises."""
    if username is None or not username.strip():
        raise InvalidInputError("Username is required.")
    return username.strip()


def validate_identifier(name: str, value: str | None) -> None:
    """Raises if an id is missing or blank."""
    if value is None or not str(value).strip():
        raise InvalidInputError(f"Missing required field: {name}.")
