"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class SourceError(DomainError):
    """Journal data could not be obtained from its source."""


def missing_token() -> str:
    """Return message for a request made without a bearer token."""
    return "No authentication token found"


def http_status_error(status_code: int) -> str:
    """Return message for a non-success HTTP status."""
    return f"HTTP error! status: {status_code}"


def fetch_failed(message: str | None = None) -> str:
    """Return message for an unsuccessful API envelope."""
    return message or "Failed to fetch"


def input_file_not_found(path: str) -> str:
    """Return message for a missing JSON input file."""
    return f"Input file '{path}' not found"


def invalid_date_window(start: object, end: object) -> str:
    """Return message when the start date falls after the end date."""
    return f"Start date {start} is after end date {end}"
