"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class InvalidAmountError(ValidationError):
    """Amount is negative, not a number, or not finite."""


class UnknownPurposeError(ValidationError):
    """Advance purpose has no ledger classification."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


class StorageError(DomainError):
    """The backing store rejected or failed an operation."""


def site_not_found(site_id: int) -> str:
    """Return message for missing site."""
    return f"Site {site_id} not found"


def site_name_not_found(name: str) -> str:
    """Return message for missing site by name."""
    return f"Site '{name}' not found"


def duplicate_site_name(name: str) -> str:
    """Return message for duplicate site name."""
    return f"Site with name '{name}' already exists"


def record_not_found(kind: str, record_id: int) -> str:
    """Return message for a missing expense, advance, funds entry or invoice."""
    return f"{kind} {record_id} not found"


def invalid_amount(value: object, reason: str) -> str:
    """Return message for an amount that cannot enter the ledger."""
    return f"Invalid amount {value}: {reason}"


def unknown_purpose(purpose: object) -> str:
    """Return message for an advance purpose without a classification."""
    return f"Advance purpose {purpose!r} has no ledger classification"


def completion_before_start(completion_date, start_date) -> str:
    """Return message when a site would complete before it started."""
    return f"Completion date {completion_date} is before start date {start_date}"


def site_delete_blocked(site_id: int, counts: dict[str, int]) -> str:
    """Return message when a site still has recorded transactions."""
    parts = [
        f"{count} {kind}{'s' if count != 1 else ''}"
        for kind, count in counts.items()
        if count > 0
    ]
    return (
        f"Cannot delete site {site_id}: it has {', '.join(parts)}. "
        "Please delete them first."
    )


def operation_failed(operation: str) -> str:
    """Return generic message for a storage failure."""
    return f"Failed to {operation}. Please try again."
