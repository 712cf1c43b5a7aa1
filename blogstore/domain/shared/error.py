"""Error hierarchy for blogstore.

Error layers:
- StoreError: Base class for all blogstore errors
- DomainError: Business rule violations, validation failures (caller must fix input)
- InfrastructureError: Storage failures and broken internal invariants

Every error carries a human-readable ``message`` and a stable ``code`` that
callers can switch on without parsing text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from blogstore.domain.post.model.validation import Violation


class StoreError(Exception):
    """Base class for all blogstore errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (business logic violations)
# =============================================================================


class DomainError(StoreError):
    """Base class for domain/business errors."""


class NotFoundError(DomainError):
    """Resource not found."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message, code=code or "not_found")


class ValidationError(DomainError):
    """Input validation failed.

    ``violations`` holds every rule the input broke, not just the first one.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        violations: list[Violation] | None = None,
    ) -> None:
        super().__init__(message, code="validation_error")
        self.field = field
        self.violations = list(violations or [])


class InvalidStateError(DomainError):
    """Operation not allowed in current state."""


class ConflictError(DomainError):
    """Resource already exists or version conflict."""


class AuthorizationError(DomainError):
    """Caller not authorized for this operation."""


# =============================================================================
# Infrastructure Errors (system-level failures)
# =============================================================================


class InfrastructureError(StoreError):
    """Base class for infrastructure/system errors."""


class StorageUnavailableError(InfrastructureError):
    """Durable storage could not be opened or written."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
