"""Resource-level authorization checks used inside services."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


def require_principal(identity: Any) -> Any:
    """Return ``identity`` if it is a Principal, else raise ``missing_token``."""
    from blogstore.domain.auth.model.identity import Principal
    from blogstore.domain.shared.error import AuthorizationError

    if not isinstance(identity, Principal):
        raise AuthorizationError("Authentication required", code="missing_token")
    return identity


class ResourceCheck(ABC):
    """Base class for resource-level authorization checks.

    Only a Principal can pass a resource check; any other identity is rejected
    as unauthenticated before the concrete check runs.
    """

    def evaluate(self, identity: Any, resource: Any) -> None:
        """Raise AuthorizationError unless ``identity`` may act on ``resource``."""
        self._check(require_principal(identity), resource)

    @abstractmethod
    def _check(self, principal: Any, resource: Any) -> None: ...


@dataclass(frozen=True)
class AuthorCheck(ResourceCheck):
    """Check that the principal authored the resource (resource.author == principal)."""

    def _check(self, principal: Any, resource: Any) -> None:
        from blogstore.domain.shared.error import AuthorizationError

        author = getattr(resource, "author", None)
        if author is None or author != principal:
            raise AuthorizationError(
                f"Access denied: {principal} is not the author",
                code="not_authorized",
            )


_AUTHOR = AuthorCheck()


def author() -> AuthorCheck:
    return _AUTHOR
