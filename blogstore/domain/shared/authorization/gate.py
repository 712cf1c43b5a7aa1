"""Handler-level authorization gates: public() and authenticated()."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger("blogstore.authz")


class Gate:
    """Base for handler-level authorization gates.

    Every CommandHandler/QueryHandler must declare ``__auth__: ClassVar[Gate]``.
    """

    def enforce(self, handler: Any) -> None:
        raise NotImplementedError


@dataclass(frozen=True)
class Public(Gate):
    """No authentication required."""

    def enforce(self, handler: Any) -> None:
        return None


@dataclass(frozen=True)
class Authenticated(Gate):
    """Requires the handler's ``identity`` to be a Principal."""

    def enforce(self, handler: Any) -> None:
        from blogstore.domain.auth.model.identity import Principal
        from blogstore.domain.shared.error import AuthorizationError

        identity = getattr(handler, "identity", None)
        logger.debug("Auth check: handler=%s, identity=%r", type(handler).__name__, identity)
        if not isinstance(identity, Principal):
            raise AuthorizationError("Authentication required", code="missing_token")


_PUBLIC = Public()
_AUTHENTICATED = Authenticated()


def public() -> Public:
    """Mark a handler as publicly accessible (no auth required)."""
    return _PUBLIC


def authenticated() -> Authenticated:
    """Mark a handler as requiring an authenticated principal."""
    return _AUTHENTICATED


def enforce_gate(handler: Any) -> None:
    """Evaluate the ``__auth__`` gate declared on the handler's class."""
    from blogstore.domain.shared.error import ConfigurationError

    gate = getattr(type(handler), "__auth__", None)
    if not isinstance(gate, Gate):
        raise ConfigurationError(f"Handler {type(handler).__name__} has no __auth__ declaration")
    gate.enforce(handler)
