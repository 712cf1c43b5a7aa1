"""Custom Dishka scopes for blogstore."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """Dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Process lifetime (the store, its engine and lock)
    - UOW: One operation invoked by one caller
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
