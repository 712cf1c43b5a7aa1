"""Identity types - who is invoking an operation.

The surrounding request context authenticates callers; this package only
receives the result. A ``Principal`` is a trusted, authenticated caller and an
``Anonymous`` identity is everything else.
"""

from dataclasses import dataclass

from pydantic import field_validator

from blogstore.domain.shared.model.value import RootValueObject


class Identity:
    """Base for anything that can invoke an operation."""


@dataclass(frozen=True)
class Anonymous(Identity):
    """An unauthenticated caller."""


class Principal(RootValueObject[str], Identity):
    """An authenticated caller, identified by its textual principal id."""

    @field_validator("root")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Principal id must not be blank")
        return v

    def __str__(self) -> str:
        return self.root

    def __hash__(self) -> int:
        return hash(self.root)
