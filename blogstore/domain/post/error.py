"""Post-specific failures, each a distinct kind with a stable code."""

from blogstore.domain.shared.error import (
    ConflictError,
    InfrastructureError,
    InvalidStateError,
)


class HasLikesError(InvalidStateError):
    """Delete attempted on a post that still has likes."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="has_likes")


class AlreadyLikedError(ConflictError):
    """The caller has already liked this post."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="already_liked")


class NotLikedError(InvalidStateError):
    """The caller has no like on this post to remove."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="not_liked")


class MaxLikesReachedError(InvalidStateError):
    def __init__(self, message: str) -> None:
        super().__init__(message, code="max_likes_reached")


class MinLikesReachedError(InvalidStateError):
    def __init__(self, message: str) -> None:
        super().__init__(message, code="min_likes_reached")


class CapacityExhaustedError(InvalidStateError):
    """The identifier space is used up; no further posts can be created."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="capacity_exhausted")


class RecordEncodingError(InfrastructureError):
    """A record could not be encoded: past its size bound, or holding a value
    its schema cannot serialize."""

    def __init__(self, message: str, code: str = "record_too_large") -> None:
        super().__init__(message, code=code)


class CorruptRecordError(InfrastructureError):
    """Stored bytes could not be decoded into a valid record."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="corrupt_record")
