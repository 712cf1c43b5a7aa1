"""Pin the stable error codes callers switch on."""

import pytest

from blogstore.domain.post.error import (
    AlreadyLikedError,
    CapacityExhaustedError,
    CorruptRecordError,
    HasLikesError,
    MaxLikesReachedError,
    MinLikesReachedError,
    NotLikedError,
    RecordEncodingError,
)
from blogstore.domain.shared.error import (
    DomainError,
    InfrastructureError,
    NotFoundError,
    StoreError,
    ValidationError,
)


@pytest.mark.parametrize(
    ("error", "code", "layer"),
    [
        (NotFoundError("x"), "not_found", DomainError),
        (ValidationError("x"), "validation_error", DomainError),
        (HasLikesError("x"), "has_likes", DomainError),
        (AlreadyLikedError("x"), "already_liked", DomainError),
        (NotLikedError("x"), "not_liked", DomainError),
        (MaxLikesReachedError("x"), "max_likes_reached", DomainError),
        (MinLikesReachedError("x"), "min_likes_reached", DomainError),
        (CapacityExhaustedError("x"), "capacity_exhausted", DomainError),
        (RecordEncodingError("x"), "record_too_large", InfrastructureError),
        (CorruptRecordError("x"), "corrupt_record", InfrastructureError),
    ],
)
def test_error_code_and_layer(error: StoreError, code: str, layer: type) -> None:
    assert error.code == code
    assert isinstance(error, layer)
    assert error.message == "x"
    assert str(error) == "x"


def test_code_defaults_to_class_name() -> None:
    assert StoreError("boom").code == "StoreError"


def test_validation_error_carries_field_and_violations() -> None:
    error = ValidationError("bad", field="title")

    assert error.field == "title"
    assert error.violations == []
