from datetime import UTC, datetime

import pytest

from blogstore.domain.auth.model.identity import Principal
from blogstore.domain.post.model.aggregate import Post
from blogstore.domain.post.model.validation import (
    check_encoded_size,
    require_valid,
    validate_content,
)
from blogstore.domain.post.model.value import PostContent
from blogstore.domain.shared.error import ValidationError


class TestValidateContent:
    def test_valid_content_has_no_violations(self):
        assert validate_content(PostContent(title="Hi", content="Hello world")) == []

    def test_minimum_lengths_are_inclusive(self):
        assert validate_content(PostContent(title="H", content="Hello")) == []

    def test_short_content_reported(self):
        violations = validate_content(PostContent(title="Hi", content="Hell"))

        assert [(v.field, v.rule) for v in violations] == [("content", "min_length")]

    def test_all_violations_collected(self):
        violations = validate_content(PostContent(title="", content="x"))

        assert [(v.field, v.rule) for v in violations] == [
            ("title", "min_length"),
            ("content", "min_length"),
        ]

    def test_length_counts_characters_not_bytes(self):
        assert validate_content(PostContent(title="é", content="héllo")) == []


class TestRequireValid:
    def test_raises_with_every_violation(self):
        with pytest.raises(ValidationError) as exc_info:
            require_valid(PostContent(title="", content="x"))

        error = exc_info.value
        assert error.code == "validation_error"
        assert {v.field for v in error.violations} == {"title", "content"}
        assert error.field is None

    def test_single_violation_sets_field(self):
        with pytest.raises(ValidationError) as exc_info:
            require_valid(PostContent(title="", content="Hello world"))

        assert exc_info.value.field == "title"

    def test_valid_content_passes(self):
        require_valid(PostContent(title="Hi", content="Hello world"))


class TestCheckEncodedSize:
    def _post(self, content: str) -> Post:
        return Post(
            id=0,
            title="Hi",
            content=content,
            author=Principal("alice"),
            created_at=datetime(2026, 1, 1, tzinfo=UTC),
        )

    def test_small_post_fits(self):
        assert check_encoded_size(self._post("Hello world")) is None

    def test_oversize_post_reported(self):
        violation = check_encoded_size(self._post("x" * 1024))

        assert violation is not None
        assert violation.field == "post"
        assert violation.rule == "max_encoded_size"
