"""Field-level rules for user-supplied post content.

Everything here is pure: no I/O, no mutation. Rules are evaluated together so
a single failure reports every problem with the input.
"""

from blogstore.domain.post.model.aggregate import Post
from blogstore.domain.post.model.value import PostContent
from blogstore.domain.shared.error import ValidationError
from blogstore.domain.shared.model.value import ValueObject

TITLE_MIN_LENGTH = 1
CONTENT_MIN_LENGTH = 5


class Violation(ValueObject):
    field: str
    rule: str
    message: str


def validate_content(content: PostContent) -> list[Violation]:
    """Return every rule ``content`` breaks (empty list when valid)."""
    violations: list[Violation] = []
    if len(content.title) < TITLE_MIN_LENGTH:
        violations.append(
            Violation(
                field="title",
                rule="min_length",
                message=f"title must be at least {TITLE_MIN_LENGTH} character(s)",
            )
        )
    if len(content.content) < CONTENT_MIN_LENGTH:
        violations.append(
            Violation(
                field="content",
                rule="min_length",
                message=f"content must be at least {CONTENT_MIN_LENGTH} characters",
            )
        )
    return violations


def check_encoded_size(post: Post) -> Violation | None:
    size = post.encoded_size()
    if size > Post.MAX_SIZE:
        return Violation(
            field="post",
            rule="max_encoded_size",
            message=f"post encodes to {size} bytes, limit is {Post.MAX_SIZE}",
        )
    return None


def raise_for(violations: list[Violation]) -> None:
    """Raise a ValidationError carrying ``violations`` if there are any."""
    if not violations:
        return
    fields = ", ".join(v.field for v in violations)
    raise ValidationError(
        f"Invalid post: {fields}",
        field=violations[0].field if len(violations) == 1 else None,
        violations=violations,
    )


def require_valid(content: PostContent) -> None:
    raise_for(validate_content(content))
