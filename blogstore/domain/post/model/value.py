"""Value objects and numeric bounds for posts."""

from typing import Annotated

from pydantic import Field

from blogstore.domain.shared.model.value import ValueObject

U64_MAX = 2**64 - 1
U32_MAX = 2**32 - 1

MAX_POST_ID = U64_MAX
"""Ceiling of the identifier space; the allocator refuses to move past it."""

MAX_LIKES = U32_MAX

PostId = Annotated[int, Field(ge=0, le=MAX_POST_ID)]
LikeCount = Annotated[int, Field(ge=0, le=MAX_LIKES)]


class PostContent(ValueObject):
    """User-supplied fields of a post, as accepted by create and update.

    Not validated on construction; field rules are checked by
    ``validation.validate_content`` so every violation can be reported at once.
    """

    title: str
    content: str
    categories: list[str] = []
