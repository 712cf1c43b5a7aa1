"""Post aggregate - the durable record and its like ledger."""

from datetime import datetime
from typing import ClassVar, Self

import pydantic
from pydantic import model_validator
from pydantic_core import PydanticSerializationError

from blogstore.domain.auth.model.identity import Principal
from blogstore.domain.post.error import (
    AlreadyLikedError,
    CorruptRecordError,
    HasLikesError,
    MaxLikesReachedError,
    MinLikesReachedError,
    NotLikedError,
    RecordEncodingError,
)
from blogstore.domain.post.model.value import MAX_LIKES, LikeCount, PostContent, PostId
from blogstore.domain.shared.model.aggregate import Aggregate


class Post(Aggregate):
    """A post plus the set of principals who liked it.

    ``likes`` is stored alongside ``liked_by`` and must always equal its
    length; ``liked_by`` holds each principal at most once.
    """

    MAX_SIZE: ClassVar[int] = 1024

    id: PostId
    title: str
    content: str
    author: Principal
    created_at: datetime
    updated_at: datetime | None = None
    likes: LikeCount = 0
    categories: list[str] = []
    liked_by: list[Principal] = []

    @model_validator(mode="after")
    def _check_ledger(self) -> Self:
        if len(set(self.liked_by)) != len(self.liked_by):
            raise ValueError("liked_by contains duplicate principals")
        if self.likes != len(self.liked_by):
            raise ValueError(f"likes={self.likes} does not match {len(self.liked_by)} likers")
        return self

    @classmethod
    def new(
        cls, post_id: int, content: PostContent, author: Principal, created_at: datetime
    ) -> "Post":
        return cls(
            id=post_id,
            title=content.title,
            content=content.content,
            author=author,
            created_at=created_at,
            categories=list(content.categories),
        )

    # -------------------------------------------------------------------------
    # Codec
    # -------------------------------------------------------------------------

    def _dump(self) -> bytes:
        # In-place mutation skips validation; refuse anything the schema cannot
        # serialize instead of writing bytes that will not decode.
        try:
            return self.model_dump_json(warnings="error").encode("utf-8")
        except PydanticSerializationError as e:
            raise RecordEncodingError(
                f"Post {self.id} cannot be encoded: {e}", code="unencodable_record"
            ) from e

    def encode(self) -> bytes:
        data = self._dump()
        if len(data) > self.MAX_SIZE:
            raise RecordEncodingError(
                f"Post {self.id} encodes to {len(data)} bytes, limit is {self.MAX_SIZE}"
            )
        return data

    @classmethod
    def decode(cls, data: bytes) -> Self:
        try:
            return cls.model_validate_json(data)
        except pydantic.ValidationError as e:
            raise CorruptRecordError(f"Cannot decode post: {e.error_count()} error(s)") from e

    def encoded_size(self) -> int:
        return len(self._dump())

    # -------------------------------------------------------------------------
    # State transitions
    # -------------------------------------------------------------------------

    def revise(self, content: PostContent, at: datetime) -> None:
        """Replace the editable fields; author, likes and timestamps of creation stay put."""
        self.title = content.title
        self.content = content.content
        self.categories = list(content.categories)
        self.updated_at = at

    def add_like(self, principal: Principal) -> None:
        if self.likes >= MAX_LIKES:
            raise MaxLikesReachedError(f"Post {self.id} has reached the maximum number of likes")
        if principal in self.liked_by:
            raise AlreadyLikedError(f"{principal} already liked post {self.id}")
        self.liked_by.append(principal)
        self.likes += 1

    def remove_like(self, principal: Principal) -> None:
        if self.likes == 0:
            raise MinLikesReachedError(f"Post {self.id} has no likes")
        if principal not in self.liked_by:
            raise NotLikedError(f"{principal} has not liked post {self.id}")
        self.liked_by.remove(principal)
        self.likes -= 1

    def ensure_deletable(self) -> None:
        if self.likes > 0:
            raise HasLikesError(f"Post {self.id} has {self.likes} like(s) and cannot be deleted")
