from blogstore.domain.post.util.di.provider import PostProvider

__all__ = ["PostProvider"]
