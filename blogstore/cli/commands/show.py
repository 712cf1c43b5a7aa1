"""Show command - print one post."""

import asyncio
import sys

import cyclopts

from blogstore.application.di import create_container
from blogstore.cli.console import get_console
from blogstore.domain.auth.model.identity import Anonymous, Identity
from blogstore.domain.post.model.value import MAX_POST_ID
from blogstore.domain.post.query.get_post import GetPost, GetPostHandler, PostDetail
from blogstore.domain.shared.error import NotFoundError, StoreError

app = cyclopts.App(name="show", help="Show a post")


async def _get(post_id: int) -> PostDetail:
    container = create_container()
    try:
        async with container(context={Identity: Anonymous()}) as uow:
            handler = await uow.get(GetPostHandler)
            return await handler.run(GetPost(id=post_id))
    finally:
        await container.close()


@app.default
def show(post_id: int) -> None:
    """Show the post stored under POST_ID.

    Args:
        post_id: Numeric post id.
    """
    console = get_console()
    if not 0 <= post_id <= MAX_POST_ID:
        console.error(f"Invalid post id: {post_id}", hint=f"Post ids range from 0 to {MAX_POST_ID}")
        sys.exit(1)

    try:
        post = asyncio.run(_get(post_id))
    except NotFoundError as e:
        console.error(e.message, hint="Use 'blogstore db stats' to see the live id range")
        sys.exit(1)
    except StoreError as e:
        console.error(e.message, hint=f"code: {e.code}")
        sys.exit(1)

    console.post_detail(post)
