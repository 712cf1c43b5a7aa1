"""SQLAlchemy table definitions for the durable region.

The layout is two regions:
- ``cells``: fixed-width single-value slots (the post id counter lives here)
- ``posts``: the ordered id -> encoded post map

Keys are 8-byte big-endian integers, so blob order is numeric order. The value
widths and encodings are part of the on-disk format; changing them needs a
migration.
"""

from sqlalchemy import Column, LargeBinary, MetaData, String, Table

metadata = MetaData()

KEY_WIDTH = 8
CELL_WIDTH = 8

# ============================================================================
# CELLS TABLE (fixed-size durable values)
# ============================================================================
cells_table = Table(
    "cells",
    metadata,
    Column("slot", String(64), primary_key=True),
    Column("value", LargeBinary(CELL_WIDTH), nullable=False),
)


# ============================================================================
# POSTS TABLE (id -> encoded post)
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("key", LargeBinary(KEY_WIDTH), primary_key=True),
    Column("value", LargeBinary, nullable=False),
)

POST_ID_COUNTER_SLOT = "post_id_counter"
