"""Column types shared by the models.

JSONB on PostgreSQL, plain JSON elsewhere (the aiosqlite test database).
"""

from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB

JSONDocument = JSON().with_variant(JSONB(), "postgresql")
