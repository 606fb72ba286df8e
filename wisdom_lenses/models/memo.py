"""
Wisdom Lenses — User memo model.

``edit_token`` holds the Fernet-encrypted shared secret presented on update
and delete.  It is not a credential system: anyone holding the username and
token may edit the memo.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, Integer, LargeBinary, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from wisdom_lenses.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserMemo(Base):
    __tablename__ = "user_memos"
    __table_args__ = (
        Index("ix_user_memos_hexagram_created", "hexagram_number", "created_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    username: Mapped[str] = mapped_column(String, index=True, nullable=False)
    edit_token: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
    hexagram_number: Mapped[int] = mapped_column(
        Integer, index=True, nullable=False
    )
    memo: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), onupdate=func.now(), nullable=True
    )

    def __repr__(self) -> str:
        return f"<UserMemo {self.username!r} hexagram={self.hexagram_number}>"
