"""
Wisdom Lenses — User memos

Free-text notes attached to a hexagram.  Whoever holds the username and
the edit token chosen at creation may change or remove a memo; the token is
kept Fernet-encrypted and never leaves the service.
"""

from __future__ import annotations

import uuid

import structlog
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from wisdom_lenses.exceptions import NotFoundError, PermissionDeniedError, ValidationError
from wisdom_lenses.models.memo import UserMemo
from wisdom_lenses.services.hexagram_store import validate_number
from wisdom_lenses.utils.encryption import encrypt_token, token_matches

logger = structlog.get_logger("wisdom_lenses.memo_service")

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


def _require_text(value: str | None, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return value


class MemoService:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(
        self,
        username: str,
        token: str,
        hexagram_number: int,
        memo: str,
    ) -> UserMemo:
        row = UserMemo(
            username=_require_text(username, "username").strip(),
            edit_token=encrypt_token(_require_text(token, "password")),
            hexagram_number=validate_number(hexagram_number),
            memo=_require_text(memo, "memo"),
        )
        self.session.add(row)
        await self.session.flush()
        await self.session.refresh(row)
        logger.info(
            "memo_created",
            memo_id=str(row.id),
            username=row.username,
            hexagram=row.hexagram_number,
        )
        return row

    async def list(
        self,
        hexagram_number: int | None = None,
        username: str | None = None,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> tuple[list[UserMemo], int]:
        """Newest first; returns ``(memos, total)`` for the filter."""
        page = max(page, 1)
        page_size = min(max(page_size, 1), MAX_PAGE_SIZE)

        filters = []
        if hexagram_number is not None:
            filters.append(UserMemo.hexagram_number == validate_number(hexagram_number))
        if username:
            filters.append(UserMemo.username == username)

        stmt = (
            select(UserMemo)
            .where(*filters)
            .order_by(UserMemo.created_at.desc(), UserMemo.id)
            .offset((page - 1) * page_size)
            .limit(page_size)
        )
        memos = list((await self.session.execute(stmt)).scalars().all())

        total = (
            await self.session.execute(
                select(func.count()).select_from(UserMemo).where(*filters)
            )
        ).scalar_one()
        return memos, int(total)

    async def update(
        self,
        memo_id: uuid.UUID,
        username: str,
        token: str,
        memo: str,
    ) -> UserMemo:
        memo = _require_text(memo, "memo")
        row = await self._authorised(memo_id, username, token)
        row.memo = memo
        await self.session.flush()
        await self.session.refresh(row)
        logger.info("memo_updated", memo_id=str(row.id))
        return row

    async def delete(self, memo_id: uuid.UUID, username: str, token: str) -> None:
        row = await self._authorised(memo_id, username, token)
        await self.session.delete(row)
        await self.session.flush()
        logger.info("memo_deleted", memo_id=str(memo_id))

    async def _authorised(
        self,
        memo_id: uuid.UUID,
        username: str,
        token: str,
    ) -> UserMemo:
        _require_text(username, "username")
        _require_text(token, "password")

        row = await self.session.get(UserMemo, memo_id)
        if row is None:
            raise NotFoundError(f"Memo {memo_id} does not exist")
        if row.username != username.strip() or not token_matches(row.edit_token, token):
            logger.warning("memo_permission_denied", memo_id=str(memo_id))
            raise PermissionDeniedError("Username or password does not match")
        return row
