"""
Wisdom Lenses — HexagramStore: persistence for the 64-entry catalog

All reads and writes of ``Hexagram`` rows go through this class.  It is
constructed per request with the session from ``get_db`` (or a session the
caller opened itself in scripts and tests):

- Lookup by number validates the 1..64 range before touching the database
- Keyword search is a case-insensitive substring match over name, core
  viewpoint, summary and every keyword
- Partial updates are restricted to an allow-list of editable fields
- Keywords default to the distinct words of name, core viewpoint and
  mental models when a new entry omits them
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

import structlog
from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from wisdom_lenses.exceptions import ConflictError, NotFoundError, ValidationError
from wisdom_lenses.models.hexagram import Hexagram

logger = structlog.get_logger("wisdom_lenses.hexagram_store")

MIN_NUMBER = 1
MAX_NUMBER = 64

# Fields an edit request may touch.  number, symbol and perspectives are
# fixed once an entry exists.
ALLOWED_UPDATE_FIELDS: frozenset[str] = frozenset({
    "name",
    "korean_name",
    "core_viewpoint",
    "mental_models",
    "summary",
    "keywords",
})

REQUIRED_FIELDS: tuple[str, ...] = (
    "number", "symbol", "name", "core_viewpoint", "summary",
)

_WORD_RE = re.compile(r"[\uac00-\ud7af\w]+")


def validate_number(number: Any) -> int:
    """Return ``number`` as an int, or raise ``ValidationError`` outside 1..64."""
    try:
        value = int(number)
    except (TypeError, ValueError):
        raise ValidationError(
            f"Hexagram number must be an integer, got {number!r}"
        ) from None
    if isinstance(number, float) and number != value:
        raise ValidationError(f"Hexagram number must be an integer, got {number!r}")
    if not MIN_NUMBER <= value <= MAX_NUMBER:
        raise ValidationError(
            f"Invalid hexagram number {value}. Must be between "
            f"{MIN_NUMBER} and {MAX_NUMBER}."
        )
    return value


def extract_keywords(
    name: str,
    core_viewpoint: str | None = None,
    mental_models: str | None = None,
) -> list[str]:
    """Distinct words of the name, core viewpoint and mental models.

    The name is always the first keyword; order of first appearance is kept.
    """
    candidates = [name.strip()] if name and name.strip() else []
    for text in (core_viewpoint, mental_models):
        if text:
            candidates.extend(_WORD_RE.findall(text))
    return list(dict.fromkeys(candidates))


def hexagram_matches(hexagram: Any, keyword: str) -> bool:
    """Case-insensitive substring test used by keyword search."""
    needle = keyword.strip().lower()
    if not needle:
        return False
    haystacks: list[str] = [
        hexagram.name or "",
        hexagram.core_viewpoint or "",
        hexagram.summary or "",
        *(hexagram.keywords or []),
    ]
    return any(needle in str(h).lower() for h in haystacks)


class HexagramStore:
    """Query and mutate the hexagram catalog through one ``AsyncSession``."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    # ── Reads ─────────────────────────────────────────────────────────

    async def find_by_number(self, number: Any) -> Hexagram | None:
        value = validate_number(number)
        return await self.session.get(Hexagram, value)

    async def get_by_number(self, number: Any) -> Hexagram:
        hexagram = await self.find_by_number(number)
        if hexagram is None:
            raise NotFoundError(f"Hexagram number {int(number)} not found")
        return hexagram

    async def find_random(self) -> Hexagram | None:
        stmt = select(Hexagram).order_by(func.random()).limit(1)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def find_all(
        self,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Hexagram]:
        stmt = select(Hexagram).order_by(Hexagram.number).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(Hexagram)
        )
        return int(result.scalar_one())

    async def search_by_keyword(
        self,
        keyword: str,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Hexagram]:
        """Entries whose name, core viewpoint, summary or keywords contain
        ``keyword``, ordered by number.

        Matching happens in Python over the (at most 64-row) catalog so the
        JSON keyword list is searched identically on every database.
        """
        matches = await self._matching(keyword)
        end = None if limit is None else offset + limit
        return matches[offset:end]

    async def count_by_keyword(self, keyword: str) -> int:
        return len(await self._matching(keyword))

    async def _matching(self, keyword: str) -> list[Hexagram]:
        return [h for h in await self.find_all() if hexagram_matches(h, keyword)]

    # ── Writes ────────────────────────────────────────────────────────

    async def create(self, data: dict[str, Any]) -> Hexagram:
        """Insert one entry; a number already in the catalog is a conflict."""
        row = self._build_row(data)
        if await self.session.get(Hexagram, row.number) is not None:
            raise ConflictError(f"Hexagram number {row.number} already exists")
        self.session.add(row)
        await self.session.flush()
        await self.session.refresh(row)
        logger.info("hexagram_created", number=row.number, name=row.name)
        return row

    async def seed(self, records: Iterable[dict[str, Any]]) -> int:
        """Replace the whole catalog with ``records``; returns the count."""
        rows = [self._build_row(r) for r in records]
        await self.session.execute(delete(Hexagram))
        self.session.add_all(rows)
        await self.session.flush()
        logger.info("hexagrams_seeded", inserted=len(rows))
        return len(rows)

    async def update(self, number: Any, fields: dict[str, Any]) -> Hexagram:
        """Apply the allow-listed subset of ``fields`` to one entry."""
        value = validate_number(number)
        changes = {k: v for k, v in fields.items() if k in ALLOWED_UPDATE_FIELDS}
        if not changes:
            raise ValidationError(
                "No updatable fields provided. Allowed fields: "
                + ", ".join(sorted(ALLOWED_UPDATE_FIELDS))
            )

        hexagram = await self.get_by_number(value)
        for key, new_value in changes.items():
            setattr(hexagram, key, new_value)
        await self.session.flush()
        await self.session.refresh(hexagram)

        logger.info(
            "hexagram_updated", number=value, fields=sorted(changes.keys())
        )
        return hexagram

    async def upsert_many(self, rows: Iterable[dict[str, Any]]) -> dict[str, int]:
        """Insert or update by number (markdown import); returns counts."""
        inserted = updated = 0
        for data in rows:
            number = validate_number(data.get("number"))
            existing = await self.session.get(Hexagram, number)
            if existing is None:
                self.session.add(self._build_row(data))
                inserted += 1
                continue
            for key in ("symbol", *sorted(ALLOWED_UPDATE_FIELDS)):
                if key in data and data[key] is not None:
                    setattr(existing, key, data[key])
            updated += 1
        await self.session.flush()
        logger.info("hexagrams_upserted", inserted=inserted, updated=updated)
        return {"inserted": inserted, "updated": updated}

    async def delete(self, number: Any) -> None:
        hexagram = await self.get_by_number(number)
        await self.session.delete(hexagram)
        await self.session.flush()
        logger.info("hexagram_deleted", number=hexagram.number)

    async def delete_all(self) -> int:
        result = await self.session.execute(delete(Hexagram))
        deleted = result.rowcount or 0
        logger.info("hexagrams_deleted", deleted=deleted)
        return deleted

    # ── Helpers ───────────────────────────────────────────────────────

    @staticmethod
    def _build_row(data: dict[str, Any]) -> Hexagram:
        missing = [f for f in REQUIRED_FIELDS if data.get(f) in (None, "")]
        if missing:
            raise ValidationError(
                f"Missing required hexagram fields: {', '.join(missing)}"
            )

        keywords = data.get("keywords") or extract_keywords(
            data["name"], data.get("core_viewpoint"), data.get("mental_models")
        )
        return Hexagram(
            number=validate_number(data["number"]),
            symbol=data["symbol"],
            name=data["name"],
            korean_name=data.get("korean_name"),
            core_viewpoint=data["core_viewpoint"],
            mental_models=data.get("mental_models"),
            summary=data["summary"],
            keywords=list(keywords),
            perspectives=data.get("perspectives"),
        )
