"""Initial schema: all 5 Wisdom Lenses tables.

Revision ID: 001_initial
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # ── 1. hexagrams (catalog) ──────────────────────────────────────
    op.create_table(
        "hexagrams",
        sa.Column(
            "number",
            sa.Integer,
            primary_key=True,
            autoincrement=False,
            comment="1-64",
        ),
        sa.Column(
            "symbol",
            sa.String,
            nullable=False,
            comment="Trigram pair glyph, e.g. ☰/☰",
        ),
        sa.Column("name", sa.String, index=True, nullable=False),
        sa.Column(
            "korean_name",
            sa.String,
            nullable=True,
            comment="Alternate (hanja) name",
        ),
        sa.Column("core_viewpoint", sa.Text, nullable=False),
        sa.Column("mental_models", sa.Text, nullable=True),
        sa.Column("summary", sa.Text, nullable=False),
        sa.Column(
            "keywords",
            postgresql.JSONB,
            nullable=False,
            comment="Array of search keywords",
        ),
        sa.Column(
            "perspectives",
            postgresql.JSONB,
            nullable=True,
            comment="Perspective cards keyed by category",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint("number BETWEEN 1 AND 64", name="ck_hexagram_number_range"),
    )

    # ── 2. user_memos ───────────────────────────────────────────────
    op.create_table(
        "user_memos",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("username", sa.String, index=True, nullable=False),
        sa.Column(
            "edit_token",
            sa.LargeBinary,
            nullable=False,
            comment="Fernet-encrypted edit password",
        ),
        sa.Column("hexagram_number", sa.Integer, index=True, nullable=False),
        sa.Column("memo", sa.Text, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )

    # ── 3. flash_card_progress ──────────────────────────────────────
    op.create_table(
        "flash_card_progress",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("username", sa.String, index=True, nullable=False),
        sa.Column("hexagram_number", sa.Integer, nullable=False),
        sa.Column(
            "difficulty",
            sa.String,
            nullable=False,
            comment="again | soon | later | mastered",
        ),
        sa.Column(
            "review_count",
            sa.Integer,
            server_default="1",
            nullable=False,
        ),
        sa.Column("last_reviewed", sa.DateTime(timezone=True), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint("username", "hexagram_number", name="uq_user_hexagram"),
    )

    # ── 4. memorize_subjects ────────────────────────────────────────
    op.create_table(
        "memorize_subjects",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String, unique=True, nullable=False),
        sa.Column("description", sa.Text, server_default="", nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )

    # ── 5. memorize_cards ───────────────────────────────────────────
    op.create_table(
        "memorize_cards",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "subject_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("memorize_subjects.id", ondelete="CASCADE"),
            index=True,
            nullable=False,
        ),
        sa.Column("question", sa.Text, nullable=False),
        sa.Column("answer", sa.Text, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )

    # Memo listing filters by hexagram and sorts newest first.
    op.create_index(
        "ix_user_memos_hexagram_created",
        "user_memos",
        ["hexagram_number", "created_at"],
    )


def downgrade() -> None:
    # Drop in reverse order (children / dependents first).
    op.drop_index("ix_user_memos_hexagram_created", table_name="user_memos")

    op.drop_table("memorize_cards")
    op.drop_table("memorize_subjects")
    op.drop_table("flash_card_progress")
    op.drop_table("user_memos")
    op.drop_table("hexagrams")
