"""
Wisdom Lenses — Markdown catalog import and dice helpers

``parse_markdown_table`` reads the mental-models table maintained alongside
the catalog::

    | **번호** | **괘상** | **이름** | **핵심 관점** | **정신 모델** | **요약** |
    |---|---|---|---|---|---|
    | 1 | ☰/☰ | 중천건（重天乾） | 창조적 리더십 | 1차 원리 사고 | ... |

Only rows after the ``|---|`` separator with a numeric first cell are read.
The dice helpers map two eight-sided dice (upper and lower trigram) onto a
hexagram number.
"""

from __future__ import annotations

import random
import re
from typing import Any

import structlog

from wisdom_lenses.exceptions import ValidationError

logger = structlog.get_logger("wisdom_lenses.catalog_import")

_NAME_RE = re.compile(r"([^（(]+)[（(]([^）)]+)[）)]")
_HEADER_CELL = "**번호**"
_MIN_CELLS = 6

DICE_FACES = 8


def split_name(cell: str) -> tuple[str, str | None]:
    """``중천건（重天乾）`` -> ``("중천건", "重天乾")``; bold markers removed."""
    cleaned = cell.replace("**", "").strip()
    match = _NAME_RE.match(cleaned)
    if match:
        return match.group(1).strip(), match.group(2).strip()
    return cleaned, None


def parse_markdown_table(text: str) -> list[dict[str, Any]]:
    """Parse catalog rows from a markdown pipe table.

    Raises ``ValidationError`` when no row could be read.
    """
    rows: list[dict[str, Any]] = []
    table_started = False
    skipped = 0

    for line in text.splitlines():
        line = line.strip()
        if line.startswith("|---"):
            table_started = True
            continue
        if not table_started or not line.startswith("|"):
            continue

        cells = [cell.strip() for cell in line.split("|")][1:-1]
        if len(cells) < _MIN_CELLS or cells[0] == _HEADER_CELL:
            continue

        try:
            number = int(cells[0].replace("**", ""))
        except ValueError:
            skipped += 1
            continue

        name, korean_name = split_name(cells[2])
        rows.append({
            "number": number,
            "symbol": cells[1],
            "name": name,
            "korean_name": korean_name,
            "core_viewpoint": cells[3],
            "mental_models": "" if cells[4] == "-" else cells[4],
            "summary": cells[5],
        })

    if not rows:
        raise ValidationError(
            "No hexagram data found in Markdown or table format incorrect."
        )

    logger.info("markdown_table_parsed", rows=len(rows), skipped=skipped)
    return rows


# ── Dice ──────────────────────────────────────────────────────────────


def hexagram_from_dice(upper: int, lower: int) -> int:
    """Hexagram number for an (upper, lower) pair of eight-sided dice."""
    for label, value in (("upper", upper), ("lower", lower)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"{label} die must be an integer, got {value!r}")
        if not 1 <= value <= DICE_FACES:
            raise ValidationError(
                f"{label} die must be between 1 and {DICE_FACES}, got {value}"
            )
    return (upper - 1) * DICE_FACES + lower


def roll_dice(rng: random.Random | None = None) -> tuple[int, int, int]:
    """Roll both dice; returns ``(upper, lower, hexagram_number)``."""
    rng = rng or random.Random()
    upper = rng.randint(1, DICE_FACES)
    lower = rng.randint(1, DICE_FACES)
    return upper, lower, hexagram_from_dice(upper, lower)
