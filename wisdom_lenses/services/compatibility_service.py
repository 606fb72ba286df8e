"""
Wisdom Lenses — Hexagram compatibility scoring

Heuristic ranking of catalog entries against an analysed situation.  The
score is additive and not normalised:

    score = 0.1                                   base
          + 0.3 × (user keywords matching a hexagram keyword)
          + Σ over emotions:
                0.4  if a hexagram keyword contains the emotion
                0.3  passion-type emotion × {creation, leadership, passion}
                0.3  anxiety-type emotion × {stability, patience, calm}
          + 0.25 once, workplace situation × {leadership, order, management,
                 results}, or love situation × {harmony, love, communication,
                 relationship}

Keyword matching is a case-insensitive substring test in either direction;
the bonus sets are exact (case-insensitive) membership.  Every cue and set is
recognised in English and in Korean, the language of the seeded catalog.
Results are sorted by score, descending; ``sorted`` is stable so ties keep
catalog order.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

import structlog

logger = structlog.get_logger("wisdom_lenses.compatibility_service")

# ──────────────────────────────────────────────────────────────────────────────
# Scoring constants
# ──────────────────────────────────────────────────────────────────────────────

BASE_SCORE = 0.1
KEYWORD_WEIGHT = 0.3
EMOTION_MATCH_WEIGHT = 0.4
EMOTION_BONUS = 0.3
SITUATION_BONUS = 0.25
TOP_SCORES = 10
ALTERNATIVES = 3

PASSION_EMOTIONS = frozenset({"passion", "열정"})
PASSION_KEYWORDS = frozenset({"creation", "leadership", "passion", "창조", "리더십", "열정"})

ANXIETY_EMOTIONS = frozenset({"anxiety", "불안"})
ANXIETY_KEYWORDS = frozenset({"stability", "patience", "calm", "안정", "인내", "진정"})

# (label, situation markers, hexagram keyword set)
SITUATION_RULES: list[tuple[str, tuple[str, ...], frozenset[str]]] = [
    (
        "workplace",
        ("work", "business", "직장", "업무"),
        frozenset({
            "leadership", "order", "management", "results",
            "리더십", "질서", "경영", "성과",
        }),
    ),
    (
        "relationship",
        ("love", "relationship", "사랑", "인간관계"),
        frozenset({
            "harmony", "love", "communication", "relationship",
            "조화", "사랑", "소통", "관계",
        }),
    ),
]

DEFAULT_REASON = "기본 점수"


@dataclass
class CompatibilityScore:
    number: int
    name: str
    score: float
    reasons: list[str] = field(default_factory=list)
    keywords: list[str] = field(default_factory=list)
    summary: str = ""

    @property
    def reason(self) -> str:
        return " + ".join(self.reasons) if self.reasons else DEFAULT_REASON

    def to_dict(self) -> dict:
        return {
            "number": self.number,
            "name": self.name,
            "score": self.score,
            "reason": self.reason,
            "reasons": list(self.reasons),
            "keywords": list(self.keywords),
            "summary": self.summary,
        }


def _field(entry: Any, name: str, default: Any = None) -> Any:
    if isinstance(entry, dict):
        return entry.get(name, default)
    return getattr(entry, name, default)


def score_hexagram(
    hexagram: Any,
    emotions: Sequence[str],
    situation: str,
    keywords: Sequence[str],
) -> CompatibilityScore:
    """Score one catalog entry (ORM row or plain dict)."""
    hex_keywords = [str(k) for k in (_field(hexagram, "keywords") or [])]
    hex_lower = [k.lower() for k in hex_keywords]
    hex_set = set(hex_lower)

    score = BASE_SCORE
    reasons: list[str] = []

    matching = [
        k for k in keywords
        if k and any(k.lower() in hk or hk in k.lower() for hk in hex_lower if hk)
    ]
    if matching:
        keyword_score = len(matching) * KEYWORD_WEIGHT
        score += keyword_score
        reasons.append(f"키워드 매칭({keyword_score:.1f}): {', '.join(matching)}")

    for emotion in emotions:
        needle = (emotion or "").lower()
        if not needle:
            continue
        if any(needle in hk for hk in hex_lower):
            score += EMOTION_MATCH_WEIGHT
            reasons.append(f"감정 매칭({EMOTION_MATCH_WEIGHT}): {emotion}")
        if needle in PASSION_EMOTIONS and hex_set & PASSION_KEYWORDS:
            score += EMOTION_BONUS
            reasons.append("열정성 성향 가점")
        if needle in ANXIETY_EMOTIONS and hex_set & ANXIETY_KEYWORDS:
            score += EMOTION_BONUS
            reasons.append("불안 완화 가점")

    situation_lower = (situation or "").lower()
    for label, markers, rule_keywords in SITUATION_RULES:
        if any(m in situation_lower for m in markers) and hex_set & rule_keywords:
            score += SITUATION_BONUS
            reasons.append(f"상황 매칭: {label}")
            break

    summary = _field(hexagram, "summary") or (
        (_field(hexagram, "core_viewpoint") or "")[:50] or "설명 없음"
    )

    return CompatibilityScore(
        number=int(_field(hexagram, "number")),
        name=str(_field(hexagram, "name", "")),
        score=round(score, 2),
        reasons=reasons,
        keywords=hex_keywords,
        summary=summary,
    )


def calculate_compatibility(
    emotions: Iterable[str],
    situation: str,
    keywords: Iterable[str],
    catalog: Iterable[Any],
) -> list[CompatibilityScore]:
    """Score every catalog entry and rank them, best first.

    The result has exactly one entry per catalog entry and every score is
    at least ``BASE_SCORE``.
    """
    emotions = list(emotions or [])
    keywords = list(keywords or [])
    scores = [
        score_hexagram(h, emotions, situation, keywords) for h in catalog
    ]
    ranked = sorted(scores, key=lambda s: s.score, reverse=True)

    logger.debug(
        "compatibility_calculated",
        catalog_size=len(ranked),
        top=ranked[0].number if ranked else None,
        top_score=ranked[0].score if ranked else None,
    )
    return ranked


def select_final_hexagram(
    scores: Sequence[Any],
    user_analysis: dict[str, Any] | None,
    hexagram: Any = None,
) -> dict[str, Any]:
    """Pick the best-scored entry and explain the choice.

    ``scores`` are ranked entries (``CompatibilityScore`` or the dicts a
    model echoes back).  ``hexagram`` is the catalog row of the winner, when
    the caller could load it; its name, symbol and core viewpoint take
    precedence over what the score entry carries.  Raises ``ValueError`` for
    an empty ranking.
    """
    if not scores:
        raise ValueError("Compatibility scores are required")

    ranked = sorted(
        scores, key=lambda s: float(_field(s, "score", 0) or 0), reverse=True
    )
    top = ranked[0]
    analysis = user_analysis or {}

    number = int(_field(top, "number"))
    name = _field(hexagram, "name") if hexagram is not None else None
    name = name or _field(top, "name") or f"{number}번 괘"
    score = _field(top, "score", 0)
    reason = _field(top, "reason") or DEFAULT_REASON

    reasoning = "\n".join([
        "사용자 상황 분석:",
        f"- 감정: {', '.join(analysis.get('emotions') or []) or '중립'}",
        f"- 상황: {analysis.get('situation') or '일반적 상황'}",
        f"- 키워드: {', '.join(analysis.get('keywords') or []) or '없음'}",
        "",
        f"선택된 괘: {name}",
        f"점수: {score}",
        f"선택 이유: {reason}",
        "",
        "이 괘는 현재 상황에서 가장 적합한 관점을 제시합니다.",
    ])

    alternatives = [
        s.to_dict() if isinstance(s, CompatibilityScore) else dict(s)
        for s in ranked[1:1 + ALTERNATIVES]
    ]

    return {
        "selected_hexagram": {
            "number": number,
            "name": name,
            "symbol": _field(hexagram, "symbol") if hexagram is not None else None,
            "core_viewpoint": (
                _field(hexagram, "core_viewpoint") if hexagram is not None else None
            ),
            "score": score,
        },
        "reasoning": reasoning,
        "user_analysis": analysis,
        "alternative_hexagrams": alternatives,
    }
