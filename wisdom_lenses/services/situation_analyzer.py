"""
Wisdom Lenses — Situation analyser

Keyword heuristics that turn a free-text description of the user's
situation into the emotions / situation category / keywords triple the
compatibility scorer consumes.  Labels are emitted in Korean, the language of
the catalog keywords they are matched against; English cues are recognised
as well.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field

from wisdom_lenses.exceptions import ValidationError

ORIGINAL_TEXT_LIMIT = 200

NEUTRAL_EMOTION = "중립"
GENERAL_SITUATION = "일반적 상황"
DEFAULT_KEYWORD = "개인적 성장"

# (label, cues) in reporting order; every matching label is reported.
EMOTION_CUES: list[tuple[str, tuple[str, ...]]] = [
    ("불안", ("걱정", "불안", "두려워", "anxious", "anxiety", "worried", "afraid")),
    ("기쁨", ("기쁘", "행복", "좋아", "happy", "joy", "glad")),
    ("분노", ("화나", "짜증", "억울", "angry", "anger", "frustrated")),
    ("슬픔", ("슬프", "시련", "sad", "grief", "sorrow")),
    ("어려움", ("어려운", "힘든", "곤란", "difficult", "hard time", "struggling")),
    ("열정", ("열정", "흥미", "목표", "passion", "excited", "goal")),
]

# (category, cues); the first matching category wins.
SITUATION_CUES: list[tuple[str, tuple[str, ...]]] = [
    ("직장 및 업무 관련", ("직장", "업무", "회사", "work", "job", "office", "business")),
    ("인간관계 및 사랑", ("사랑", "연인", "결혼", "love", "partner", "relationship")),
    ("가족 문제", ("가족", "부모", "자녀", "family", "parent", "child")),
    ("재정 및 경제 문제", ("돈", "재정", "투자", "money", "finance", "invest")),
    ("건강 문제", ("건강", "병", "아프", "health", "sick", "illness")),
    ("인생 방향 및 목표", ("진로", "목표", "career", "life direction", "purpose")),
]

CATALOG_KEYWORDS: tuple[str, ...] = (
    "창조", "변화", "리더십", "성장", "축적", "인내", "열정", "노력",
    "지혜", "결단", "협력", "소통", "균형", "안정", "진전", "대담",
    "세심", "정확", "독립", "평화", "치유", "신뢰", "예지",
)


@dataclass
class SituationAnalysis:
    emotions: list[str] = field(default_factory=list)
    situation: str = GENERAL_SITUATION
    keywords: list[str] = field(default_factory=list)
    original_text: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


def analyze_situation(text: str) -> SituationAnalysis:
    """Extract emotions, a situation category and catalog keywords.

    Raises ``ValidationError`` for blank input.
    """
    if not text or not text.strip():
        raise ValidationError("Situation text to analyse is required")

    lowered = text.lower()

    emotions = [
        label for label, cues in EMOTION_CUES
        if any(cue in lowered for cue in cues)
    ] or [NEUTRAL_EMOTION]

    situation = next(
        (
            category for category, cues in SITUATION_CUES
            if any(cue in lowered for cue in cues)
        ),
        GENERAL_SITUATION,
    )

    keywords = [k for k in CATALOG_KEYWORDS if k in lowered] or [DEFAULT_KEYWORD]

    return SituationAnalysis(
        emotions=emotions,
        situation=situation,
        keywords=keywords,
        original_text=text[:ORIGINAL_TEXT_LIMIT],
    )
