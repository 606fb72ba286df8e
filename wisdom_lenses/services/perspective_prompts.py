"""
Wisdom Lenses — Perspective prompt templates

Six fixed "lenses" (ancient wisdom, physics, biology, business, psychology,
military strategy) are applied to a hexagram and the user's situation.  Every
template mandates the same output shape so the response parser can find its
sections:

    **<title>**
    <3-4 sentence analysis>
    **핵심 메시지**: <one line>
    **전략적 질문**:
    1. ...
    2. ...
    3. ...
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from wisdom_lenses.exceptions import UnknownPerspectiveError

KEY_MESSAGE_LABEL = "핵심 메시지"
QUESTIONS_LABEL = "전략적 질문"


class Perspective(str, Enum):
    ANCIENT = "ancient"
    PHYSICS = "physics"
    BIOLOGY = "biology"
    BUSINESS = "business"
    PSYCHOLOGY = "psychology"
    MILITARY = "military"


PERSPECTIVE_ORDER: list[Perspective] = list(Perspective)

PERSPECTIVE_TITLES: dict[Perspective, str] = {
    Perspective.ANCIENT: "📜 고대의 지혜",
    Perspective.PHYSICS: "⚙️ 물리학 관점",
    Perspective.BIOLOGY: "🌱 생물학 관점",
    Perspective.BUSINESS: "💼 경영학 관점",
    Perspective.PSYCHOLOGY: "🧠 심리학 관점",
    Perspective.MILITARY: "⚔️ 군사학 관점",
}

# Persona, section heading, analysis brief, key-message brief and the three
# question briefs for each lens.
PERSPECTIVE_TEMPLATES: dict[Perspective, dict[str, Any]] = {
    Perspective.ANCIENT: {
        "persona": (
            "당신은 동양 철학과 역경(易經)의 전문가입니다. "
            "위 괘의 고대 지혜를 바탕으로 사용자의 상황을 분석해주세요."
        ),
        "heading": "고대의 지혜",
        "analysis": "역경의 고전적 해석과 음양오행 원리를 통한 3-4문장의 심층 분석",
        "key_message": "한 줄로 요약된 핵심 통찰",
        "questions": [
            "사용자 상황과 관련된 구체적 질문",
            "내면 성찰을 돕는 질문",
            "실행 방향에 대한 질문",
        ],
    },
    Perspective.PHYSICS: {
        "persona": (
            "당신은 물리학자입니다. 에너지, 시스템, 힘의 균형, 열역학 법칙 등을 "
            "이용해 사용자 상황을 분석해주세요."
        ),
        "heading": "물리학 관점",
        "analysis": (
            "에너지 보존 법칙, 엔트로피, 평형 상태, 시스템 역학 등 "
            "물리학적 원리로 3-4문장 분석"
        ),
        "key_message": "물리학적 원리로 요약된 핵심 통찰",
        "questions": [
            "에너지 효율성과 관련된 질문",
            "시스템 안정성에 대한 질문",
            "힘의 균형과 최적화에 대한 질문",
        ],
    },
    Perspective.BIOLOGY: {
        "persona": (
            "당신은 생물학자입니다. 진화, 적응, 생태계, 생존 전략, 자연 선택 등의 "
            "원리로 사용자 상황을 분석해주세요."
        ),
        "heading": "생물학 관점",
        "analysis": (
            "진화론, 생태학, 적응 전략, 생존 기제 등 생물학적 원리로 3-4문장 분석"
        ),
        "key_message": "생물학적 원리로 요약된 핵심 통찰",
        "questions": [
            "적응과 진화에 대한 질문",
            "생태계 내 역할과 관련된 질문",
            "생존 전략과 지속가능성에 대한 질문",
        ],
    },
    Perspective.BUSINESS: {
        "persona": (
            "당신은 경영 전략 컨설턴트입니다. 전략 기획, 리더십, 조직 관리, "
            "리스크 관리, 성과 최적화 등의 경영학 원리로 사용자 상황을 분석해주세요."
        ),
        "heading": "경영학 관점",
        "analysis": (
            "전략 경영, 리더십 이론, 조직 행동론, 학습조직 등 경영학 이론으로 "
            "3-4문장 분석"
        ),
        "key_message": "경영학적 관점에서 요약된 핵심 통찰",
        "questions": [
            "전략적 의사결정과 관련된 질문",
            "리더십과 조직 관리에 대한 질문",
            "성과 측정과 개선에 대한 질문",
        ],
    },
    Perspective.PSYCHOLOGY: {
        "persona": (
            "당신은 심리학자입니다. 인지 심리학, 행동 심리학, 동기 이론, 감정 조절, "
            "성격 심리학 등의 원리로 사용자 상황을 분석해주세요."
        ),
        "heading": "심리학 관점",
        "analysis": (
            "인지 편향, 동기 이론, 감정 조절, 학습 이론, 성격 이론 등 "
            "심리학 이론으로 3-4문장 분석"
        ),
        "key_message": "심리학적 관점에서 요약된 핵심 통찰",
        "questions": [
            "내적 동기와 가치관에 대한 질문",
            "감정 관리와 인지 처리에 대한 질문",
            "행동 변화와 습관 형성에 대한 질문",
        ],
    },
    Perspective.MILITARY: {
        "persona": (
            "당신은 군사 전략 전문가입니다. 손자병법, 클라우제비츠, 마키아벨리 전략, "
            "현대 군사 전략 등을 바탕으로 사용자 상황을 분석해주세요."
        ),
        "heading": "군사학 관점",
        "analysis": (
            "전략과 전술, 리스크 관리, 정보 수집, 자원 배분, 승리 조건 등 "
            "군사학 원리로 3-4문장 분석"
        ),
        "key_message": "군사학적 관점에서 요약된 핵심 통찰",
        "questions": [
            "전략적 위치와 우위 확보에 대한 질문",
            "리스크 평가와 대응 능력에 대한 질문",
            "승리 조건과 자원 활용에 대한 질문",
        ],
    },
}


def resolve_perspective(value: str | Perspective) -> Perspective:
    """Coerce a category name into ``Perspective``.

    Raises ``UnknownPerspectiveError`` for anything outside the six lenses.
    """
    if isinstance(value, Perspective):
        return value
    try:
        return Perspective(str(value).strip().lower())
    except ValueError:
        raise UnknownPerspectiveError(str(value)) from None


def default_title(perspective: str | Perspective) -> str:
    return PERSPECTIVE_TITLES[resolve_perspective(perspective)]


def build_perspective_prompt(
    perspective: str | Perspective,
    hexagram: Any,
    situation: str,
) -> str:
    """Render the prompt for one lens.

    ``hexagram`` is anything exposing ``name``, ``number``, ``symbol``,
    ``core_viewpoint`` and ``summary`` (the ORM row or its schema).  The
    situation is inserted verbatim; validating it is the caller's job.
    """
    template = PERSPECTIVE_TEMPLATES[resolve_perspective(perspective)]

    question_lines = "\n".join(
        f"{i}. [{brief}]" for i, brief in enumerate(template["questions"], 1)
    )

    return f"""괘 정보:
- 이름: {hexagram.name} ({hexagram.number}번)
- 상징: {hexagram.symbol}
- 핵심 관점: {hexagram.core_viewpoint}
- 요약: {hexagram.summary}

사용자 상황: {situation}

{template["persona"]}

다음 형식으로 반드시 답변해주세요. 전략적 질문은 정확히 3개를 번호를 붙여 작성합니다:

**{template["heading"]}**

[{template["analysis"]}]

**{KEY_MESSAGE_LABEL}**: [{template["key_message"]}]

**{QUESTIONS_LABEL}**:
{question_lines}"""
