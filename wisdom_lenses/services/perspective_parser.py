"""
Wisdom Lenses — Perspective response parser

Turns the semi-structured text Gemini returns for one lens into a
``ParsedPerspective`` card.  The answer is read line by line by a small
state machine over its labelled sections:

    preamble -> title -> body -> key message -> questions -> trailer

Lines that belong to no section (chatter before the title, text between the
key message and the questions, anything after the questions block) are kept
in ``remainder`` instead of being dropped.  The parser is total: whatever the
input, the caller gets a card with a title and at least one question, and the
raw answer is kept as the body when nothing else could be recovered.
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass, field
from enum import Enum

import structlog

from wisdom_lenses.services.perspective_prompts import (
    KEY_MESSAGE_LABEL,
    QUESTIONS_LABEL,
    Perspective,
    default_title,
)

logger = structlog.get_logger("wisdom_lenses.perspective_parser")

FALLBACK_QUESTIONS: tuple[str, ...] = (
    "이 관점에서 가장 중요한 고려사항은 무엇인가요?",
    "다음 단계로 어떤 행동을 취하는 것이 좋을까요?",
    "이 상황에서 주의해야 할 위험 요소는 무엇인가요?",
)
FALLBACK_KEY_MESSAGE = "분석 결과를 확인해주세요."
PARSE_ERROR_KEY_MESSAGE = "AI 응답을 파싱하는 중 오류가 발생했습니다."

# "**label**: text" at the start of a line
_LABEL_LINE_RE = re.compile(r"^\s*\*\*([^*\n]+)\*\*\s*:[ \t]*(.*)$")
_BOLD_SPAN_RE = re.compile(r"\*\*(.*?)\*\*")
_NUMBERING_RE = re.compile(r"^\s*\d+\s*[.)]\s*")


class _Section(str, Enum):
    PREAMBLE = "preamble"
    BODY = "body"
    KEY_MESSAGE = "key_message"
    QUESTIONS = "questions"
    TRAILER = "trailer"


@dataclass
class ParsedPerspective:
    title: str
    content: str
    key_message: str
    questions: list[str] = field(default_factory=list)
    remainder: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


def parse_perspective_response(
    text: str | None,
    perspective: str | Perspective,
) -> ParsedPerspective:
    """Extract ``title``, ``content``, ``key_message`` and ``questions``.

    Never raises.  ``perspective`` only supplies the fallback title.
    """
    raw = text or ""
    try:
        return _parse(raw, perspective)
    except Exception as exc:
        logger.warning(
            "perspective_parse_failed",
            perspective=str(perspective),
            error=str(exc),
        )
        return ParsedPerspective(
            title=_safe_default_title(perspective),
            content=raw,
            key_message=PARSE_ERROR_KEY_MESSAGE,
            questions=list(FALLBACK_QUESTIONS),
        )


def _parse(text: str, perspective: str | Perspective) -> ParsedPerspective:
    section = _Section.PREAMBLE
    title: str | None = None
    key_message = ""
    preamble: list[str] = []
    body: list[str] = []
    questions: list[str] = []
    remainder: list[str] = []

    for line in text.splitlines():
        label = _LABEL_LINE_RE.match(line)
        label_name = label.group(1).strip() if label else None

        if label_name == KEY_MESSAGE_LABEL:
            if not key_message:
                key_message = label.group(2).strip()
            section = _Section.KEY_MESSAGE
            continue

        if label_name == QUESTIONS_LABEL:
            section = _Section.QUESTIONS
            line = label.group(2)
            if not line.strip():
                continue
            label = None

        if section is _Section.PREAMBLE:
            span = _BOLD_SPAN_RE.search(line)
            if span is None:
                preamble.append(line)
                continue
            title = span.group(1).strip()
            remainder.extend(preamble)
            preamble = []
            if line[: span.start()].strip():
                remainder.append(line[: span.start()])
            rest = line[span.end():].lstrip(" \t:")
            if rest.strip():
                body.append(rest)
            section = _Section.BODY

        elif section is _Section.BODY:
            if label is not None and not any(b.strip() for b in body):
                line = label.group(2)
            body.append(line)

        elif section is _Section.KEY_MESSAGE:
            if not key_message and line.strip():
                key_message = line.strip()
            elif line.strip():
                remainder.append(line)

        elif section is _Section.QUESTIONS:
            if label is not None:
                section = _Section.TRAILER
                remainder.append(line)
                continue
            question = _NUMBERING_RE.sub("", line, count=1).strip()
            if question:
                questions.append(question)

        elif line.strip():
            remainder.append(line)

    if title is None:
        # No title span: whatever preceded the first section is the body.
        body = preamble + body
    if not title:
        title = default_title(perspective)

    content = "\n".join(body).strip()
    if not questions:
        questions = list(FALLBACK_QUESTIONS)
    if not key_message:
        key_message = FALLBACK_KEY_MESSAGE
        if not content:
            content = text

    return ParsedPerspective(
        title=title,
        content=content,
        key_message=key_message,
        questions=questions,
        remainder="\n".join(remainder).strip(),
    )


def _safe_default_title(perspective: str | Perspective) -> str:
    try:
        return default_title(perspective)
    except Exception:
        return "문서 관점"
