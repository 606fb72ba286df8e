"""
Wisdom Lenses — Function-calling toolbox

The five read-only functions the model may ask us to run, declared in the
schema format the Gemini SDK expects, and their local handlers.
``HexagramToolbox.dispatch`` never raises: bad arguments, missing records
and unknown function names all come back as an unsuccessful
``FunctionCallResult`` the orchestrator can hand to the model.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable

import structlog

from wisdom_lenses.exceptions import (
    UnknownFunctionError,
    ValidationError,
    WisdomLensesError,
)
from wisdom_lenses.services.compatibility_service import (
    TOP_SCORES,
    calculate_compatibility,
    select_final_hexagram,
)
from wisdom_lenses.services.hexagram_store import HexagramStore
from wisdom_lenses.services.situation_analyzer import analyze_situation

logger = structlog.get_logger("wisdom_lenses.function_tools")

DEFAULT_SEARCH_LIMIT = 3

# ──────────────────────────────────────────────────────────────────────────────
# Declarations
# ──────────────────────────────────────────────────────────────────────────────

_USER_ANALYSIS_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "emotions": {"type": "ARRAY", "items": {"type": "STRING"}},
        "situation": {"type": "STRING"},
        "keywords": {"type": "ARRAY", "items": {"type": "STRING"}},
    },
}

FUNCTION_DECLARATIONS: list[dict[str, Any]] = [
    {
        "name": "get_hexagram_info",
        "description": "괘 번호(1-64)로 괘의 이름, 상징, 핵심 관점, 요약, 키워드를 조회합니다.",
        "parameters": {
            "type": "OBJECT",
            "properties": {
                "number": {"type": "INTEGER", "description": "괘 번호 (1-64)"},
            },
            "required": ["number"],
        },
    },
    {
        "name": "search_hexagram_by_keyword",
        "description": "키워드로 관련된 괘를 검색합니다.",
        "parameters": {
            "type": "OBJECT",
            "properties": {
                "keyword": {"type": "STRING", "description": "검색 키워드"},
                "limit": {
                    "type": "INTEGER",
                    "description": f"결과 개수 (기본 {DEFAULT_SEARCH_LIMIT})",
                },
            },
            "required": ["keyword"],
        },
    },
    {
        "name": "analyze_user_situation",
        "description": "사용자의 상황 설명에서 감정, 상황 분류, 키워드를 추출합니다.",
        "parameters": {
            "type": "OBJECT",
            "properties": {
                "user_input": {"type": "STRING", "description": "사용자 상황 설명"},
            },
            "required": ["user_input"],
        },
    },
    {
        "name": "calculate_hexagram_compatibility",
        "description": "감정, 상황, 키워드를 바탕으로 64괘 각각의 적합도 점수를 계산합니다.",
        "parameters": {
            "type": "OBJECT",
            "properties": {
                "emotions": {"type": "ARRAY", "items": {"type": "STRING"}},
                "situation": {"type": "STRING"},
                "keywords": {"type": "ARRAY", "items": {"type": "STRING"}},
            },
            "required": ["emotions", "situation", "keywords"],
        },
    },
    {
        "name": "select_final_hexagram",
        "description": "적합도 점수와 사용자 분석 결과로 최종 괘를 선택하고 근거를 제시합니다.",
        "parameters": {
            "type": "OBJECT",
            "properties": {
                "compatibility_scores": {
                    "type": "ARRAY",
                    "items": {
                        "type": "OBJECT",
                        "properties": {
                            "number": {"type": "INTEGER"},
                            "name": {"type": "STRING"},
                            "score": {"type": "NUMBER"},
                            "reason": {"type": "STRING"},
                        },
                    },
                },
                "user_analysis": _USER_ANALYSIS_SCHEMA,
            },
            "required": ["compatibility_scores", "user_analysis"],
        },
    },
]

DECLARED_FUNCTIONS: frozenset[str] = frozenset(d["name"] for d in FUNCTION_DECLARATIONS)


def gemini_tools() -> list[dict[str, Any]]:
    """Declarations wrapped in the SDK's ``tools`` shape."""
    return [{"function_declarations": FUNCTION_DECLARATIONS}]


# ──────────────────────────────────────────────────────────────────────────────
# Results
# ──────────────────────────────────────────────────────────────────────────────


@dataclass
class FunctionCallResult:
    name: str
    args: dict[str, Any] = field(default_factory=dict)
    success: bool = True
    result: Any = None
    error: str | None = None
    error_type: str | None = None

    def payload(self) -> dict[str, Any]:
        """What the model sees for this call."""
        if self.success:
            return {"success": True, "data": self.result}
        return {"success": False, "error": self.error, "error_type": self.error_type}

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "args": self.args,
            "success": self.success,
            "result": self.result,
            "error": self.error,
            "error_type": self.error_type,
        }


class ToolArgumentError(ValidationError):
    error_type = "InvalidArguments"


# ──────────────────────────────────────────────────────────────────────────────
# Toolbox
# ──────────────────────────────────────────────────────────────────────────────


def _hexagram_info(hexagram: Any) -> dict[str, Any]:
    return {
        "number": hexagram.number,
        "name": hexagram.name,
        "symbol": hexagram.symbol,
        "korean_name": hexagram.korean_name,
        "core_viewpoint": hexagram.core_viewpoint,
        "mental_models": hexagram.mental_models,
        "summary": hexagram.summary,
        "keywords": list(hexagram.keywords or []),
    }


def _require(args: dict[str, Any], name: str) -> Any:
    value = args.get(name)
    if value is None:
        raise ToolArgumentError(f"Missing argument: {name}")
    return value


def _string_list(value: Any, name: str) -> list[str]:
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        raise ToolArgumentError(f"Argument {name} must be a list of strings")
    return [str(v) for v in value]


class HexagramToolbox:
    """Local handlers for ``FUNCTION_DECLARATIONS``, backed by the store."""

    def __init__(self, store: HexagramStore) -> None:
        self.store = store
        self._handlers: dict[str, Callable[[dict[str, Any]], Awaitable[Any]]] = {
            "get_hexagram_info": self.get_hexagram_info,
            "search_hexagram_by_keyword": self.search_hexagram_by_keyword,
            "analyze_user_situation": self.analyze_user_situation,
            "calculate_hexagram_compatibility": self.calculate_hexagram_compatibility,
            "select_final_hexagram": self.select_final_hexagram,
        }

    async def dispatch(self, name: str, args: dict[str, Any] | None) -> FunctionCallResult:
        args = dict(args or {})
        handler = self._handlers.get(name)
        if handler is None:
            exc = UnknownFunctionError(name)
            logger.warning("unknown_function_called", function=name)
            return FunctionCallResult(
                name=name, args=args, success=False,
                error=exc.message, error_type=exc.error_type,
            )

        try:
            result = await handler(args)
        except WisdomLensesError as exc:
            logger.info(
                "function_call_rejected",
                function=name,
                error_type=exc.error_type,
                error=exc.message,
            )
            return FunctionCallResult(
                name=name, args=args, success=False,
                error=exc.message, error_type=exc.error_type,
            )
        except (TypeError, ValueError, KeyError) as exc:
            logger.info("function_call_bad_arguments", function=name, error=str(exc))
            return FunctionCallResult(
                name=name, args=args, success=False,
                error=str(exc), error_type="InvalidArguments",
            )
        except Exception as exc:
            logger.error(
                "function_call_failed",
                function=name,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            return FunctionCallResult(
                name=name, args=args, success=False,
                error=str(exc), error_type=type(exc).__name__,
            )

        logger.info("function_call_executed", function=name)
        return FunctionCallResult(name=name, args=args, success=True, result=result)

    # ── Handlers ──────────────────────────────────────────────────────

    async def get_hexagram_info(self, args: dict[str, Any]) -> dict[str, Any]:
        hexagram = await self.store.get_by_number(_require(args, "number"))
        info = _hexagram_info(hexagram)
        info["retrieved_at"] = datetime.now(timezone.utc).isoformat()
        return info

    async def search_hexagram_by_keyword(self, args: dict[str, Any]) -> dict[str, Any]:
        keyword = str(_require(args, "keyword")).strip()
        if not keyword:
            raise ToolArgumentError("Search keyword must not be blank")
        limit = int(args.get("limit") or DEFAULT_SEARCH_LIMIT)
        if limit < 1:
            raise ToolArgumentError(f"limit must be positive, got {limit}")

        hexagrams = await self.store.search_by_keyword(keyword, limit=limit)
        needle = keyword.lower()
        results = []
        for hexagram in hexagrams:
            info = _hexagram_info(hexagram)
            info["relevant_keywords"] = [
                k for k in info["keywords"]
                if needle in k.lower() or k.lower() in needle
            ]
            results.append(info)
        return {"keyword": keyword, "results": results, "count": len(results)}

    async def analyze_user_situation(self, args: dict[str, Any]) -> dict[str, Any]:
        return analyze_situation(str(_require(args, "user_input"))).to_dict()

    async def calculate_hexagram_compatibility(self, args: dict[str, Any]) -> dict[str, Any]:
        emotions = _string_list(_require(args, "emotions"), "emotions")
        situation = str(_require(args, "situation"))
        keywords = _string_list(_require(args, "keywords"), "keywords")

        catalog = await self.store.find_all()
        ranked = calculate_compatibility(emotions, situation, keywords, catalog)
        all_scores = [s.to_dict() for s in ranked]
        return {
            "total_hexagrams": len(catalog),
            "analyzed_emotions": emotions,
            "analyzed_situation": situation,
            "analyzed_keywords": keywords,
            "top_scores": all_scores[:TOP_SCORES],
            "all_scores": all_scores,
        }

    async def select_final_hexagram(self, args: dict[str, Any]) -> dict[str, Any]:
        scores = _require(args, "compatibility_scores")
        if not isinstance(scores, list) or not scores:
            raise ToolArgumentError("compatibility_scores must be a non-empty list")
        user_analysis = args.get("user_analysis") or {}
        if not isinstance(user_analysis, dict):
            raise ToolArgumentError("user_analysis must be an object")

        top = max(scores, key=lambda s: float(s.get("score", 0) or 0))
        hexagram = await self.store.find_by_number(top.get("number"))
        return select_final_hexagram(scores, user_analysis, hexagram)
