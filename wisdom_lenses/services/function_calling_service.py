"""
Wisdom Lenses — Function-calling orchestrator

Two-round protocol with the generation service:

  AWAITING_FIRST_RESPONSE
      send the prompt together with the tool declarations
      - no function calls requested  -> DONE (the text is the answer)
      - function calls requested     -> run them locally, in order
  AWAITING_FINAL_RESPONSE
      send the prompt again with every function result rendered as context,
      this time without tools
  DONE

Round 2 never starts before every round-1 call has been dispatched.  Local
function failures do not abort the run; they are reported to the model as
unsuccessful results.  Generation failures propagate unchanged.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import structlog

from wisdom_lenses.exceptions import ValidationError
from wisdom_lenses.services.function_tools import (
    FunctionCallResult,
    HexagramToolbox,
    gemini_tools,
)
from wisdom_lenses.services.gemini_service import GeminiService

logger = structlog.get_logger("wisdom_lenses.function_calling_service")


class OrchestrationState(str, Enum):
    AWAITING_FIRST_RESPONSE = "awaiting_first_response"
    AWAITING_FINAL_RESPONSE = "awaiting_final_response"
    DONE = "done"


@dataclass
class OrchestrationResult:
    answer: str
    function_results: list[FunctionCallResult] = field(default_factory=list)
    rounds: int = 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "answer": self.answer,
            "function_results": [r.to_dict() for r in self.function_results],
            "rounds": self.rounds,
        }


def render_function_results(results: list[tuple[str, Any]]) -> str:
    """``함수 <name> 실행 결과:`` followed by the JSON result, one block per call."""
    return "\n\n".join(
        f"함수 {name} 실행 결과:\n"
        f"{json.dumps(result, ensure_ascii=False, indent=2, default=str)}"
        for name, result in results
    )


def build_final_prompt(prompt: str, results: list[tuple[str, Any]]) -> str:
    return (
        f"사용자 요청: {prompt}\n\n"
        f"다음 함수들이 실행되었습니다:\n"
        f"{render_function_results(results)}\n\n"
        "위 정보를 바탕으로 사용자에게 도움이 되는 응답을 생성해주세요. "
        "함수 실행 결과를 자연스럽게 해석하고 설명해주세요."
    )


class FunctionCallingOrchestrator:
    """Drives one prompt through the two-round function-calling protocol."""

    def __init__(self, client: GeminiService, toolbox: HexagramToolbox) -> None:
        self.client = client
        self.toolbox = toolbox
        self.state = OrchestrationState.AWAITING_FIRST_RESPONSE

    async def run(self, prompt: str) -> OrchestrationResult:
        """Answer ``prompt``, executing any function calls the model requests."""
        prompt = _require_prompt(prompt)
        self.state = OrchestrationState.AWAITING_FIRST_RESPONSE

        first = await self.client.generate(prompt, tools=gemini_tools())

        if not first.function_calls:
            self.state = OrchestrationState.DONE
            logger.info("function_calling_direct_answer", rounds=1)
            return OrchestrationResult(answer=first.text, rounds=1)

        logger.info(
            "function_calls_requested",
            functions=[c.name for c in first.function_calls],
        )

        results: list[FunctionCallResult] = []
        for call in first.function_calls:
            results.append(await self.toolbox.dispatch(call.name, call.args))

        self.state = OrchestrationState.AWAITING_FINAL_RESPONSE
        final_prompt = build_final_prompt(
            prompt, [(r.name, r.payload()) for r in results]
        )
        final = await self.client.generate(final_prompt)

        self.state = OrchestrationState.DONE
        logger.info(
            "function_calling_complete",
            rounds=2,
            executed=len(results),
            failed=sum(1 for r in results if not r.success),
        )
        return OrchestrationResult(answer=final.text, function_results=results, rounds=2)

    async def finalize(
        self,
        prompt: str,
        function_results: list[dict[str, Any]],
    ) -> OrchestrationResult:
        """Round 2 only, for callers that executed the functions themselves.

        Each entry needs a ``name`` and a ``result``.
        """
        prompt = _require_prompt(prompt)
        if not function_results:
            raise ValidationError("function_results must not be empty")

        rendered: list[tuple[str, Any]] = []
        for entry in function_results:
            name = entry.get("name")
            if not name:
                raise ValidationError("Every function result needs a name")
            rendered.append((name, entry.get("result")))

        self.state = OrchestrationState.AWAITING_FINAL_RESPONSE
        final = await self.client.generate(build_final_prompt(prompt, rendered))
        self.state = OrchestrationState.DONE

        logger.info("function_calling_finalized", supplied=len(rendered))
        return OrchestrationResult(answer=final.text, rounds=1)


def _require_prompt(prompt: str | None) -> str:
    if not prompt or not prompt.strip():
        raise ValidationError("A prompt is required")
    return prompt
