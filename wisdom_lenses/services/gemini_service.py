"""
Wisdom Lenses — GeminiService: text-generation client

Thin wrapper around the ``google-generativeai`` SDK used by every AI feature
(perspective cards, hexagram recommendation, function calling).  One call,
one attempt:

- Generation parameters default from settings and can be overridden per call
- Safety thresholds are applied to every harm category as configured
- Text parts are joined; function-call parts are returned as plain dicts
- A response without candidates, text or function calls -> ``EmptyResponseError``
- Any SDK / transport failure -> ``GenerationError`` with the message kept

There is no retry loop and no model fallback chain: a failed
call is logged once and reported to the caller.
"""

from __future__ import annotations

import time
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

import google.generativeai as genai
import structlog
from google.generativeai.types import HarmBlockThreshold, HarmCategory

from wisdom_lenses.config import Settings, get_settings
from wisdom_lenses.exceptions import EmptyResponseError, GenerationError

logger = structlog.get_logger("wisdom_lenses.gemini_service")


@dataclass
class FunctionCall:
    name: str
    args: dict[str, Any] = field(default_factory=dict)


@dataclass
class GenerationResult:
    text: str
    function_calls: list[FunctionCall] = field(default_factory=list)
    model: str = ""


class GeminiService:
    """Single-attempt Gemini client shared by the AI services.

    Constructed once in the application lifespan and handed to each service
    explicitly (``app.state.gemini``).
    """

    HARM_CATEGORIES: list[HarmCategory] = [
        HarmCategory.HARM_CATEGORY_HARASSMENT,
        HarmCategory.HARM_CATEGORY_HATE_SPEECH,
        HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT,
        HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT,
    ]

    # ── Initialisation ────────────────────────────────────────────────

    def __init__(self, settings: Settings | None = None) -> None:
        """Configure the SDK and the default generation parameters.

        Parameters
        ----------
        settings:
            Optional explicit settings; ``get_settings()`` is used when
            omitted.
        """
        settings = settings or get_settings()

        genai.configure(api_key=settings.GEMINI_API_KEY)

        self.model_name: str = settings.GEMINI_MODEL
        self._defaults: dict[str, Any] = {
            "temperature": settings.GEMINI_TEMPERATURE,
            "top_k": settings.GEMINI_TOP_K,
            "top_p": settings.GEMINI_TOP_P,
            "max_output_tokens": settings.GEMINI_MAX_OUTPUT_TOKENS,
        }

        threshold = getattr(
            HarmBlockThreshold,
            settings.GEMINI_SAFETY_THRESHOLD,
            HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
        )
        self._safety_settings = {
            category: threshold for category in self.HARM_CATEGORIES
        }

        logger.info(
            "gemini_service_initialised",
            model=self.model_name,
            safety_threshold=settings.GEMINI_SAFETY_THRESHOLD,
        )

    # ══════════════════════════════════════════════════════════════════
    # Public API
    # ══════════════════════════════════════════════════════════════════

    async def generate(
        self,
        contents: Any,
        *,
        model: str | None = None,
        temperature: float | None = None,
        max_output_tokens: int | None = None,
        top_k: int | None = None,
        top_p: float | None = None,
        tools: list[dict] | None = None,
        system_instruction: str | None = None,
    ) -> GenerationResult:
        """Send one prompt (or conversation) and return the generated output.

        Parameters
        ----------
        contents:
            A prompt string or a list of ``{"role", "parts"}`` turns.
        model:
            Model identifier; defaults to ``GEMINI_MODEL``.
        temperature, max_output_tokens, top_k, top_p:
            Per-call overrides of the configured generation defaults.
        tools:
            Function declarations offered to the model, in the SDK's
            ``[{"function_declarations": [...]}]`` shape.
        system_instruction:
            Optional system prompt.

        Returns
        -------
        GenerationResult
            Joined text and any requested function calls.

        Raises
        ------
        EmptyResponseError
            The model answered with neither text nor function calls.
        GenerationError
            The SDK raised; the original message is preserved.
        """
        model_name = model or self.model_name
        overrides = {
            "temperature": temperature,
            "max_output_tokens": max_output_tokens,
            "top_k": top_k,
            "top_p": top_p,
        }
        config_values = {
            key: overrides[key] if overrides[key] is not None else default
            for key, default in self._defaults.items()
        }
        generation_config = genai.GenerationConfig(**config_values)

        start_time = time.monotonic()
        logger.debug(
            "gemini_call_start",
            model=model_name,
            has_tools=bool(tools),
            **config_values,
        )

        try:
            generative_model = genai.GenerativeModel(
                model_name,
                system_instruction=system_instruction,
            )
            response = await generative_model.generate_content_async(
                contents,
                generation_config=generation_config,
                safety_settings=self._safety_settings,
                tools=tools,
            )
        except Exception as exc:
            logger.error(
                "gemini_call_failed",
                model=model_name,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise GenerationError(
                f"Gemini call failed for model {model_name}: {exc}",
                model=model_name,
            ) from exc

        result = self._extract_result(response, model_name)

        logger.info(
            "gemini_call_complete",
            model=model_name,
            elapsed_ms=round((time.monotonic() - start_time) * 1000, 2),
            text_length=len(result.text),
            function_calls=[fc.name for fc in result.function_calls],
        )
        return result

    # ══════════════════════════════════════════════════════════════════
    # Response handling
    # ══════════════════════════════════════════════════════════════════

    def _extract_result(self, response: Any, model_name: str) -> GenerationResult:
        """Read text and function calls from the first candidate.

        ``response.text`` is avoided because the SDK raises on it when the
        candidate only holds function-call parts.
        """
        candidates = getattr(response, "candidates", None)
        if not candidates:
            raise EmptyResponseError(
                f"Gemini returned no candidates for model {model_name}. "
                f"Prompt feedback: {getattr(response, 'prompt_feedback', None)}",
                model=model_name,
            )

        content = getattr(candidates[0], "content", None)
        parts = list(getattr(content, "parts", None) or [])

        texts: list[str] = []
        function_calls: list[FunctionCall] = []
        for part in parts:
            call = getattr(part, "function_call", None)
            call_name = getattr(call, "name", "") if call is not None else ""
            if call_name:
                function_calls.append(
                    FunctionCall(
                        name=call_name,
                        args=_to_plain(getattr(call, "args", None) or {}),
                    )
                )
                continue
            text = getattr(part, "text", "")
            if isinstance(text, str) and text:
                texts.append(text)

        text = "".join(texts)
        if not text.strip() and not function_calls:
            raise EmptyResponseError(
                f"Gemini returned empty text for model {model_name}",
                model=model_name,
            )

        return GenerationResult(
            text=text,
            function_calls=function_calls,
            model=model_name,
        )


def _to_plain(value: Any) -> Any:
    """Convert proto map/list composites into dicts and lists."""
    if isinstance(value, Mapping):
        return {str(k): _to_plain(v) for k, v in value.items()}
    if isinstance(value, (str, bytes)):
        return value
    if isinstance(value, Iterable):
        return [_to_plain(v) for v in value]
    return value
