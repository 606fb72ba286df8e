"""
Tests for the two-round function-calling orchestrator.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from wisdom_lenses.exceptions import GenerationError, ValidationError
from wisdom_lenses.services.function_calling_service import (
    FunctionCallingOrchestrator,
    OrchestrationState,
    build_final_prompt,
    render_function_results,
)
from wisdom_lenses.services.function_tools import (
    FunctionCallResult,
    HexagramToolbox,
    gemini_tools,
)
from wisdom_lenses.services.gemini_service import FunctionCall, GenerationResult


def make_result(text="", function_calls=None):
    return GenerationResult(text=text, function_calls=function_calls or [], model="gemini-test")


def make_call(name, **args):
    return FunctionCall(name=name, args=args)


def _toolbox(results=None):
    toolbox = MagicMock(spec=HexagramToolbox)
    toolbox.dispatch = AsyncMock(side_effect=results or [])
    return toolbox


class TestRenderResults:

    def test_render_blocks(self):
        """Each result is a labelled, indented JSON block; Korean kept as-is."""
        text = render_function_results([
            ("get_hexagram_info", {"success": True, "data": {"name": "중천건"}}),
            ("analyze_user_situation", {"success": True, "data": {}}),
        ])

        assert text.startswith("함수 get_hexagram_info 실행 결과:\n{")
        assert '"name": "중천건"' in text
        assert "\n\n함수 analyze_user_situation 실행 결과:" in text

    def test_final_prompt_contains_request_and_results(self):
        prompt = build_final_prompt("괘 1번 알려줘", [("f", {"x": 1})])

        assert prompt.startswith("사용자 요청: 괘 1번 알려줘")
        assert "다음 함수들이 실행되었습니다:" in prompt
        assert '"x": 1' in prompt


class TestRun:

    @pytest.mark.asyncio
    async def test_direct_answer_skips_second_round(self, fake_gemini):
        """No function calls means one generation call and its text returned."""
        fake_gemini.generate = AsyncMock(return_value=make_result("바로 답변"))
        toolbox = _toolbox()
        orchestrator = FunctionCallingOrchestrator(fake_gemini, toolbox)

        result = await orchestrator.run("안녕하세요")

        assert result.answer == "바로 답변"
        assert result.rounds == 1
        assert result.function_results == []
        fake_gemini.generate.assert_awaited_once_with("안녕하세요", tools=gemini_tools())
        toolbox.dispatch.assert_not_awaited()
        assert orchestrator.state is OrchestrationState.DONE

    @pytest.mark.asyncio
    async def test_function_call_result_feeds_second_round(self, fake_gemini, seeded_store):
        """get_hexagram_info runs locally and its result is in the round-2 prompt."""
        fake_gemini.generate = AsyncMock(side_effect=[
            make_result(function_calls=[make_call("get_hexagram_info", number=1)]),
            make_result("중천건은 창조의 괘입니다."),
        ])
        orchestrator = FunctionCallingOrchestrator(fake_gemini, HexagramToolbox(seeded_store))

        result = await orchestrator.run("1번 괘를 설명해줘")

        assert result.answer == "중천건은 창조의 괘입니다."
        assert result.rounds == 2
        assert len(result.function_results) == 1
        assert result.function_results[0].success is True

        second_call = fake_gemini.generate.await_args_list[1]
        final_prompt = second_call.args[0]
        assert "함수 get_hexagram_info 실행 결과:" in final_prompt
        assert "중천건" in final_prompt
        assert "tools" not in second_call.kwargs

    @pytest.mark.asyncio
    async def test_calls_dispatched_in_order_before_round_two(self, fake_gemini):
        """Every round-1 call is dispatched, in order, before round 2 starts."""
        calls = [make_call("analyze_user_situation", user_input="x"), make_call("nope")]
        fake_gemini.generate = AsyncMock(side_effect=[
            make_result(function_calls=calls),
            make_result("final"),
        ])
        toolbox = _toolbox([
            FunctionCallResult(name="analyze_user_situation", result={"ok": 1}),
            FunctionCallResult(
                name="nope", success=False, error="Unknown function: nope",
                error_type="UnknownFunction",
            ),
        ])

        result = await FunctionCallingOrchestrator(fake_gemini, toolbox).run("prompt")

        assert [c.args[0] for c in toolbox.dispatch.await_args_list] == [
            "analyze_user_situation", "nope",
        ]
        final_prompt = fake_gemini.generate.await_args_list[1].args[0]
        assert '"error_type": "UnknownFunction"' in final_prompt
        assert result.answer == "final"

    @pytest.mark.asyncio
    async def test_generation_error_propagates(self, fake_gemini):
        fake_gemini.generate = AsyncMock(side_effect=GenerationError("quota", model="m"))

        with pytest.raises(GenerationError):
            await FunctionCallingOrchestrator(fake_gemini, _toolbox()).run("prompt")

    @pytest.mark.asyncio
    async def test_blank_prompt_rejected(self, fake_gemini):
        with pytest.raises(ValidationError):
            await FunctionCallingOrchestrator(fake_gemini, _toolbox()).run("   ")
        fake_gemini.generate.assert_not_awaited()


class TestFinalize:

    @pytest.mark.asyncio
    async def test_supplied_results_are_rendered(self, fake_gemini):
        """Caller-executed results go straight into a single generation call."""
        fake_gemini.generate = AsyncMock(return_value=make_result("요약"))

        result = await FunctionCallingOrchestrator(fake_gemini, _toolbox()).finalize(
            "질문", [{"name": "get_hexagram_info", "result": {"number": 3}}]
        )

        assert result.answer == "요약"
        assert result.rounds == 1
        prompt = fake_gemini.generate.await_args.args[0]
        assert "함수 get_hexagram_info 실행 결과:" in prompt

    @pytest.mark.asyncio
    @pytest.mark.parametrize("supplied", [[], [{"result": 1}]])
    async def test_invalid_supplied_results(self, fake_gemini, supplied):
        with pytest.raises(ValidationError):
            await FunctionCallingOrchestrator(fake_gemini, _toolbox()).finalize("q", supplied)
