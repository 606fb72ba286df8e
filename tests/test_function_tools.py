"""
Tests for the function-calling toolbox: declarations and local handlers.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from wisdom_lenses.services.function_tools import (
    DECLARED_FUNCTIONS,
    FUNCTION_DECLARATIONS,
    FunctionCallResult,
    HexagramToolbox,
    gemini_tools,
)


class TestDeclarations:

    def test_five_functions_declared(self):
        """The toolbox exposes exactly the five catalog functions."""
        assert DECLARED_FUNCTIONS == {
            "get_hexagram_info",
            "search_hexagram_by_keyword",
            "analyze_user_situation",
            "calculate_hexagram_compatibility",
            "select_final_hexagram",
        }

    def test_declarations_are_object_schemas(self):
        """Every declaration has an OBJECT parameter schema with required args."""
        for declaration in FUNCTION_DECLARATIONS:
            params = declaration["parameters"]
            assert params["type"] == "OBJECT"
            assert set(params["required"]) <= set(params["properties"])

    def test_tools_wrapper_shape(self):
        tools = gemini_tools()
        assert tools == [{"function_declarations": FUNCTION_DECLARATIONS}]


class TestFunctionCallResult:

    def test_success_payload(self):
        result = FunctionCallResult(name="f", result={"a": 1})
        assert result.payload() == {"success": True, "data": {"a": 1}}

    def test_failure_payload(self):
        result = FunctionCallResult(
            name="f", success=False, error="boom", error_type="NotFoundError"
        )
        assert result.payload() == {
            "success": False, "error": "boom", "error_type": "NotFoundError",
        }


class TestDispatch:

    @pytest.mark.asyncio
    async def test_get_hexagram_info(self, seeded_store):
        """Number lookup returns the catalog entry with a retrieval stamp."""
        result = await HexagramToolbox(seeded_store).dispatch(
            "get_hexagram_info", {"number": 1}
        )

        assert result.success is True
        assert result.result["name"] == "중천건"
        assert result.result["keywords"] == ["창조", "리더십", "시작", "열정"]
        assert "retrieved_at" in result.result

    @pytest.mark.asyncio
    async def test_missing_hexagram_is_reported(self, seeded_store):
        """A valid but absent number is an unsuccessful NotFoundError result."""
        result = await HexagramToolbox(seeded_store).dispatch(
            "get_hexagram_info", {"number": 64}
        )

        assert result.success is False
        assert result.error_type == "NotFoundError"

    @pytest.mark.asyncio
    async def test_out_of_range_number_is_reported(self, seeded_store):
        result = await HexagramToolbox(seeded_store).dispatch(
            "get_hexagram_info", {"number": 65}
        )

        assert result.success is False
        assert result.error_type == "ValidationError"

    @pytest.mark.asyncio
    async def test_missing_argument(self, seeded_store):
        result = await HexagramToolbox(seeded_store).dispatch("get_hexagram_info", {})

        assert result.success is False
        assert result.error_type == "InvalidArguments"

    @pytest.mark.asyncio
    async def test_unknown_function(self, seeded_store):
        """Unknown names never raise; they come back as UnknownFunction."""
        result = await HexagramToolbox(seeded_store).dispatch("launch_rocket", None)

        assert result.success is False
        assert result.error_type == "UnknownFunction"
        assert "launch_rocket" in result.error

    @pytest.mark.asyncio
    async def test_search_by_keyword(self, seeded_store):
        """Search returns matches with the keywords that triggered them."""
        result = await HexagramToolbox(seeded_store).dispatch(
            "search_hexagram_by_keyword", {"keyword": "인내"}
        )

        assert result.success is True
        assert result.result["count"] == 1
        match = result.result["results"][0]
        assert match["number"] == 2
        assert match["relevant_keywords"] == ["인내"]

    @pytest.mark.asyncio
    async def test_search_respects_limit(self, seeded_store):
        result = await HexagramToolbox(seeded_store).dispatch(
            "search_hexagram_by_keyword", {"keyword": "의", "limit": 1}
        )

        assert result.success is True
        assert result.result["count"] == 1

    @pytest.mark.asyncio
    async def test_analyze_user_situation(self, seeded_store):
        result = await HexagramToolbox(seeded_store).dispatch(
            "analyze_user_situation", {"user_input": "직장에서 걱정이 많아요"}
        )

        assert result.success is True
        assert result.result["emotions"] == ["불안"]
        assert result.result["situation"] == "직장 및 업무 관련"

    @pytest.mark.asyncio
    async def test_calculate_compatibility_scores_whole_catalog(self, seeded_store):
        """Every catalog row is scored; top scores are a prefix of all scores."""
        result = await HexagramToolbox(seeded_store).dispatch(
            "calculate_hexagram_compatibility",
            {"emotions": ["불안"], "situation": "직장", "keywords": ["인내"]},
        )

        data = result.result
        assert result.success is True
        assert data["total_hexagrams"] == 4
        assert len(data["all_scores"]) == 4
        assert data["top_scores"] == data["all_scores"][:10]
        assert data["top_scores"][0]["number"] == 2

    @pytest.mark.asyncio
    async def test_calculate_compatibility_rejects_bad_lists(self, seeded_store):
        result = await HexagramToolbox(seeded_store).dispatch(
            "calculate_hexagram_compatibility",
            {"emotions": 3, "situation": "x", "keywords": []},
        )

        assert result.success is False
        assert result.error_type == "InvalidArguments"

    @pytest.mark.asyncio
    async def test_select_final_hexagram_loads_catalog_row(self, seeded_store):
        """The winner is enriched from the catalog."""
        result = await HexagramToolbox(seeded_store).dispatch(
            "select_final_hexagram",
            {
                "compatibility_scores": [
                    {"number": 1, "name": "x", "score": 0.3},
                    {"number": 5, "name": "y", "score": 1.1},
                ],
                "user_analysis": {"emotions": ["불안"], "situation": "s", "keywords": []},
            },
        )

        selected = result.result["selected_hexagram"]
        assert selected["number"] == 5
        assert selected["name"] == "수천수"
        assert selected["symbol"] == "☵/☰"

    @pytest.mark.asyncio
    async def test_select_final_hexagram_requires_scores(self, seeded_store):
        result = await HexagramToolbox(seeded_store).dispatch(
            "select_final_hexagram", {"compatibility_scores": [], "user_analysis": {}}
        )

        assert result.success is False
        assert result.error_type == "InvalidArguments"

    @pytest.mark.asyncio
    async def test_unexpected_error_is_captured(self):
        """A store crash surfaces as a failed result named after the exception."""
        store = MagicMock()
        store.get_by_number = AsyncMock(side_effect=RuntimeError("db down"))

        result = await HexagramToolbox(store).dispatch("get_hexagram_info", {"number": 1})

        assert result.success is False
        assert result.error_type == "RuntimeError"
        assert result.error == "db down"
