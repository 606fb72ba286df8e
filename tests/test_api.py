"""End-to-end tests for the HTTP API.

Requests go through the real routers, services and an in-memory SQLite
database; only the Gemini client is replaced by a mock.
"""
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio

from wisdom_lenses.services.gemini_service import FunctionCall, GenerationResult

SITUATION = "직장에서 중요한 결정을 앞두고 불안합니다"


@pytest_asyncio.fixture
async def seeded_client(api_client):
    response = await api_client.post("/api/hexagrams/seed")
    assert response.status_code == 201
    return api_client


def _result(text="", calls=None):
    return GenerationResult(text=text, function_calls=calls or [], model="gemini-test")


class TestHealth:

    @pytest.mark.asyncio
    async def test_liveness(self, api_client):
        response = await api_client.get("/health")
        assert response.json() == {"status": "healthy"}

    @pytest.mark.asyncio
    async def test_deep(self, api_client):
        """Deep health runs a query through the app's session factory."""
        response = await api_client.get("/health/deep")
        assert response.json() == {"status": "healthy", "database": "connected"}


class TestHexagramCatalog:

    @pytest.mark.asyncio
    async def test_seed_reports_all_entries(self, api_client):
        response = await api_client.post("/api/hexagrams/seed")
        body = response.json()

        assert body["inserted_count"] == 64
        assert body["hexagrams"][0] == {"number": 1, "name": "중천건", "symbol": "☰/☰"}

    @pytest.mark.asyncio
    async def test_get_by_number(self, seeded_client):
        response = await seeded_client.get("/api/hexagrams", params={"number": 5})

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "수천수"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("number", [0, 65])
    async def test_out_of_range_number(self, seeded_client, number):
        """Out-of-range numbers are a 400 with the error envelope."""
        response = await seeded_client.get("/api/hexagrams", params={"number": number})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"]["type"] == "ValidationError"

    @pytest.mark.asyncio
    async def test_missing_number_is_404(self, api_client):
        response = await api_client.get("/api/hexagrams", params={"number": 3})
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_paged_listing(self, seeded_client):
        response = await seeded_client.get("/api/hexagrams", params={"page": 2, "limit": 10})
        body = response.json()

        assert [h["number"] for h in body["data"]] == list(range(11, 21))
        assert body["pagination"] == {"page": 2, "limit": 10, "total": 64, "pages": 7}

    @pytest.mark.asyncio
    async def test_limit_is_capped(self, seeded_client):
        response = await seeded_client.get("/api/hexagrams", params={"limit": 500})
        assert response.json()["pagination"]["limit"] == 64

    @pytest.mark.asyncio
    async def test_keyword_search(self, seeded_client):
        response = await seeded_client.get("/api/hexagrams", params={"keyword": "기다림"})
        numbers = [h["number"] for h in response.json()["data"]]

        assert 5 in numbers

    @pytest.mark.asyncio
    async def test_random(self, seeded_client):
        response = await seeded_client.get("/api/hexagrams", params={"random": "true"})
        assert 1 <= response.json()["data"]["number"] <= 64

    @pytest.mark.asyncio
    async def test_all(self, seeded_client):
        body = (await seeded_client.get("/api/hexagrams/all")).json()
        assert body["count"] == 64

    @pytest.mark.asyncio
    async def test_create_update_delete(self, api_client):
        """A single entry can be created, edited and removed."""
        created = await api_client.post("/api/hexagrams", json={
            "number": 7, "symbol": "☷/☵", "name": "지수사",
            "core_viewpoint": "조직과 규율", "summary": "군대의 질서",
        })
        assert created.status_code == 201
        assert created.json()["data"]["keywords"][0] == "지수사"

        duplicate = await api_client.post("/api/hexagrams", json={
            "number": 7, "symbol": "x", "name": "x", "core_viewpoint": "x", "summary": "x",
        })
        assert duplicate.status_code == 409

        updated = await api_client.put("/api/hexagrams/7", json={"summary": "규율의 힘"})
        assert updated.json()["data"]["summary"] == "규율의 힘"

        deleted = await api_client.delete("/api/hexagrams/7")
        assert deleted.json()["deleted_count"] == 1
        assert (await api_client.delete("/api/hexagrams/7")).status_code == 404

    @pytest.mark.asyncio
    async def test_create_missing_fields(self, api_client):
        response = await api_client.post("/api/hexagrams", json={"number": 7})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_update_without_editable_fields(self, seeded_client):
        response = await seeded_client.put("/api/hexagrams/1", json={})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_delete_all(self, seeded_client):
        body = (await seeded_client.delete("/api/hexagrams")).json()
        assert body["deleted_count"] == 64

    @pytest.mark.asyncio
    async def test_import_markdown(self, seeded_client):
        markdown = (
            "|---|---|---|---|---|---|\n"
            "| 1 | ☰/☰ | 건（乾） | 창조 | - | 새 요약 |\n"
        )
        body = (await seeded_client.post(
            "/api/hexagrams/import-markdown", json={"markdown": markdown}
        )).json()

        assert body["parsed"] == 1
        assert body["updated"] == 1
        one = (await seeded_client.get("/api/hexagrams", params={"number": 1})).json()
        assert one["data"]["summary"] == "새 요약"

    @pytest.mark.asyncio
    async def test_roll_with_dice(self, seeded_client):
        body = (await seeded_client.post("/api/hexagrams/roll", json={"upper": 2, "lower": 1})).json()

        assert body["number"] == 9
        assert body["hexagram"]["name"] == "풍천소축"

    @pytest.mark.asyncio
    async def test_roll_random(self, seeded_client):
        body = (await seeded_client.post("/api/hexagrams/roll")).json()
        assert body["number"] == (body["upper"] - 1) * 8 + body["lower"]

    @pytest.mark.asyncio
    async def test_roll_invalid_die(self, seeded_client):
        response = await seeded_client.post("/api/hexagrams/roll", json={"upper": 9, "lower": 1})
        assert response.status_code == 400


class TestPerspectivesApi:

    @pytest.mark.asyncio
    async def test_single_lens(self, seeded_client, fake_gemini):
        response = await seeded_client.post("/api/ai/perspectives", json={
            "hexagram_number": 5, "user_situation": SITUATION, "perspective": "physics",
        })

        body = response.json()
        assert response.status_code == 200
        assert list(body["perspectives"]) == ["physics"]
        assert len(body["perspectives"]["physics"]["questions"]) == 3
        fake_gemini.generate.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_all_lenses(self, seeded_client, fake_gemini):
        with patch(
            "wisdom_lenses.services.perspective_service.asyncio.sleep",
            new_callable=AsyncMock,
        ):
            response = await seeded_client.post("/api/ai/perspectives", json={
                "hexagram_number": 5, "user_situation": SITUATION,
            })

        assert len(response.json()["perspectives"]) == 6
        assert fake_gemini.generate.await_count == 6

    @pytest.mark.asyncio
    async def test_unknown_lens(self, seeded_client):
        response = await seeded_client.post("/api/ai/perspectives", json={
            "hexagram_number": 5, "user_situation": SITUATION, "perspective": "tarot",
        })

        assert response.status_code == 400
        assert response.json()["error"]["type"] == "UnknownPerspective"

    @pytest.mark.asyncio
    async def test_missing_fields(self, seeded_client):
        response = await seeded_client.post("/api/ai/perspectives", json={"hexagram_number": 5})
        assert response.status_code == 400


class TestFunctionCallingApi:

    @pytest.mark.asyncio
    async def test_status(self, api_client):
        body = (await api_client.get("/api/ai/function-calling")).json()

        assert body["status"] == "ready"
        assert body["model"] == "gemini-test"
        assert "get_hexagram_info" in body["functions"]

    @pytest.mark.asyncio
    async def test_two_round_run(self, seeded_client, fake_gemini):
        fake_gemini.generate = AsyncMock(side_effect=[
            _result(calls=[FunctionCall(name="get_hexagram_info", args={"number": 1})]),
            _result("중천건은 창조의 괘입니다."),
        ])

        body = (await seeded_client.post(
            "/api/ai/function-calling", json={"prompt": "1번 괘 알려줘"}
        )).json()

        assert body["response"] == "중천건은 창조의 괘입니다."
        assert body["rounds"] == 2
        assert body["function_results"][0]["result"]["name"] == "중천건"

    @pytest.mark.asyncio
    async def test_supplied_results(self, api_client, fake_gemini):
        fake_gemini.generate = AsyncMock(return_value=_result("정리했습니다."))

        body = (await api_client.post("/api/ai/function-calling", json={
            "prompt": "정리해줘",
            "function_results": [{"name": "analyze_user_situation", "result": {"emotions": []}}],
        })).json()

        assert body["response"] == "정리했습니다."
        assert body["rounds"] == 1

    @pytest.mark.asyncio
    async def test_generation_failure_is_502(self, api_client, fake_gemini):
        from wisdom_lenses.exceptions import GenerationError

        fake_gemini.generate = AsyncMock(side_effect=GenerationError("quota exceeded"))
        response = await api_client.post("/api/ai/function-calling", json={"prompt": "hi"})

        assert response.status_code == 502
        assert response.json()["message"] == "quota exceeded"

    @pytest.mark.asyncio
    async def test_blank_prompt(self, api_client):
        response = await api_client.post("/api/ai/function-calling", json={"prompt": " "})
        assert response.status_code == 400


class TestAnalyzeApi:

    @pytest.mark.asyncio
    async def test_selection(self, seeded_client, fake_gemini):
        fake_gemini.generate = AsyncMock(return_value=_result(
            "SELECTED_HEXAGRAM: 5\nREASONING: 기다리세요.\nCONFIDENCE: 8"
        ))

        body = (await seeded_client.post("/api/analyze", json={"user_situation": SITUATION})).json()

        assert body["selected_hexagram"]["number"] == 5
        assert body["analysis"]["confidence"] == pytest.approx(0.8)
        assert body["session_id"].startswith("session_")

    @pytest.mark.asyncio
    async def test_short_situation(self, seeded_client):
        response = await seeded_client.post("/api/analyze", json={"user_situation": "짧음"})
        assert response.status_code == 400


class TestMemosApi:

    @pytest.mark.asyncio
    async def test_memo_lifecycle(self, api_client):
        """Create, list, edit and delete a memo with its password."""
        created = await api_client.post("/api/memos", json={
            "username": "alex", "password": "pw", "hexagram_number": 5, "memo": "첫 메모",
        })
        assert created.status_code == 201
        memo = created.json()["data"]
        assert "password" not in memo and "edit_token" not in memo

        listing = (await api_client.get("/api/memos", params={"hexagram_number": 5})).json()
        assert listing["total"] == 1

        denied = await api_client.put("/api/memos", json={
            "id": memo["id"], "username": "alex", "password": "nope", "memo": "x",
        })
        assert denied.status_code == 403

        edited = await api_client.put("/api/memos", json={
            "id": memo["id"], "username": "alex", "password": "pw", "memo": "수정",
        })
        assert edited.json()["data"]["memo"] == "수정"

        deleted = await api_client.request("DELETE", "/api/memos", json={
            "id": memo["id"], "username": "alex", "password": "pw",
        })
        assert deleted.json()["success"] is True
        assert (await api_client.get("/api/memos")).json()["total"] == 0

    @pytest.mark.asyncio
    async def test_page_size_clamped(self, api_client):
        body = (await api_client.get("/api/memos", params={"page_size": 1000, "page": 0})).json()
        assert body["page_size"] == 100
        assert body["page"] == 1


class TestFlashCardsApi:

    @pytest.mark.asyncio
    async def test_record_and_progress(self, api_client):
        first = (await api_client.post("/api/flash-card/difficulty", json={
            "username": "alex", "hexagram_number": 5, "difficulty": "again",
        })).json()
        second = (await api_client.post("/api/flash-card/difficulty", json={
            "username": "alex", "hexagram_number": 5, "difficulty": "later",
        })).json()

        assert first["created"] is True
        assert second["created"] is False
        assert second["progress"]["review_count"] == 2

        progress = (await api_client.get(
            "/api/flash-card/difficulty", params={"username": "alex"}
        )).json()
        assert progress["stats"]["later"] == 1
        assert progress["stats"]["total"] == 1

    @pytest.mark.asyncio
    async def test_missing_fields(self, api_client):
        response = await api_client.post("/api/flash-card/difficulty", json={"username": "alex"})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_progress_requires_username(self, api_client):
        response = await api_client.get("/api/flash-card/difficulty")
        assert response.status_code == 400


class TestMemorizeApi:

    @pytest.mark.asyncio
    async def test_subjects_and_cards(self, api_client):
        subject = (await api_client.post(
            "/api/memorize/subjects", json={"name": "괘 이름", "description": "64괘"}
        )).json()

        card = await api_client.post(
            f"/api/memorize/subjects/{subject['id']}/cards",
            json={"question": "1번?", "answer": "중천건"},
        )
        assert card.status_code == 201
        card_id = card.json()["id"]

        subjects = (await api_client.get("/api/memorize/subjects")).json()
        assert subjects[0]["card_count"] == 1

        updated = await api_client.put(
            f"/api/memorize/cards/{card_id}", json={"question": "첫 괘?", "answer": "중천건"}
        )
        assert updated.json()["question"] == "첫 괘?"

        removed = await api_client.delete(f"/api/memorize/cards/{card_id}")
        assert removed.json()["success"] is True
        cards = (await api_client.get(f"/api/memorize/subjects/{subject['id']}/cards")).json()
        assert cards == []

    @pytest.mark.asyncio
    async def test_duplicate_subject(self, api_client):
        await api_client.post("/api/memorize/subjects", json={"name": "dup"})
        response = await api_client.post("/api/memorize/subjects", json={"name": "dup"})
        assert response.status_code == 409
