"""
Tests for memorize subjects and cards.
"""

import uuid

import pytest

from wisdom_lenses.exceptions import ConflictError, NotFoundError, ValidationError
from wisdom_lenses.services.memorize_service import MemorizeService


class TestSubjects:

    @pytest.mark.asyncio
    async def test_create_and_get(self, db_session):
        service = MemorizeService(db_session)
        subject = await service.create_subject("  괘 이름  ", None)

        assert subject.name == "괘 이름"
        assert subject.description == ""
        assert (await service.get_subject(subject.id)).id == subject.id

    @pytest.mark.asyncio
    async def test_duplicate_name(self, db_session):
        service = MemorizeService(db_session)
        await service.create_subject("괘 이름")

        with pytest.raises(ConflictError):
            await service.create_subject("괘 이름")

    @pytest.mark.asyncio
    async def test_blank_name(self, db_session):
        with pytest.raises(ValidationError):
            await MemorizeService(db_session).create_subject("   ")

    @pytest.mark.asyncio
    async def test_unknown_subject(self, db_session):
        with pytest.raises(NotFoundError):
            await MemorizeService(db_session).get_subject(uuid.uuid4())

    @pytest.mark.asyncio
    async def test_list_subjects_with_card_counts(self, db_session):
        """Each subject is listed once with the number of its cards."""
        service = MemorizeService(db_session)
        names = await service.create_subject("names")
        await service.create_subject("symbols")
        await service.add_card(names.id, "1번?", "중천건")
        await service.add_card(names.id, "2번?", "중지곤")

        counts = {s.name: c for s, c in await service.list_subjects()}

        assert counts == {"names": 2, "symbols": 0}


class TestCards:

    @pytest.mark.asyncio
    async def test_add_list_update_delete(self, db_session):
        service = MemorizeService(db_session)
        subject = await service.create_subject("names")
        card = await service.add_card(subject.id, " 1번? ", " 중천건 ")

        assert card.question == "1번?"
        assert card.answer == "중천건"
        assert [c.id for c in await service.list_cards(subject.id)] == [card.id]

        updated = await service.update_card(card.id, "첫 괘?", "중천건")
        assert updated.question == "첫 괘?"

        await service.delete_card(card.id)
        assert await service.list_cards(subject.id) == []

    @pytest.mark.asyncio
    async def test_card_requires_question_and_answer(self, db_session):
        service = MemorizeService(db_session)
        subject = await service.create_subject("names")

        with pytest.raises(ValidationError):
            await service.add_card(subject.id, "", "a")
        with pytest.raises(ValidationError):
            await service.add_card(subject.id, "q", "  ")

    @pytest.mark.asyncio
    async def test_card_for_unknown_subject(self, db_session):
        with pytest.raises(NotFoundError):
            await MemorizeService(db_session).add_card(uuid.uuid4(), "q", "a")

    @pytest.mark.asyncio
    async def test_unknown_card(self, db_session):
        service = MemorizeService(db_session)
        with pytest.raises(NotFoundError):
            await service.update_card(uuid.uuid4(), "q", "a")
        with pytest.raises(NotFoundError):
            await service.delete_card(uuid.uuid4())
