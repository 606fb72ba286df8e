"""
Tests for memo storage and token-guarded edits.
"""

import uuid

import pytest

from wisdom_lenses.exceptions import NotFoundError, PermissionDeniedError, ValidationError
from wisdom_lenses.services.memo_service import MemoService
from wisdom_lenses.utils.encryption import decrypt_token, encrypt_token, token_matches


class TestEncryption:

    def test_token_round_trip(self):
        encrypted = encrypt_token("s3cret")
        assert encrypted != b"s3cret"
        assert decrypt_token(encrypted) == "s3cret"

    def test_token_matches(self):
        encrypted = encrypt_token("s3cret")
        assert token_matches(encrypted, "s3cret") is True
        assert token_matches(encrypted, "wrong") is False

    def test_corrupt_ciphertext_never_matches(self):
        assert token_matches(b"not-a-fernet-token", "s3cret") is False


class TestCreateAndList:

    @pytest.mark.asyncio
    async def test_create_stores_encrypted_token(self, db_session):
        memo = await MemoService(db_session).create("alex", "pw", 5, "기다림을 배우자")

        assert memo.id is not None
        assert memo.username == "alex"
        assert memo.edit_token != b"pw"
        assert token_matches(memo.edit_token, "pw")
        assert memo.created_at is not None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "username,token,number,text",
        [("", "pw", 5, "m"), ("alex", " ", 5, "m"), ("alex", "pw", 5, ""), ("alex", "pw", 0, "m")],
    )
    async def test_create_validation(self, db_session, username, token, number, text):
        with pytest.raises(ValidationError):
            await MemoService(db_session).create(username, token, number, text)

    @pytest.mark.asyncio
    async def test_list_newest_first_with_filters(self, db_session):
        """Memos list newest first and filter by hexagram and username."""
        service = MemoService(db_session)
        first = await service.create("alex", "pw", 5, "first")
        second = await service.create("sam", "pw", 5, "second")
        await service.create("alex", "pw", 7, "other hexagram")

        memos, total = await service.list(hexagram_number=5)
        assert total == 2
        assert [m.id for m in memos] == [second.id, first.id]

        memos, total = await service.list(username="alex")
        assert total == 2
        assert {m.hexagram_number for m in memos} == {5, 7}

    @pytest.mark.asyncio
    async def test_list_pagination(self, db_session):
        service = MemoService(db_session)
        for i in range(5):
            await service.create("alex", "pw", 1, f"memo {i}")

        memos, total = await service.list(page=2, page_size=2)

        assert total == 5
        assert [m.memo for m in memos] == ["memo 2", "memo 1"]


class TestUpdateAndDelete:

    @pytest.mark.asyncio
    async def test_update_with_matching_credentials(self, db_session):
        service = MemoService(db_session)
        memo = await service.create("alex", "pw", 5, "old")

        updated = await service.update(memo.id, "alex", "pw", "new")

        assert updated.memo == "new"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("username,token", [("alex", "wrong"), ("sam", "pw")])
    async def test_update_with_wrong_credentials(self, db_session, username, token):
        """Either a wrong username or a wrong token is refused."""
        service = MemoService(db_session)
        memo = await service.create("alex", "pw", 5, "old")

        with pytest.raises(PermissionDeniedError):
            await service.update(memo.id, username, token, "new")

    @pytest.mark.asyncio
    async def test_update_unknown_memo(self, db_session):
        with pytest.raises(NotFoundError):
            await MemoService(db_session).update(uuid.uuid4(), "alex", "pw", "new")

    @pytest.mark.asyncio
    async def test_delete(self, db_session):
        service = MemoService(db_session)
        memo = await service.create("alex", "pw", 5, "bye")

        with pytest.raises(PermissionDeniedError):
            await service.delete(memo.id, "alex", "nope")
        await service.delete(memo.id, "alex", "pw")

        memos, total = await service.list()
        assert total == 0
        assert memos == []
