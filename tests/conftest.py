"""Shared pytest fixtures for Wisdom Lenses tests."""
import os

from cryptography.fernet import Fernet

os.environ.setdefault("GEMINI_API_KEY", "test-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("MEMO_TOKEN_KEY", Fernet.generate_key().decode())

import httpx  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

import wisdom_lenses.models  # noqa: E402,F401
from wisdom_lenses.database import Base, build_session_factory  # noqa: E402
from wisdom_lenses.services.gemini_service import GenerationResult  # noqa: E402
from wisdom_lenses.services.hexagram_store import HexagramStore  # noqa: E402


WELL_FORMED_RESPONSE = """**⚙️ 에너지 보존의 관점**

기다림은 에너지를 축적하는 과정입니다. 시스템은 평형을 향해 움직입니다.

**핵심 메시지**: 서두르지 말고 에너지를 모으세요.

**전략적 질문**:
1. 지금 어디에 에너지를 낭비하고 있나요?
2. 시스템을 안정시키는 요소는 무엇인가요?
3. 어떤 힘의 균형을 바꿀 수 있나요?"""


@pytest.fixture
def sample_hexagram_records():
    """A small catalog: three seeded-style entries plus the waiting hexagram."""
    return [
        {
            "number": 1,
            "symbol": "☰/☰",
            "name": "중천건",
            "korean_name": "重天乾",
            "core_viewpoint": "창조적 에너지와 리더십의 발현",
            "summary": "하늘의 창조적 힘",
            "keywords": ["창조", "리더십", "시작", "열정"],
        },
        {
            "number": 2,
            "symbol": "☷/☷",
            "name": "중지곤",
            "korean_name": "重地坤",
            "core_viewpoint": "수용과 포용의 힘",
            "summary": "땅의 수용적 덕",
            "keywords": ["인내", "수용", "부드러움", "조화"],
        },
        {
            "number": 3,
            "symbol": "☵/☳",
            "name": "수뢰둔",
            "core_viewpoint": "시작의 어려움 속 성장",
            "summary": "어려움 속의 시작",
            "keywords": ["노력", "성장", "축적"],
        },
        {
            "number": 5,
            "symbol": "☵/☰",
            "name": "수천수",
            "core_viewpoint": "Strategic waiting",
            "summary": "Waiting with patience",
            "keywords": ["strategy", "waiting", "patience"],
        },
    ]


@pytest.fixture
def sample_hexagram():
    """Attribute-style hexagram for prompt builders."""
    hexagram = MagicMock()
    hexagram.number = 5
    hexagram.name = "수천수"
    hexagram.symbol = "☵/☰"
    hexagram.core_viewpoint = "전략적 기다림"
    hexagram.summary = "때를 기다리는 지혜"
    hexagram.keywords = ["기다림", "인내", "전략"]
    return hexagram


@pytest.fixture
def well_formed_response():
    return WELL_FORMED_RESPONSE


# ── Database ──────────────────────────────────────────────────────────────────


@pytest_asyncio.fixture
async def db_engine():
    """In-memory SQLite engine with every table created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine):
    factory = build_session_factory(db_engine)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def seeded_store(db_session, sample_hexagram_records):
    store = HexagramStore(db_session)
    await store.seed(sample_hexagram_records)
    await db_session.commit()
    return store


# ── Gemini ────────────────────────────────────────────────────────────────────


@pytest.fixture
def fake_gemini():
    """Stand-in for GeminiService; configure ``generate`` per test."""
    client = MagicMock()
    client.model_name = "gemini-test"
    client.generate = AsyncMock(return_value=GenerationResult(
        text=WELL_FORMED_RESPONSE, function_calls=[], model="gemini-test"
    ))
    return client


# ── HTTP ──────────────────────────────────────────────────────────────────────


@pytest_asyncio.fixture
async def api_client(db_engine, fake_gemini):
    """httpx client against the app, sharing the in-memory database."""
    from wisdom_lenses.main import create_app

    app = create_app()
    app.state.session_factory = build_session_factory(db_engine)
    app.state.gemini = fake_gemini

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

