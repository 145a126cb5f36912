"""Shared fixtures: a fresh SQLite file per test, a scripted completion provider, an HTTP client."""
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.db.base import Base
from app.db.session import get_db
from app.main import app
from app.services.completion import CompletionResult, get_completion_provider

USER_ID = "anonymous"


class FakeProvider:
    """Returns a canned answer, or a failure when text is None."""

    def __init__(self, text: str | None = None, error: str = "provider down"):
        self.text = text
        self.error = error
        self.calls: list[tuple[str, int]] = []

    async def complete(self, prompt: str, max_tokens: int) -> CompletionResult:
        self.calls.append((prompt, max_tokens))
        if self.text is None:
            return CompletionResult.failure(self.error)
        return CompletionResult.success(self.text)


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def provider():
    return FakeProvider(text="Познакомьтесь с наставником.")


@pytest.fixture
async def client(session_factory, provider):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_completion_provider] = lambda: provider
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
