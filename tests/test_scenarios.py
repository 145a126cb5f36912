import asyncio

import pytest
from sqlalchemy import func, select

from app.core.errors import NotFoundError, ValidationError
from app.models import Scenario, User
from app.services import scenarios
from tests.conftest import USER_ID


async def test_create_then_get_returns_title_and_no_steps(db):
    created = await scenarios.create_scenario(db, USER_ID, "Onboarding")

    fetched = await scenarios.get_scenario(db, created.id)
    assert fetched.title == "Onboarding"
    assert fetched.author_id == USER_ID
    assert fetched.steps == []


@pytest.mark.parametrize("title", ["", None])
async def test_create_without_title_persists_nothing(db, title):
    with pytest.raises(ValidationError, match="Missing title"):
        await scenarios.create_scenario(db, USER_ID, title)

    count = await db.scalar(select(func.count(Scenario.id)))
    assert count == 0


async def test_unknown_scenario_is_not_found(db):
    with pytest.raises(NotFoundError):
        await scenarios.get_scenario(db, "missing")
    with pytest.raises(NotFoundError, match="Scenario not found"):
        await scenarios.add_step(db, "missing", "text")


async def test_empty_content_checked_before_lookup(db):
    with pytest.raises(ValidationError, match="Missing content"):
        await scenarios.add_step(db, "missing", "")


async def test_steps_keep_insertion_order(db):
    scenario = await scenarios.create_scenario(db, USER_ID, "Order")
    for content in ["A", "B", "C"]:
        await scenarios.add_step(db, scenario.id, content)

    fetched = await scenarios.get_scenario(db, scenario.id)
    assert [s.content for s in fetched.steps] == ["A", "B", "C"]


async def test_list_scenarios_oldest_first_with_steps(db):
    first = await scenarios.create_scenario(db, USER_ID, "First")
    await scenarios.create_scenario(db, USER_ID, "Second")
    await scenarios.add_step(db, first.id, "step")

    items = await scenarios.list_scenarios(db)
    assert [s.title for s in items] == ["First", "Second"]
    assert [s.content for s in items[0].steps] == ["step"]
    assert items[1].steps == []


async def test_concurrent_creation_makes_one_author(session_factory):
    async def create(i):
        async with session_factory() as session:
            return await scenarios.create_scenario(session, USER_ID, f"Scenario {i}")

    created = await asyncio.gather(*(create(i) for i in range(5)))
    assert len({s.id for s in created}) == 5

    async with session_factory() as session:
        users = (await session.execute(select(User))).scalars().all()
    assert [u.id for u in users] == [USER_ID]
    assert users[0].email == "anon@pi-kub"


async def test_count_author_steps_spans_scenarios(db):
    a = await scenarios.create_scenario(db, USER_ID, "A")
    b = await scenarios.create_scenario(db, USER_ID, "B")
    await scenarios.add_step(db, a.id, "1")
    await scenarios.add_step(db, b.id, "2")
    await scenarios.add_step(db, b.id, "3")

    assert await scenarios.count_author_steps(db, USER_ID) == 3
    assert await scenarios.count_author_steps(db, "someone-else") == 0
