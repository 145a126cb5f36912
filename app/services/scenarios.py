"""Scenario and step bookkeeping."""
import logging

from sqlalchemy import func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.config import get_settings
from app.core.errors import NotFoundError, ValidationError
from app.models import Scenario, Step, User

logger = logging.getLogger(__name__)

_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


async def ensure_author(db: AsyncSession, user_id: str) -> None:
    """Create the user row if missing, as one atomic INSERT ... ON CONFLICT DO NOTHING.

    Concurrent callers never produce a duplicate and never race on a
    read-then-write. Does not commit.
    """
    dialect = db.get_bind().dialect.name
    insert = _UPSERT_INSERTS.get(dialect)
    if insert is None:
        raise RuntimeError(f"Unsupported database dialect for author upsert: {dialect}")

    settings = get_settings()
    email = settings.anonymous_email if user_id == settings.anonymous_user_id else f"{user_id}@pi-kub"
    stmt = (
        insert(User)
        .values(id=user_id, email=email, hashed_password="", role="USER")
        .on_conflict_do_nothing(index_elements=[User.id])
    )
    await db.execute(stmt)


async def create_scenario(db: AsyncSession, user_id: str, title: str | None) -> Scenario:
    """Create a scenario with zero steps owned by user_id."""
    if not title:
        raise ValidationError("Missing title")

    await ensure_author(db, user_id)
    scenario = Scenario(title=title, author_id=user_id, steps=[])
    db.add(scenario)
    await db.commit()
    logger.info("Created scenario %s for %s", scenario.id, user_id)
    return scenario


async def list_scenarios(db: AsyncSession) -> list[Scenario]:
    """All scenarios with steps, oldest first."""
    result = await db.execute(
        select(Scenario)
        .options(selectinload(Scenario.steps))
        .order_by(Scenario.created_at.asc())
        .execution_options(populate_existing=True)
    )
    return list(result.scalars().all())


async def get_scenario(db: AsyncSession, scenario_id: str) -> Scenario:
    result = await db.execute(
        select(Scenario)
        .options(selectinload(Scenario.steps))
        .where(Scenario.id == scenario_id)
        .execution_options(populate_existing=True)
    )
    scenario = result.scalar_one_or_none()
    if scenario is None:
        raise NotFoundError("Not found")
    return scenario


async def scenario_exists(db: AsyncSession, scenario_id: str) -> bool:
    result = await db.execute(select(func.count(Scenario.id)).where(Scenario.id == scenario_id))
    return result.scalar_one() > 0


async def step_exists(db: AsyncSession, step_id: str) -> bool:
    result = await db.execute(select(func.count(Step.id)).where(Step.id == step_id))
    return result.scalar_one() > 0


async def list_steps(db: AsyncSession, scenario_id: str) -> list[Step]:
    """Steps of one scenario ordered by creation time."""
    result = await db.execute(
        select(Step).where(Step.scenario_id == scenario_id).order_by(Step.created_at.asc())
    )
    return list(result.scalars().all())


async def count_author_steps(db: AsyncSession, user_id: str) -> int:
    """Number of steps across all scenarios authored by user_id."""
    result = await db.execute(
        select(func.count(Step.id))
        .join(Scenario, Step.scenario_id == Scenario.id)
        .where(Scenario.author_id == user_id)
    )
    return result.scalar_one()


async def add_step(db: AsyncSession, scenario_id: str, content: str | None) -> Step:
    """Append a user-submitted step. Content is validated before the lookup."""
    if not content:
        raise ValidationError("Missing content")
    if not await scenario_exists(db, scenario_id):
        raise NotFoundError("Scenario not found")

    step = Step(scenario_id=scenario_id, content=content)
    db.add(step)
    await db.commit()
    return step


async def attach_generated_step(db: AsyncSession, scenario_id: str, content: str) -> Step:
    """Append a generated step. No content validation and no commit; the caller commits."""
    step = Step(scenario_id=scenario_id, content=content)
    db.add(step)
    await db.flush()
    return step
