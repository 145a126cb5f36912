import pytest
from sqlalchemy import func, select

from app.core.errors import NotFoundError, ValidationError
from app.models import PointTransaction, TransactionType
from app.services import ledger, scenarios
from tests.conftest import USER_ID


async def test_empty_ledger_is_zero(db):
    assert await ledger.total_points(db, USER_ID) == 0
    assert await ledger.get_level(db, USER_ID) == 0


async def test_total_is_exact_sum(db):
    for amount in [5, 10, 30, -7]:
        await ledger.record_transaction(db, USER_ID, TransactionType.AI_STEP, amount)
    await ledger.record_transaction(db, "other", TransactionType.ASSESSMENT, 100)

    assert await ledger.total_points(db, USER_ID) == 38
    assert await ledger.total_points(db, "other") == 100


@pytest.mark.parametrize(
    "total, level",
    [(0, 0), (99, 0), (100, 1), (199, 1), (250, 2), (-50, 0)],
)
def test_compute_level(total, level):
    assert ledger.compute_level(total) == level


async def test_complete_step_adds_ten(db):
    scenario = await scenarios.create_scenario(db, USER_ID, "S")
    step = await scenarios.add_step(db, scenario.id, "do it")
    await ledger.complete_assessment(db, USER_ID)

    assert await ledger.complete_step(db, USER_ID, step.id) == 40


async def test_complete_unknown_step_records_nothing(db):
    with pytest.raises(NotFoundError, match="Step not found"):
        await ledger.complete_step(db, USER_ID, "missing-id")
    with pytest.raises(ValidationError, match="Missing stepId"):
        await ledger.complete_step(db, USER_ID, None)

    count = await db.scalar(select(func.count(PointTransaction.id)))
    assert count == 0


async def test_complete_assessment_adds_thirty(db):
    assert await ledger.complete_assessment(db, USER_ID) == 30
    assert await ledger.complete_assessment(db, USER_ID) == 60

    types = (await db.execute(select(PointTransaction.type))).scalars().all()
    assert types == ["ASSESSMENT", "ASSESSMENT"]
