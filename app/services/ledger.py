"""Points ledger: append-only transactions, running totals and levels."""
import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFoundError, ValidationError
from app.models import PointTransaction, TransactionType
from app.services.scenarios import step_exists

logger = logging.getLogger(__name__)

AI_STEP_REWARD = 5
COMPLETE_STEP_REWARD = 10
ASSESSMENT_REWARD = 30
POINTS_PER_LEVEL = 100


def compute_level(total: int) -> int:
    """Return level from total points: one level per 100 points, never below 0."""
    return max(0, total // POINTS_PER_LEVEL)


async def record_transaction(
    db: AsyncSession,
    user_id: str,
    type: TransactionType,
    amount: int,
    commit: bool = True,
) -> PointTransaction:
    """Append one ledger entry. Amount sign is not checked."""
    tx = PointTransaction(user_id=user_id, type=TransactionType(type).value, amount=amount)
    db.add(tx)
    if commit:
        await db.commit()
    else:
        await db.flush()
    logger.info("Ledger %s %+d for %s", tx.type, amount, user_id)
    return tx


async def total_points(db: AsyncSession, user_id: str) -> int:
    result = await db.execute(
        select(func.coalesce(func.sum(PointTransaction.amount), 0)).where(
            PointTransaction.user_id == user_id
        )
    )
    return int(result.scalar_one())


async def get_level(db: AsyncSession, user_id: str) -> int:
    return compute_level(await total_points(db, user_id))


async def complete_step(db: AsyncSession, user_id: str, step_id: str | None) -> int:
    """Reward a completed step; return the new running total."""
    if not step_id:
        raise ValidationError("Missing stepId")
    if not await step_exists(db, step_id):
        raise NotFoundError("Step not found")

    await record_transaction(db, user_id, TransactionType.COMPLETE_STEP, COMPLETE_STEP_REWARD)
    return await total_points(db, user_id)


async def complete_assessment(db: AsyncSession, user_id: str) -> int:
    """Reward a finished assessment; return the new running total."""
    await record_transaction(db, user_id, TransactionType.ASSESSMENT, ASSESSMENT_REWARD)
    return await total_points(db, user_id)
