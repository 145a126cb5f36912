"""AI-generated content: next scenario step and the individual development plan (IDP).

Both flows ask the completion provider once and fall back to fixed Russian
text when it fails, so the caller always gets a successful result.
"""
import logging
import re

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFoundError
from app.models import Scenario, Step, TransactionType
from app.services import ledger, scenarios
from app.services.completion import CompletionProvider, CompletionResult

logger = logging.getLogger(__name__)

NEXT_STEP_MAX_TOKENS = 100
IDP_MAX_TOKENS = 200

NEXT_STEP_FALLBACK = "Тестовый шаг (AI-заглушка)."
IDP_FALLBACK = [
    "Практикуйте активное слушание.",
    "Развивайте тайм-менеджмент.",
    "Улучшайте эмоциональный интеллект.",
]

# "1. ", "12.  " at the start of a recommendation line
_ENUM_PREFIX_RE = re.compile(r"^\d+\.\s*")


def build_next_step_prompt(title: str, steps: list[Step]) -> str:
    history = "\n".join(f"{i}. {step.content}" for i, step in enumerate(steps, start=1))
    return (
        f'Сценарий "{title}". Предыдущие шаги:\n'
        f"{history}\n"
        "Сгенерируй следующий шаг одним предложением."
    )


def build_idp_prompt(points: int, steps: int) -> str:
    return f"У участника {points} очков и {steps} шагов. Дай 3 рекомендации."


def next_step_text(result: CompletionResult) -> str:
    """Trimmed completion text, or the fallback sentence."""
    if result.ok:
        text = result.text.strip()
        if text:
            return text
    return NEXT_STEP_FALLBACK


def parse_idp(text: str) -> list[str]:
    """Split provider text into recommendations: strip "N." prefixes, drop blank lines."""
    items = []
    for line in re.split(r"\r?\n", text):
        item = _ENUM_PREFIX_RE.sub("", line).strip()
        if item:
            items.append(item)
    return items


def idp_items(result: CompletionResult) -> list[str]:
    if result.ok:
        items = parse_idp(result.text)
        if items:
            return items
    return list(IDP_FALLBACK)


async def generate_next_step(
    db: AsyncSession,
    provider: CompletionProvider,
    user_id: str,
    scenario_id: str,
) -> Step:
    """Generate, persist and reward the next step of a scenario."""
    scenario = await db.get(Scenario, scenario_id)
    if scenario is None:
        raise NotFoundError("Scenario not found")

    history = await scenarios.list_steps(db, scenario_id)
    result = await provider.complete(build_next_step_prompt(scenario.title, history), NEXT_STEP_MAX_TOKENS)
    if not result.ok:
        logger.info("Using fallback step for scenario %s: %s", scenario_id, result.error)

    step = await scenarios.attach_generated_step(db, scenario_id, next_step_text(result))
    await ledger.record_transaction(
        db, user_id, TransactionType.AI_STEP, ledger.AI_STEP_REWARD, commit=False
    )
    await db.commit()
    return step


async def generate_idp(db: AsyncSession, provider: CompletionProvider, user_id: str) -> list[str]:
    """Recommendations from the user's points and step count. Read-only."""
    points = await ledger.total_points(db, user_id)
    steps = await scenarios.count_author_steps(db, user_id)

    result = await provider.complete(build_idp_prompt(points, steps), IDP_MAX_TOKENS)
    if not result.ok:
        logger.info("Using fallback IDP: %s", result.error)
    return idp_items(result)
