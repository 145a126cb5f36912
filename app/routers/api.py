"""API routes: JSON for scenarios, steps, points and the development plan."""
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.db.session import get_db
from app.schemas.points import CompleteStepSchema, IdpResponse, PointsLevelResponse, PointsResponse
from app.schemas.scenario import (
    ScenarioCreateSchema,
    ScenarioListResponse,
    ScenarioOutSchema,
    ScenarioResponse,
    StepCreateSchema,
    StepOutSchema,
    StepResponse,
)
from app.services import generator, ledger, scenarios
from app.services.completion import CompletionProvider, get_completion_provider

router = APIRouter(prefix="/api", tags=["api"])


def get_current_user_id() -> str:
    """Identity every call runs under. Single implicit user until auth exists."""
    return get_settings().anonymous_user_id


DbSession = Annotated[AsyncSession, Depends(get_db)]
UserId = Annotated[str, Depends(get_current_user_id)]
Provider = Annotated[CompletionProvider, Depends(get_completion_provider)]


@router.post("/scenarios", response_model=ScenarioResponse, status_code=201)
async def create_scenario(body: ScenarioCreateSchema, db: DbSession, user_id: UserId):
    scenario = await scenarios.create_scenario(db, user_id, body.title)
    return ScenarioResponse(scenario=ScenarioOutSchema.model_validate(scenario))


@router.get("/scenarios", response_model=ScenarioListResponse)
async def list_scenarios(db: DbSession):
    """All scenarios with their steps."""
    items = await scenarios.list_scenarios(db)
    return ScenarioListResponse(scenarios=[ScenarioOutSchema.model_validate(s) for s in items])


@router.get("/scenarios/{scenario_id}", response_model=ScenarioResponse)
async def get_scenario(scenario_id: str, db: DbSession):
    scenario = await scenarios.get_scenario(db, scenario_id)
    return ScenarioResponse(scenario=ScenarioOutSchema.model_validate(scenario))


@router.post("/scenarios/{scenario_id}/steps", response_model=StepResponse, status_code=201)
async def add_step(scenario_id: str, body: StepCreateSchema, db: DbSession):
    step = await scenarios.add_step(db, scenario_id, body.content)
    return StepResponse(step=StepOutSchema.model_validate(step))


@router.post("/scenarios/{scenario_id}/generate-step", response_model=StepResponse, status_code=201)
async def generate_step(scenario_id: str, db: DbSession, user_id: UserId, provider: Provider):
    """Ask the model for the next step; falls back to a stub sentence if it is unavailable."""
    step = await generator.generate_next_step(db, provider, user_id, scenario_id)
    return StepResponse(step=StepOutSchema.model_validate(step))


@router.post("/scenarios/{scenario_id}/complete-step", response_model=PointsResponse)
async def complete_step(scenario_id: str, body: CompleteStepSchema, db: DbSession, user_id: UserId):
    # the step is looked up by id alone; scenario_id only scopes the URL
    points = await ledger.complete_step(db, user_id, body.step_id)
    return PointsResponse(points=points)


@router.post("/assessment-complete", response_model=PointsResponse)
async def assessment_complete(db: DbSession, user_id: UserId):
    points = await ledger.complete_assessment(db, user_id)
    return PointsResponse(points=points)


@router.get("/points", response_model=PointsLevelResponse)
async def get_points(db: DbSession, user_id: UserId):
    """Running total and derived level."""
    points = await ledger.total_points(db, user_id)
    return PointsLevelResponse(points=points, level=ledger.compute_level(points))


@router.post("/idp", response_model=IdpResponse)
async def create_idp(db: DbSession, user_id: UserId, provider: Provider):
    idp = await generator.generate_idp(db, provider, user_id)
    return IdpResponse(idp=idp)
