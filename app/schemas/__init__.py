from app.schemas.scenario import (
    ScenarioCreateSchema,
    ScenarioListResponse,
    ScenarioOutSchema,
    ScenarioResponse,
    StepCreateSchema,
    StepOutSchema,
    StepResponse,
)
from app.schemas.points import CompleteStepSchema, IdpResponse, PointsLevelResponse, PointsResponse

__all__ = [
    "CompleteStepSchema",
    "IdpResponse",
    "PointsLevelResponse",
    "PointsResponse",
    "ScenarioCreateSchema",
    "ScenarioListResponse",
    "ScenarioOutSchema",
    "ScenarioResponse",
    "StepCreateSchema",
    "StepOutSchema",
    "StepResponse",
]
