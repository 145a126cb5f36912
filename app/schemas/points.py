"""Pydantic schemas for points, assessment and the development plan."""
from app.schemas.scenario import CamelSchema


class CompleteStepSchema(CamelSchema):
    step_id: str | None = None  # "stepId" on the wire


class PointsResponse(CamelSchema):
    points: int


class PointsLevelResponse(CamelSchema):
    points: int
    level: int


class IdpResponse(CamelSchema):
    idp: list[str]
