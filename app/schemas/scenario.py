"""Pydantic schemas for scenarios and steps. JSON uses camelCase keys."""
from datetime import datetime

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelSchema(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class ScenarioCreateSchema(CamelSchema):
    # presence is checked by the service so a missing title is a 400, not a 422
    title: str | None = None


class StepCreateSchema(CamelSchema):
    content: str | None = None


class StepOutSchema(CamelSchema):
    id: str
    content: str
    created_at: datetime
    scenario_id: str


class ScenarioOutSchema(CamelSchema):
    id: str
    title: str
    created_at: datetime
    author_id: str
    steps: list[StepOutSchema] = []


class ScenarioResponse(CamelSchema):
    scenario: ScenarioOutSchema


class ScenarioListResponse(CamelSchema):
    scenarios: list[ScenarioOutSchema]


class StepResponse(CamelSchema):
    step: StepOutSchema
