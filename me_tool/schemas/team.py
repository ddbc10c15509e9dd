from pydantic import field_validator

from me_tool.schemas.base import FormSchema, ResponseSchema


class TeamCreate(FormSchema):
    field_labels = {"name": "Team name"}

    name: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if len(v) > 100:
            raise ValueError("Team name must be 100 characters or less")
        return v


class TeamResponse(ResponseSchema):
    id: int
    name: str
