# app/models/assignment.py
from pydantic import BaseModel, Field, field_validator


class AssignmentWrite(BaseModel):
    """Body of ``PUT /api/assignments/{date}``."""
    content: str

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("content must not be empty")
        return value


class Assignment(BaseModel):
    date: str
    content: str
    created_at: str = Field(alias="createdAt")
    updated_at: str = Field(alias="updatedAt")

    class Config:
        populate_by_name = True

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
