from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator


class SumRequest(BaseModel):
    """Decoded payload of one invocation."""

    model_config = ConfigDict(extra="ignore")

    input: list[StrictInt] = Field(default_factory=list, description="Integers to add")

    @field_validator("input", mode="before")
    @classmethod
    def null_input_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class SumResponse(BaseModel):
    sum: int
