from pydantic import BaseModel, Field

from summation.core.config import OverflowPolicy


class HealthResponse(BaseModel):
    status: str = Field(default="ok")
    version: str
    overflow_policy: OverflowPolicy = Field(description="Active overflow policy")
    integer_width: int = Field(description="Bit width used by wrap and saturate")
