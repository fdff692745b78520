"""Judge configuration model."""

from pydantic import BaseModel, Field

# Verdicts should be reproducible; temperatures above this are flagged.
TEMPERATURE_WARNING_THRESHOLD = 0.2


class JudgeConfig(BaseModel, frozen=True):
    persona: str = Field(min_length=1)
    model: str = Field(min_length=1)
    temperature: float = Field(ge=0.0)
