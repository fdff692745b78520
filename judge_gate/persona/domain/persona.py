"""Persona — named instruction text that configures a judge."""

from pydantic import BaseModel, Field


class Persona(BaseModel, frozen=True):
    name: str = Field(min_length=1)
    instructions: str
