"""ModelInvoker Protocol — single request/response call against a language model."""

from typing import Protocol

from pydantic import BaseModel, Field


class ModelRequest(BaseModel, frozen=True):
    model: str = Field(min_length=1)
    system_instruction: str
    user_prompt: str
    temperature: float = Field(ge=0.0)


class ModelResponse(BaseModel, frozen=True):
    content: str


class ModelInvoker(Protocol):
    """Structural interface satisfied by any model transport.

    Implementations raise on transport failure; callers own timeouts and retries.
    """

    async def invoke(self, request: ModelRequest) -> ModelResponse: ...
