"""LiteLLMModelInvoker — model transport backed by LiteLLM."""

import litellm

from judge_gate.model.domain.invoker import ModelRequest, ModelResponse
from judge_gate.model.infrastructure.errors import ModelInvocationError

# Transient provider failures worth another attempt.
_RETRIABLE_ERRORS: tuple[type[Exception], ...] = (
    litellm.Timeout,
    litellm.APIConnectionError,
    litellm.RateLimitError,
    litellm.ServiceUnavailableError,
    litellm.InternalServerError,
)


class LiteLLMModelInvoker:
    """Invokes any LiteLLM-supported model with a system and a user message.

    Satisfies the ModelInvoker protocol structurally.
    """

    def __init__(self) -> None:
        litellm.suppress_debug_info = True

    async def invoke(self, request: ModelRequest) -> ModelResponse:
        """Send one chat completion and return the reply text.

        A reply without text content is returned as an empty string.

        Raises:
            ModelInvocationError: if LiteLLM raises. Transient errors are flagged
                retriable.
        """
        try:
            response = await litellm.acompletion(
                model=request.model,
                temperature=request.temperature,
                messages=[
                    {"role": "system", "content": request.system_instruction},
                    {"role": "user", "content": request.user_prompt},
                ],
            )
        except Exception as exc:
            raise ModelInvocationError(
                reason=str(exc),
                retriable=isinstance(exc, _RETRIABLE_ERRORS),
            ) from exc

        if not response.choices:
            raise ModelInvocationError(reason="response contained no choices")
        content: str | None = response.choices[0].message.content
        return ModelResponse(content=content or "")
