"""Error types raised by model infrastructure."""

from judge_gate.core.errors import JudgeGateError


class ModelInvocationError(JudgeGateError):
    """Raised when the model cannot be invoked or returns an error response."""

    def __init__(self, reason: str, retriable: bool = False) -> None:
        super().__init__(f"Failed to invoke model: {reason}", retriable=retriable)
