"""Base exception class for all judge-gate-specific errors."""


class JudgeGateError(Exception):
    """Base class for all judge-gate errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
