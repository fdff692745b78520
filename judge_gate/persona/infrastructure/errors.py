"""Error types raised by persona infrastructure."""

from judge_gate.core.errors import JudgeGateError


class PersonaNotFoundError(JudgeGateError):
    """Raised when a persona name cannot be resolved to instruction text."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        super().__init__(f"Failed to load persona '{name}': {reason}")
