"""GateResult — the uniform output contract of every gate."""

from enum import StrEnum
from typing import Self

from pydantic import BaseModel, ConfigDict, model_validator


class Severity(StrEnum):
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


class FailureKind(StrEnum):
    """Why a judge could not produce a verdict."""

    PERSONA_LOAD_ERROR = "persona_load_error"
    MODEL_INVOCATION_ERROR = "model_invocation_error"
    TIMEOUT = "timeout"


class GateResult(BaseModel):
    """Immutable verdict record returned by a gate for one invocation.

    A rejection is always critical. A result carrying a ``failure_kind`` is a
    degraded (fail-open) result: it always passes with warning severity.
    """

    model_config = ConfigDict(frozen=True)

    gate_name: str
    passed: bool
    message: str
    severity: Severity
    failure_kind: FailureKind | None = None

    @model_validator(mode="after")
    def _check_severity(self) -> Self:
        if not self.passed and self.severity is not Severity.CRITICAL:
            raise ValueError("a failed gate result must have critical severity")
        if self.failure_kind is not None and (
            not self.passed or self.severity is not Severity.WARNING
        ):
            raise ValueError("a degraded gate result must pass with warning severity")
        return self

    @property
    def degraded(self) -> bool:
        return self.failure_kind is not None
