"""GateObserver port — domain events emitted during gate invocations."""

from typing import Protocol

from judge_gate.gate.domain.result import FailureKind, Severity


class GateObserver(Protocol):
    """Observer port for gate domain events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def gate_validation_started(
        self, gate_name: str, task_title: str, model: str
    ) -> None: ...

    def gate_validation_completed(
        self, gate_name: str, passed: bool, severity: Severity, duration_ms: int
    ) -> None: ...

    def gate_verdict_unparsed(self, gate_name: str, raw_excerpt: str) -> None: ...

    def gate_invocation_retry(
        self, gate_name: str, attempt: int, reason: str, backoff_seconds: float
    ) -> None: ...

    def gate_validation_degraded(
        self, gate_name: str, failure_kind: FailureKind, reason: str
    ) -> None: ...

    def gate_high_temperature_warned(
        self, gate_name: str, temperature: float
    ) -> None: ...
