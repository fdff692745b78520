"""Structlog implementation of the GateObserver port."""

import structlog

from judge_gate.gate.domain.result import FailureKind, Severity


class StructlogGateObserver:
    """Delegates gate domain events to structlog.

    Satisfies the GateObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def gate_validation_started(
        self, gate_name: str, task_title: str, model: str
    ) -> None:
        self._log.info(
            "gate.validation_started",
            gate_name=gate_name,
            task_title=task_title,
            model=model,
        )

    def gate_validation_completed(
        self, gate_name: str, passed: bool, severity: Severity, duration_ms: int
    ) -> None:
        self._log.info(
            "gate.validation_completed",
            gate_name=gate_name,
            passed=passed,
            severity=str(severity),
            duration_ms=duration_ms,
        )

    def gate_verdict_unparsed(self, gate_name: str, raw_excerpt: str) -> None:
        self._log.info(
            "gate.verdict_unparsed",
            gate_name=gate_name,
            raw_excerpt=raw_excerpt,
        )

    def gate_invocation_retry(
        self, gate_name: str, attempt: int, reason: str, backoff_seconds: float
    ) -> None:
        self._log.warning(
            "gate.invocation_retry",
            gate_name=gate_name,
            attempt=attempt,
            reason=reason,
            backoff_seconds=backoff_seconds,
        )

    def gate_validation_degraded(
        self, gate_name: str, failure_kind: FailureKind, reason: str
    ) -> None:
        self._log.warning(
            "gate.validation_degraded",
            gate_name=gate_name,
            failure_kind=str(failure_kind),
            reason=reason,
        )

    def gate_high_temperature_warned(self, gate_name: str, temperature: float) -> None:
        self._log.warning(
            "gate.high_temperature_warned",
            gate_name=gate_name,
            temperature=temperature,
        )
