"""ResponseValidationGate — cheap structural checks on a task's output."""

import re

from judge_gate.gate.domain.result import GateResult, Severity
from judge_gate.gate.domain.task import Task

_DEFAULT_NAME = "response-validation"
_MIN_LENGTH = 10
# Short replies mentioning these are most likely error messages, not work.
_ERROR_LIKE_MAX_LENGTH = 100
_ERROR_MARKERS = re.compile(r"\b(error|failed|exception|cannot)\b", re.IGNORECASE)


class ResponseValidationGate:
    """Rejects empty, very short, or error-like outputs without calling a model.

    Satisfies the Gate protocol structurally.
    """

    def __init__(self, name: str = _DEFAULT_NAME) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    async def validate(self, task: Task, output: str) -> GateResult:
        content = output.strip()
        if not content:
            return self._fail("Response is empty")
        if len(content) < _MIN_LENGTH:
            return self._fail(
                f"Response too short ({len(content)} chars, minimum {_MIN_LENGTH})"
            )
        if len(content) < _ERROR_LIKE_MAX_LENGTH:
            match = _ERROR_MARKERS.search(content)
            if match:
                return self._fail(
                    "Response looks like an error message"
                    f" (contains '{match.group(1)}')"
                )
        return GateResult(
            gate_name=self._name,
            passed=True,
            message="Response is non-empty and well-formed",
            severity=Severity.INFO,
        )

    def _fail(self, message: str) -> GateResult:
        return GateResult(
            gate_name=self._name,
            passed=False,
            message=message,
            severity=Severity.CRITICAL,
        )
