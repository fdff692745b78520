"""Gate Protocol — structural interface for all gate implementations."""

from typing import Protocol

from judge_gate.gate.domain.result import GateResult
from judge_gate.gate.domain.task import Task


class Gate(Protocol):
    """A pluggable check over a task's output.

    ``validate`` must always return a GateResult; gates do not raise to signal
    rejection or unavailability.
    """

    @property
    def name(self) -> str: ...

    async def validate(self, task: Task, output: str) -> GateResult: ...
