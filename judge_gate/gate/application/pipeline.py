"""Helpers for running several gates over one output and summarising them."""

from collections.abc import Sequence

from judge_gate.gate.domain.gate import Gate
from judge_gate.gate.domain.result import GateResult, Severity
from judge_gate.gate.domain.task import Task

_NO_GATES_NAME = "all"


async def run_gates(gates: Sequence[Gate], task: Task, output: str) -> list[GateResult]:
    """Run gates in order and return their results.

    Stops after the first failed result, so later (usually costlier) gates
    such as model judges are skipped once the output is already rejected.
    With no gates configured, a single passing "all" result is returned.
    """
    if not gates:
        return [
            GateResult(
                gate_name=_NO_GATES_NAME,
                passed=True,
                message="No gates configured",
                severity=Severity.INFO,
            )
        ]

    results: list[GateResult] = []
    for gate in gates:
        result = await gate.validate(task=task, output=output)
        results.append(result)
        if not result.passed:
            break
    return results


def all_gates_passed(results: Sequence[GateResult]) -> bool:
    return all(result.passed for result in results)


def summarize_gates(results: Sequence[GateResult]) -> str:
    """Return e.g. ``"1 passed, 1 failed: mercury-validator"``."""
    failed = [result.gate_name for result in results if not result.passed]
    summary = f"{len(results) - len(failed)} passed, {len(failed)} failed"
    if failed:
        summary += ": " + ", ".join(failed)
    return summary
