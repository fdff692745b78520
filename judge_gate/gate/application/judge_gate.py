"""JudgeGate — asks a second model to accept or reject a task's output."""

import asyncio
import time

from judge_gate.config.domain.config import GateConfig
from judge_gate.config.domain.judge import TEMPERATURE_WARNING_THRESHOLD
from judge_gate.core.errors import JudgeGateError
from judge_gate.gate.domain.observer import GateObserver
from judge_gate.gate.domain.prompt import build_prompt
from judge_gate.gate.domain.result import FailureKind, GateResult, Severity
from judge_gate.gate.domain.task import Task
from judge_gate.gate.domain.verdict import parse_verdict
from judge_gate.model.domain.invoker import ModelInvoker, ModelRequest, ModelResponse
from judge_gate.persona.domain.store import PersonaStore

_UNAVAILABLE_PREFIX = "Validation unavailable: "
_RAW_EXCERPT_CHARS = 200


class JudgeTimeoutError(JudgeGateError):
    """Raised when the judge does not answer within the per-attempt deadline."""

    def __init__(self, timeout_seconds: float) -> None:
        super().__init__(
            f"judge did not respond within {timeout_seconds}s", retriable=True
        )


class JudgeGate:
    """LLM-as-judge gate that fails open.

    Every call to ``validate`` returns a GateResult. If the persona cannot be
    loaded or the judge cannot be reached within the configured timeout and
    retry budget, the result passes with warning severity and carries the
    FailureKind so that callers can tell the causes apart.

    Holds no mutable state; concurrent ``validate`` calls are independent.
    """

    def __init__(
        self,
        config: GateConfig,
        persona_store: PersonaStore,
        invoker: ModelInvoker,
        observer: GateObserver,
    ) -> None:
        self._config = config
        self._persona_store = persona_store
        self._invoker = invoker
        self._observer = observer

        if config.judge.temperature > TEMPERATURE_WARNING_THRESHOLD:
            self._observer.gate_high_temperature_warned(
                gate_name=config.name,
                temperature=config.judge.temperature,
            )

    @property
    def name(self) -> str:
        return self._config.name

    async def validate(self, task: Task, output: str) -> GateResult:
        """Judge ``output`` against ``task`` and return the verdict.

        Never raises an Exception; collaborator failures become degraded results.
        """
        judge = self._config.judge
        self._observer.gate_validation_started(
            gate_name=self.name,
            task_title=task.title,
            model=judge.model,
        )
        start = time.monotonic()

        try:
            persona = self._persona_store.load(judge.persona)
        except Exception as exc:
            return self._degraded(FailureKind.PERSONA_LOAD_ERROR, _describe(exc))

        try:
            request = ModelRequest(
                model=judge.model,
                system_instruction=persona.instructions,
                user_prompt=build_prompt(task=task, output=output),
                temperature=judge.temperature,
            )
            response = await self._invoke_with_retry(request=request)
        except JudgeTimeoutError as exc:
            return self._degraded(FailureKind.TIMEOUT, str(exc))
        except Exception as exc:
            return self._degraded(FailureKind.MODEL_INVOCATION_ERROR, _describe(exc))

        verdict = parse_verdict(
            response.content, policy=self._config.unparseable_policy
        )
        if not verdict.matched:
            self._observer.gate_verdict_unparsed(
                gate_name=self.name,
                raw_excerpt=response.content[:_RAW_EXCERPT_CHARS],
            )

        result = GateResult(
            gate_name=self.name,
            passed=verdict.passed,
            message=verdict.reason,
            severity=Severity.INFO if verdict.passed else Severity.CRITICAL,
        )
        self._observer.gate_validation_completed(
            gate_name=self.name,
            passed=result.passed,
            severity=result.severity,
            duration_ms=int((time.monotonic() - start) * 1000),
        )
        return result

    async def _invoke_with_retry(self, request: ModelRequest) -> ModelResponse:
        """Invoke the judge under a per-attempt timeout, retrying transient failures.

        The last error is re-raised once the retry budget is spent.
        """
        execution = self._config.execution
        retry = execution.retry
        backoff = retry.initial_backoff_seconds
        attempt = 1

        while True:
            try:
                return await self._invoke_once(request=request)
            except Exception as exc:
                if attempt >= retry.max_attempts or not _is_retriable(exc):
                    raise
                self._observer.gate_invocation_retry(
                    gate_name=self.name,
                    attempt=attempt,
                    reason=_describe(exc),
                    backoff_seconds=backoff,
                )
            await asyncio.sleep(backoff)
            backoff *= retry.backoff_multiplier
            attempt += 1

    async def _invoke_once(self, request: ModelRequest) -> ModelResponse:
        """Invoke the judge once under the per-attempt deadline.

        Only an expired deadline becomes JudgeTimeoutError; a TimeoutError raised
        by the invoker itself propagates unchanged.
        """
        timeout_seconds = self._config.execution.timeout_seconds
        try:
            async with asyncio.timeout(timeout_seconds) as deadline:
                return await self._invoker.invoke(request)
        except TimeoutError as exc:
            if deadline.expired():
                raise JudgeTimeoutError(timeout_seconds) from exc
            raise

    def _degraded(self, failure_kind: FailureKind, reason: str) -> GateResult:
        self._observer.gate_validation_degraded(
            gate_name=self.name,
            failure_kind=failure_kind,
            reason=reason,
        )
        return GateResult(
            gate_name=self.name,
            passed=True,
            message=f"{_UNAVAILABLE_PREFIX}{reason}",
            severity=Severity.WARNING,
            failure_kind=failure_kind,
        )


def _is_retriable(exc: Exception) -> bool:
    if isinstance(exc, TimeoutError):
        return True
    return isinstance(exc, JudgeGateError) and exc.retriable


def _describe(exc: Exception) -> str:
    return str(exc) or type(exc).__name__
