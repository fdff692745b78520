"""Wires a JudgeGate from a GateConfig with the production collaborators."""

from judge_gate.config.domain.config import GateConfig
from judge_gate.gate.application.judge_gate import JudgeGate
from judge_gate.gate.domain.observer import GateObserver
from judge_gate.model.infrastructure.litellm import LiteLLMModelInvoker
from judge_gate.persona.infrastructure.file_store import FilePersonaStore


def create_judge_gate(config: GateConfig, observer: GateObserver) -> JudgeGate:
    """Return a JudgeGate with file-backed personas and a LiteLLM judge.

    Personas are read from ``config.persona_dir``.
    """
    return JudgeGate(
        config=config,
        persona_store=FilePersonaStore(directory=config.persona_dir),
        invoker=LiteLLMModelInvoker(),
        observer=observer,
    )
