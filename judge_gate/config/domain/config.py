"""Top-level GateConfig aggregate — the root configuration object."""

from pathlib import Path

from pydantic import BaseModel, Field

from judge_gate.config.domain.execution import ExecutionConfig
from judge_gate.config.domain.judge import JudgeConfig
from judge_gate.gate.domain.verdict import UnparseablePolicy


class GateConfig(BaseModel, frozen=True):
    """Root configuration aggregate for one LLM-as-judge gate.

    ``name`` is reported as ``GateResult.gate_name``. ``persona_dir`` is only
    read by the file-backed persona store wiring.
    """

    name: str = Field(min_length=1)
    version: str = Field(min_length=1)
    persona_dir: Path = Path("personas")
    judge: JudgeConfig
    execution: ExecutionConfig = Field(default_factory=ExecutionConfig)
    unparseable_policy: UnparseablePolicy = UnparseablePolicy.ACCEPT
