"""PersonaStore Protocol — structural interface for resolving judge personas."""

from typing import Protocol

from judge_gate.persona.domain.persona import Persona


class PersonaStore(Protocol):
    """Resolves a persona name to its instruction text.

    Implementations raise when the name is unknown.
    """

    def load(self, name: str) -> Persona: ...
