"""FilePersonaStore — resolves personas from Markdown files in a directory."""

import re
from pathlib import Path

from judge_gate.persona.domain.persona import Persona
from judge_gate.persona.infrastructure.errors import PersonaNotFoundError

_PERSONA_NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]*$")
_SUFFIX = ".md"


class FilePersonaStore:
    """Loads ``<directory>/<name>.md`` as the persona's instructions.

    Satisfies the PersonaStore protocol structurally. Files are read on every
    call so that edits are picked up without a restart.
    """

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    def load(self, name: str) -> Persona:
        """Return the named persona.

        Raises:
            PersonaNotFoundError: if the name is malformed, the file is missing,
                unreadable, not UTF-8, or empty.
        """
        if not _PERSONA_NAME_PATTERN.match(name):
            raise PersonaNotFoundError(name=name, reason="invalid persona name")

        path = self._directory / f"{name}{_SUFFIX}"
        try:
            instructions = path.read_text(encoding="utf-8").strip()
        except FileNotFoundError as exc:
            raise PersonaNotFoundError(name=name, reason=f"no file at {path}") from exc
        except UnicodeDecodeError as exc:
            raise PersonaNotFoundError(
                name=name, reason=f"{path} is not valid UTF-8"
            ) from exc
        except OSError as exc:
            raise PersonaNotFoundError(name=name, reason=str(exc)) from exc

        if not instructions:
            raise PersonaNotFoundError(name=name, reason=f"{path} is empty")

        return Persona(name=name, instructions=instructions)
