"""Task — the unit of work whose output a gate judges."""

from pydantic import BaseModel


class Task(BaseModel, frozen=True):
    """Immutable description of the work being judged.

    ``description`` carries the free-text requirements and may be empty.
    """

    title: str
    description: str
