"""ConfigObserver port — domain events emitted during config loading."""

from typing import Protocol


class ConfigObserver(Protocol):
    """Observer port for config domain events."""

    def config_loaded(self, name: str, version: str) -> None: ...

    def config_judge_temperature_warning(self, temperature: float) -> None: ...
