"""Observer port for the registry domain — defines events in domain language."""

from typing import Protocol


class RegistryObserver(Protocol):
    def secret_missing(self, name: str) -> None: ...

    def registry_built(self, providers: list[str], server_count: int) -> None: ...

    def provider_unknown(self, provider: str) -> None: ...
