"""Structlog implementation of the RegistryObserver port."""

import structlog


class StructlogRegistryObserver:
    """Delegates registry domain events to structlog.

    Satisfies the RegistryObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def secret_missing(self, name: str) -> None:
        self._log.warning(
            "registry.secret_missing",
            name=name,
            message="Secret not set; dependent servers get an empty credential",
        )

    def registry_built(self, providers: list[str], server_count: int) -> None:
        self._log.info(
            "registry.built", providers=providers, server_count=server_count
        )

    def provider_unknown(self, provider: str) -> None:
        self._log.warning("registry.provider_unknown", provider=provider)
