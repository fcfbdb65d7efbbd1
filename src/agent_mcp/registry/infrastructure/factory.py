"""Registry factory — builds the ProviderToolRegistry from secrets."""

from agent_mcp.registry.domain.observer import RegistryObserver
from agent_mcp.registry.domain.registry import ProviderToolRegistry
from agent_mcp.registry.domain.secrets import RegistrySecrets
from agent_mcp.registry.domain.servers import build_server_table


def build_registry(
    secrets: RegistrySecrets, observer: RegistryObserver
) -> ProviderToolRegistry:
    """Build the registry once; callers keep and share the returned instance."""
    table = build_server_table(secrets=secrets)
    registry = ProviderToolRegistry(servers=table)
    observer.registry_built(
        providers=[str(provider) for provider in registry.providers],
        server_count=sum(len(servers) for servers in table.values()),
    )
    return registry
