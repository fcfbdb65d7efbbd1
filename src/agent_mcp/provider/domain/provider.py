"""Provider — the upstream model vendor an agent session belongs to."""

from enum import StrEnum


class Provider(StrEnum):
    ANTHROPIC = "anthropic"
    Z_AI = "z-ai"
    MOONSHOT = "moonshot"


def parse_provider(value: Provider | str) -> Provider | None:
    """Return the Provider for *value*, or None when it names no known provider.

    Unknown values are not an error: callers treat them as a provider with no
    servers and no tools.
    """
    if isinstance(value, Provider):
        return value
    try:
        return Provider(value)
    except ValueError:
        return None
