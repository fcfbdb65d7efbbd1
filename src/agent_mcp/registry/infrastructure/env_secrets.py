"""Read registry secrets from an environment mapping."""

import os
from collections.abc import Mapping

from agent_mcp.registry.domain.observer import RegistryObserver
from agent_mcp.registry.domain.secrets import RegistrySecrets

SUPABASE_ACCESS_TOKEN_VAR = "SUPABASE_ACCESS_TOKEN"
ZAI_API_KEY_VAR = "ZAI_API_KEY"


def secrets_from_env(
    observer: RegistryObserver, environ: Mapping[str, str] | None = None
) -> RegistrySecrets:
    """
    Build RegistrySecrets from *environ* (the process environment by default).

    A variable that is unset becomes an empty string and is reported through
    `observer.secret_missing`; nothing is raised.
    """
    env = os.environ if environ is None else environ
    return RegistrySecrets(
        supabase_access_token=_read(env, SUPABASE_ACCESS_TOKEN_VAR, observer),
        zai_api_key=_read(env, ZAI_API_KEY_VAR, observer),
    )


def _read(env: Mapping[str, str], name: str, observer: RegistryObserver) -> str:
    value = env.get(name)
    if value is None:
        observer.secret_missing(name=name)
        return ""
    return value
