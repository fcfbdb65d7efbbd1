"""Credentials interpolated into server descriptors."""

from pydantic import BaseModel


class RegistrySecrets(BaseModel, frozen=True):
    """Secret values injected into headers and subprocess environments.

    An absent secret is an empty string: the descriptor is still built, it just
    carries an empty credential.
    """

    supabase_access_token: str = ""
    zai_api_key: str = ""
