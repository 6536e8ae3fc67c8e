"""Session token storage backends."""

from recruit_gateway.credentials.store import (
    AUTH_TOKEN_STORAGE_KEY,
    LEGACY_AUTH_TOKEN_STORAGE_KEY,
    CredentialStore,
    FileCredentialStore,
    MemoryCredentialStore,
    create_credential_store,
)

__all__ = [
    "AUTH_TOKEN_STORAGE_KEY",
    "LEGACY_AUTH_TOKEN_STORAGE_KEY",
    "CredentialStore",
    "FileCredentialStore",
    "MemoryCredentialStore",
    "create_credential_store",
]
