"""Credential resolution for the UpCloud API.

Example:
    ```python
    from upcloud.auth import CredentialResolver

    username, password = CredentialResolver().resolve_basic_auth()
    ```
"""

from upcloud.auth.credentials import CredentialResolver
from upcloud.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)

__all__ = [
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
]
