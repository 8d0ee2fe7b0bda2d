"""Exceptions raised while resolving UpCloud API credentials.

Example:
    ```python
    from upcloud.auth.exceptions import CredentialNotFoundError

    try:
        username, password = resolver.resolve_basic_auth()
    except CredentialNotFoundError as e:
        print(f"Set {e.env_var_name} to your API username")
    ```
"""

from upcloud.errors.exceptions import UpCloudError


class CredentialError(UpCloudError):
    """Base exception for credential-related errors."""

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required credential cannot be resolved from any source.

    Attributes:
        env_var_name: The environment variable that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """Raised when a credential file is missing or unreadable."""

    pass
