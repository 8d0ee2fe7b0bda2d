"""UpCloud API credential resolution.

UpCloud authenticates API users with HTTP Basic auth, so the client needs a
username and a password. Both are resolved from the first source that has
them:

1. Explicitly provided value
2. Environment variable (``UPCLOUD_USERNAME`` / ``UPCLOUD_PASSWORD``)
3. .env file (python-dotenv loads it into the environment)
4. For the password only, a file named by ``UPCLOUD_PASSWORD_FILE``

Example:
    ```python
    from upcloud.auth import CredentialResolver

    resolver = CredentialResolver()
    username, password = resolver.resolve_basic_auth()
    ```

Credential values are never logged; only their source is.
"""

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from upcloud.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)

USERNAME_ENV_VAR = "UPCLOUD_USERNAME"
PASSWORD_ENV_VAR = "UPCLOUD_PASSWORD"
PASSWORD_FILE_ENV_VAR = "UPCLOUD_PASSWORD_FILE"


class CredentialResolver:
    """Resolve credentials from explicit values, the environment and .env files.

    Args:
        dotenv_path: Path to a .env file. If None, python-dotenv searches
            parent directories.
        load_dotenv: Set to False to skip .env loading entirely.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for credential resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Resolve a single credential.

        Args:
            value: Explicit value, wins over every other source.
            env_var_name: Environment variable to consult.
            default: Fallback when nothing else is set.
            required: Raise instead of returning None.

        Returns:
            The resolved value, or None if not found and not required.

        Raises:
            CredentialNotFoundError: If required and no source had a value.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            logger.debug(f"Resolved credential from {source}: ***")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a credential from a file.

        The path may be given directly or through ``env_var_name``; ``~`` and
        ``$VAR`` are expanded. Surrounding whitespace is stripped.

        Raises:
            CredentialFileError: If required and the file cannot be read.
        """
        path_to_use = None
        if file_path is not None:
            path_to_use = str(file_path)
        elif env_var_name:
            path_to_use = self.resolve(env_var_name=env_var_name)

        if not path_to_use:
            if required:
                error_msg = "No file path provided for credential resolution"
                if env_var_name:
                    error_msg += f" (env var '{env_var_name}' not set)"
                raise CredentialFileError(error_msg)
            return None

        path_obj = Path(os.path.expanduser(os.path.expandvars(path_to_use)))

        try:
            content = path_obj.read_text().strip()
        except FileNotFoundError:
            error_msg = f"Credential file not found: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.debug(error_msg)
            return None
        except OSError as e:
            error_msg = f"Error reading credential file {path_obj}: {e}"
            if required:
                raise CredentialFileError(error_msg) from e
            logger.warning(error_msg)
            return None

        logger.debug(f"Resolved credential from file: {path_obj} (***)")
        return content

    def resolve_basic_auth(
        self,
        username: str | None = None,
        password: str | None = None,
    ) -> tuple[str, str]:
        """Resolve the UpCloud API username and password.

        Raises:
            CredentialNotFoundError: If either half of the pair is missing.
        """
        resolved_username = self.resolve(value=username, env_var_name=USERNAME_ENV_VAR, required=True)

        resolved_password = self.resolve(value=password, env_var_name=PASSWORD_ENV_VAR)
        if resolved_password is None:
            resolved_password = self.resolve_from_file(env_var_name=PASSWORD_FILE_ENV_VAR)
        if resolved_password is None:
            raise CredentialNotFoundError(
                f"Required credential not found (checked env vars: {PASSWORD_ENV_VAR}, {PASSWORD_FILE_ENV_VAR})",
                env_var_name=PASSWORD_ENV_VAR,
            )

        return resolved_username, resolved_password
