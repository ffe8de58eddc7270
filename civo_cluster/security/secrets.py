"""
Secret reference resolution.

Implements the SecretsProvider protocol. The API token is named by reference
rather than read from a fixed variable:

- ``env:NAME``     value of environment variable NAME
- ``file:PATH``    contents of PATH (``~`` expanded, trailing newline stripped)
- ``cmd:COMMAND``  stdout of COMMAND (split with shlex, not run through a shell)
"""

import os
import shlex
import subprocess
from pathlib import Path

from pydantic import SecretStr

from civo_cluster.any.exceptions import CivoSecretNotFoundError
from civo_cluster.any.logger import get_logger
from civo_cluster.any.utils import run_command

LOGGER = get_logger("civo_cluster.security.secrets")

SCHEMES = ("env", "file", "cmd")


class ReferenceSecretsProvider:
    """
    Resolves env:, file: and cmd: secret references.

    Example:
    -------
        ```python
        provider = ReferenceSecretsProvider()
        token = provider.get_secret("env:CIVO_TOKEN")
        print(token)  # **********
        ```

    """

    def __init__(self, environ: dict[str, str] | None = None):
        self._environ = os.environ if environ is None else environ

    def get_secret(self, reference: str) -> SecretStr:
        """
        Resolve a secret reference.

        Raises
        ------
            CivoSecretNotFoundError: If the scheme is unknown or the value is missing or empty

        """
        scheme, sep, target = reference.partition(":")
        if not sep or scheme not in SCHEMES or not target:
            raise CivoSecretNotFoundError(
                f"Invalid secret reference: '{reference}'. " f"Expected one of: {', '.join(s + ':...' for s in SCHEMES)}"
            )

        value = getattr(self, f"_from_{scheme}")(target)
        if not value:
            raise CivoSecretNotFoundError(f"Secret reference '{scheme}:{target}' resolved to an empty value")

        LOGGER.debug(f"Resolved secret from {scheme}:{target}")
        return SecretStr(value)

    def _from_env(self, name: str) -> str:
        if name not in self._environ:
            raise CivoSecretNotFoundError(f"Environment variable not set: {name}")
        return self._environ[name]

    def _from_file(self, path: str) -> str:
        secret_file = Path(path).expanduser()
        try:
            return secret_file.read_text().rstrip("\n")
        except OSError as e:
            raise CivoSecretNotFoundError(f"Cannot read secret file: {secret_file}\nError: {e}") from e

    def _from_cmd(self, command: str) -> str:
        try:
            result = run_command(shlex.split(command))
        except (OSError, subprocess.CalledProcessError) as e:
            raise CivoSecretNotFoundError(f"Secret command failed: {command}") from e
        return result.stdout.strip()

    def __repr__(self) -> str:
        return "ReferenceSecretsProvider()"
