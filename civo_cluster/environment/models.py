"""Execution environment value for the civo CLI container."""

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class CivoEnvironment(BaseModel):
    """
    A ready-to-run civo CLI image plus the variables injected into it.

    Immutable: the ``with_*`` methods return a new environment and leave the
    original untouched, so one value is never shared between calls.

    Example:
    -------
        >>> env = CivoEnvironment(image="civo-cli:1.0.75-linux-amd64")
        >>> env = env.with_secret_variable("CIVO_TOKEN", SecretStr("abc"))
        >>> env.secret_variables
        {'CIVO_TOKEN': SecretStr('**********')}

    """

    model_config = ConfigDict(frozen=True)

    image: str
    entrypoint: tuple[str, ...] = ("civo",)
    variables: dict[str, str] = Field(default_factory=dict)
    secret_variables: dict[str, SecretStr] = Field(default_factory=dict)

    def with_env_variable(self, name: str, value: str) -> "CivoEnvironment":
        """Return a copy with a plain environment variable set."""
        return self.model_copy(update={"variables": {**self.variables, name: value}})

    def with_secret_variable(self, name: str, value: SecretStr) -> "CivoEnvironment":
        """Return a copy with a secret variable set. Secret values are never echoed."""
        return self.model_copy(update={"secret_variables": {**self.secret_variables, name: value}})

    def has_secret(self, name: str) -> bool:
        return name in self.secret_variables
