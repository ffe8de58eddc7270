"""
Civo cluster exception classes.

Setup failures (the environment could not be prepared) are kept apart from
execution failures (the civo CLI ran and exited non-zero) so callers can tell
which stage failed.

All exceptions follow the naming convention Civo*Error.
"""


class CivoClusterError(Exception):
    """
    Base exception for all civo-cluster errors.

    Catch this to handle every failure raised by this package without
    catching unrelated Python errors.
    """

    pass


class CivoSetupError(CivoClusterError):
    """
    Raised when the execution environment could not be prepared.

    Example:
    -------
        The release archive download returned 404 during the image build:
        >>> builder.build(token)
        CivoSetupError: [build] Failed to build image civo-cli:1.0.75-linux-amd64 ...

    """

    def __init__(self, message: str, stage: str, stderr: str = ""):
        self.stage = stage
        self.stderr = stderr
        super().__init__(f"[{stage}] {message}")


class CivoPlatformError(CivoSetupError):
    """Raised when the container engine platform cannot be detected or parsed."""

    def __init__(self, message: str, stderr: str = ""):
        super().__init__(message, stage="platform", stderr=stderr)


class CivoExecutionError(CivoClusterError):
    """
    Raised when the civo CLI exits non-zero inside the container.

    Carries whatever the tool wrote to stderr, uninterpreted.
    """

    def __init__(self, args: list[str], returncode: int, stderr: str = ""):
        self.args_vector = list(args)
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip() or "no diagnostic output"
        super().__init__(f"civo {' '.join(args)} exited with code {returncode}: {detail}")


class CivoConfigurationError(CivoClusterError):
    """
    Raised when settings are malformed.

    This includes unreadable settings files and values rejected by validation.
    """

    pass


class CivoSecretNotFoundError(CivoClusterError):
    """Raised when a secret reference (env:, file:, cmd:) cannot be resolved."""

    pass
