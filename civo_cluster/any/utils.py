"""Utility functions for civo-cluster."""

import os
import subprocess

from civo_cluster.any.logger import get_logger

LOGGER = get_logger("civo_cluster.utils")


def run_command(
    cmd: list[str],
    check: bool = True,
    capture: bool = True,
    env: dict[str, str] | None = None,
    timeout: float | None = None,
    input: str | None = None,
) -> subprocess.CompletedProcess:
    """
    Run a shell command with consistent handling.

    Args:
    ----
        cmd: Command and arguments as a list
        check: If True, raise CalledProcessError on non-zero exit
        capture: If True, capture stdout/stderr
        env: Optional environment variables (merged with os.environ)
        timeout: Optional timeout in seconds
        input: Optional text fed to the command's stdin

    Returns:
    -------
        CompletedProcess instance with returncode, stdout, stderr

    Raises:
    ------
        subprocess.CalledProcessError: If check=True and command fails
        subprocess.TimeoutExpired: If timeout is exceeded

    Example:
    -------
        ```python
        from civo_cluster.any.utils import run_command

        result = run_command(["docker", "version"])
        print(result.stdout)

        # Secret values go through env, never through cmd
        result = run_command(
            ["docker", "run", "--rm", "-e", "CIVO_TOKEN", "civo-cli:1.0.75-linux-amd64", "k3s", "list"],
            env={"CIVO_TOKEN": token},
            check=False,
        )
        if result.returncode != 0:
            print(f"Command failed: {result.stderr}")
        ```

    """
    command_env = os.environ.copy()
    if env:
        command_env.update(env)

    # env values may be secrets, log names only
    LOGGER.debug(f"Running command: {' '.join(cmd)} (extra env: {sorted(env or {})})")

    return subprocess.run(
        cmd,
        capture_output=capture,
        text=True,
        check=check,
        env=command_env,
        timeout=timeout,
        input=input,
    )
