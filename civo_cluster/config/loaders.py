"""
Settings loading for civo-cluster.

Sources, lowest precedence first:
- model defaults
- YAML settings file (explicit path, or .civo-cluster.yaml in the working directory)
- CIVO_CLUSTER_<FIELD> environment variables
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from civo_cluster.any.exceptions import CivoConfigurationError
from civo_cluster.any.logger import get_logger
from civo_cluster.config.schemas import CivoSettings

LOGGER = get_logger("civo_cluster.config.loaders")

DEFAULT_SETTINGS_FILE = ".civo-cluster.yaml"
ENV_PREFIX = "CIVO_CLUSTER_"


def _read_settings_file(path: Path) -> dict[str, Any]:
    """
    Read a YAML settings file.

    Raises
    ------
        CivoConfigurationError: If the file is unreadable or not a mapping

    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise CivoConfigurationError(f"Failed to read settings file: {path}\nError: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise CivoConfigurationError(f"Settings file must contain a mapping: {path}")
    return data


def _env_overrides(environ: dict[str, str]) -> dict[str, str]:
    """Collect CIVO_CLUSTER_<FIELD> overrides for known settings fields."""
    overrides = {}
    for field_name in CivoSettings.model_fields:
        key = f"{ENV_PREFIX}{field_name.upper()}"
        if key in environ:
            overrides[field_name] = environ[key]
    return overrides


def load_settings(path: Path | str | None = None, environ: dict[str, str] | None = None) -> CivoSettings:
    """
    Load settings from file and environment.

    Args:
    ----
        path: Optional settings file. When omitted, .civo-cluster.yaml in the
            working directory is used if it exists.
        environ: Environment mapping (defaults to os.environ)

    Returns:
    -------
        Validated CivoSettings

    Raises:
    ------
        CivoConfigurationError: If an explicit file is missing, or any value is invalid

    Example:
    -------
        >>> settings = load_settings(environ={"CIVO_CLUSTER_CIVO_VERSION": "1.1.0"})
        >>> settings.civo_version
        '1.1.0'

    """
    environ = os.environ if environ is None else environ
    data: dict[str, Any] = {}

    if path is not None:
        settings_file = Path(path)
        if not settings_file.exists():
            raise CivoConfigurationError(f"Settings file not found: {settings_file}")
        data.update(_read_settings_file(settings_file))
        LOGGER.debug(f"Loaded settings from {settings_file}")
    elif Path(DEFAULT_SETTINGS_FILE).exists():
        data.update(_read_settings_file(Path(DEFAULT_SETTINGS_FILE)))
        LOGGER.debug(f"Loaded settings from {DEFAULT_SETTINGS_FILE}")

    data.update(_env_overrides(dict(environ)))

    try:
        return CivoSettings(**data)
    except ValidationError as e:
        raise CivoConfigurationError(f"Invalid civo-cluster settings:\n{e}") from e
