"""Configuration for civo-cluster."""

from civo_cluster.config.loaders import DEFAULT_SETTINGS_FILE, load_settings
from civo_cluster.config.schemas import DEFAULT_CIVO_VERSION, CivoSettings

__all__ = [
    "CivoSettings",
    "DEFAULT_CIVO_VERSION",
    "DEFAULT_SETTINGS_FILE",
    "load_settings",
]
