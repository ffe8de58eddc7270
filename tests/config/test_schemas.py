"""Tests for settings schema."""

import pytest
from pydantic import ValidationError

from civo_cluster.config.schemas import CivoSettings
from civo_cluster.types import Platform


class TestCivoSettings:
    """Test CivoSettings defaults and helpers."""

    def test_defaults(self):
        """Test default settings values."""
        settings = CivoSettings()

        assert settings.civo_version == "1.0.75"
        assert settings.base_image == "alpine:latest"
        assert settings.docker_binary == "docker"
        assert settings.token_variable == "CIVO_TOKEN"
        assert settings.cache_buster_variable == "CACHE_BUSTER"
        assert settings.timeout is None

    def test_release_url(self):
        """Test release archive URL for a platform."""
        url = CivoSettings().release_url(Platform(os="linux", arch="amd64"))

        assert url == "https://github.com/civo/cli/releases/download/v1.0.75/civo-1.0.75-linux-amd64.tar.gz"

    def test_release_url_follows_version(self):
        """Test that the pinned version drives the URL."""
        url = CivoSettings(civo_version="1.1.0").release_url(Platform(os="darwin", arch="arm64"))

        assert url.endswith("/v1.1.0/civo-1.1.0-darwin-arm64.tar.gz")

    def test_image_tag(self):
        """Test deterministic image tag."""
        tag = CivoSettings().image_tag(Platform(os="linux", arch="arm64"))

        assert tag == "civo-cli:1.0.75-linux-arm64"

    def test_template_missing_placeholder(self):
        """Test that a URL template without {arch} is rejected."""
        with pytest.raises(ValidationError, match="arch"):
            CivoSettings(release_url_template="https://example.com/civo-{version}-{os}.tar.gz")

    def test_unknown_field_rejected(self):
        """Test that typos in settings are not silently ignored."""
        with pytest.raises(ValidationError):
            CivoSettings(civo_verison="1.0.0")

    def test_timeout_must_be_positive(self):
        """Test timeout validation."""
        with pytest.raises(ValidationError):
            CivoSettings(timeout=0)
