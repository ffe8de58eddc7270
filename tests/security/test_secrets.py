"""Tests for secret reference resolution."""

import pytest
from pydantic import SecretStr

from civo_cluster.any.exceptions import CivoSecretNotFoundError
from civo_cluster.any.protocols import SecretsProvider
from civo_cluster.security.secrets import ReferenceSecretsProvider


class TestReferenceSecretsProvider:
    """Test env:, file: and cmd: references."""

    def test_is_secrets_provider(self):
        """Test protocol conformance."""
        assert isinstance(ReferenceSecretsProvider(), SecretsProvider)

    def test_env_reference(self):
        """Test resolving an environment variable."""
        provider = ReferenceSecretsProvider(environ={"CIVO_TOKEN": "abc"})

        secret = provider.get_secret("env:CIVO_TOKEN")

        assert isinstance(secret, SecretStr)
        assert secret.get_secret_value() == "abc"
        assert "abc" not in str(secret)

    def test_env_missing(self):
        """Test that an unset variable raises."""
        with pytest.raises(CivoSecretNotFoundError, match="not set: CIVO_TOKEN"):
            ReferenceSecretsProvider(environ={}).get_secret("env:CIVO_TOKEN")

    def test_env_empty(self):
        """Test that an empty value raises."""
        with pytest.raises(CivoSecretNotFoundError, match="empty value"):
            ReferenceSecretsProvider(environ={"CIVO_TOKEN": ""}).get_secret("env:CIVO_TOKEN")

    def test_file_reference(self, tmp_path):
        """Test reading a token file and stripping the trailing newline."""
        token_file = tmp_path / "token"
        token_file.write_text("file-token\n")

        secret = ReferenceSecretsProvider(environ={}).get_secret(f"file:{token_file}")

        assert secret.get_secret_value() == "file-token"

    def test_file_missing(self, tmp_path):
        """Test that a missing file raises."""
        with pytest.raises(CivoSecretNotFoundError, match="Cannot read secret file"):
            ReferenceSecretsProvider(environ={}).get_secret(f"file:{tmp_path / 'nope'}")

    def test_cmd_reference(self):
        """Test resolving command output."""
        secret = ReferenceSecretsProvider(environ={}).get_secret("cmd:echo cmd-token")

        assert secret.get_secret_value() == "cmd-token"

    def test_cmd_failure(self):
        """Test that a failing command raises."""
        with pytest.raises(CivoSecretNotFoundError, match="Secret command failed"):
            ReferenceSecretsProvider(environ={}).get_secret("cmd:false")

    @pytest.mark.parametrize("reference", ["CIVO_TOKEN", "vault:x", "env:", ""])
    def test_invalid_reference(self, reference):
        """Test that unknown schemes and empty targets raise."""
        with pytest.raises(CivoSecretNotFoundError, match="Invalid secret reference"):
            ReferenceSecretsProvider(environ={}).get_secret(reference)
