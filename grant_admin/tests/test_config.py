"""Tests for configuration validation."""

import os
import pytest
from unittest.mock import patch

from pydantic import ValidationError

from grant_admin.config import validate_config


class TestConfigValidation:
    """Test startup config validation."""

    VALID_ENV = {
        "ADMIN_API_URL": "https://admin.test",
        "CONNECT_TIMEOUT": "5",
        "READ_TIMEOUT": "20",
        "FETCH_RETRY_ATTEMPTS": "3",
        "LOG_LEVEL": "DEBUG",
    }

    def test_valid_config_loads_successfully(self):
        """All required vars present → Config loads without error."""
        with patch.dict(os.environ, self.VALID_ENV, clear=False):
            config = validate_config()
            assert config.admin_api_url == "https://admin.test"
            assert config.connect_timeout == 5.0
            assert config.read_timeout == 20.0
            assert config.fetch_retry_attempts == 3
            assert config.log_level == "DEBUG"

    def test_defaults(self):
        env = {k: v for k, v in os.environ.items()
               if k not in ("CONNECT_TIMEOUT", "READ_TIMEOUT", "FETCH_RETRY_ATTEMPTS", "LOG_LEVEL")}
        env["ADMIN_API_URL"] = "https://admin.test"
        with patch.dict(os.environ, env, clear=True):
            config = validate_config()
            assert config.fetch_retry_attempts == 1
            assert config.connect_timeout == 30.0
            assert config.read_timeout == 60.0
            assert config.log_level == "INFO"

    def test_missing_required_var_raises_error(self):
        """Missing ADMIN_API_URL → ValueError naming it."""
        env_clear = {k: v for k, v in os.environ.items() if k != "ADMIN_API_URL"}

        with patch.dict(os.environ, env_clear, clear=True):
            with pytest.raises(ValueError) as exc_info:
                validate_config()
            assert "ADMIN_API_URL" in str(exc_info.value)

    def test_invalid_value_is_not_reported_as_missing(self):
        """A malformed optional value surfaces pydantic's own error."""
        env = dict(os.environ)
        env.update({"ADMIN_API_URL": "https://admin.test", "FETCH_RETRY_ATTEMPTS": "many"})

        with patch.dict(os.environ, env, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                validate_config()
            assert "Missing required" not in str(exc_info.value)
            assert "fetch_retry_attempts" in str(exc_info.value)
