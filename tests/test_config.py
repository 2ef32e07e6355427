"""
SocialNet Backend — Configuration Tests
=======================================

What we test:
    ✅ Field validators normalize or reject log level and JWT algorithm
    ✅ Production check reports missing / short secrets
    ✅ The container falls back to an ephemeral secret when none is set
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from socialnet.config import Settings
from socialnet.container import ServiceContainer


def _settings(**overrides):
    return Settings(_env_file=None, **overrides)


class TestSettings:

    def test_log_level_normalized(self):
        assert _settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(PydanticValidationError):
            _settings(log_level="LOUD")

    def test_asymmetric_algorithm_rejected(self):
        """RS256 needs a key pair, not a shared secret."""
        with pytest.raises(PydanticValidationError):
            _settings(jwt_algorithm="RS256")

    def test_cors_origins_list(self):
        config = _settings(cors_origins="http://a.io, http://b.io")
        assert config.cors_origins_list == ["http://a.io", "http://b.io"]

    def test_default_port(self):
        assert _settings().port == 5000

    @pytest.mark.parametrize("secret", ["", "your_jwt_secret_here", "short"])
    def test_production_check_flags_weak_secret(self, secret):
        with pytest.raises(ValueError, match="JWT_SECRET"):
            _settings(jwt_secret=secret).validate_required_for_production()

    def test_production_check_passes(self):
        _settings(jwt_secret="x" * 32).validate_required_for_production()


class TestServiceContainer:

    def test_ephemeral_secret_when_unset(self):
        """Tokens still work for the life of the process."""
        container = ServiceContainer.from_settings(_settings(jwt_secret=""))
        assert len(container.tokens.secret_key) >= 32

    def test_configured_secret_and_lifetime_used(self):
        config = _settings(jwt_secret="y" * 32, token_expire_minutes=5)
        container = ServiceContainer.from_settings(config)
        assert container.tokens.secret_key == "y" * 32
        assert container.tokens.expires_delta.total_seconds() == 300


class TestAppFactory:

    def test_app_uses_settings_singleton(self):
        """Engine, container and app all read the one environment-loaded config."""
        from socialnet.config import settings
        from socialnet.main import create_app

        app = create_app()

        assert app.state.settings is settings
        assert app.state.container.tokens.secret_key == settings.jwt_secret
