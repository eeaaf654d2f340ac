"""Unit tests for settings loading."""

from access.config import Settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.locale == "en"
        assert settings.invitations.default_expiry_days == 30
        assert settings.invitations.default_role_expiry_days == 366
        assert settings.invitations.guest_role_expiry_days == 365
        assert settings.invitations.past_date_allowed is False

    def test_nested_environment_variables(self, monkeypatch):
        monkeypatch.setenv("ACCESS_API__BASE_URL", "https://access.example.org")
        monkeypatch.setenv("INVITATIONS__PAST_DATE_ALLOWED", "true")

        settings = Settings(_env_file=None)

        assert settings.access_api.base_url == "https://access.example.org"
        assert settings.invitations.past_date_allowed is True
