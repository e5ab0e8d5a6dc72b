"""Tests for environment-driven settings."""

from coach.config import Settings, get_settings


class TestSettings:
    """Tests for Settings."""

    def test_reads_prefixed_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("COACH_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("COACH_HTTP_TIMEOUT", "5")
        settings = Settings()
        assert settings.data_dir == tmp_path
        assert settings.http_timeout == 5.0

    def test_unprefixed_names_ignored(self, monkeypatch):
        monkeypatch.delenv("COACH_HTTP_TIMEOUT", raising=False)
        monkeypatch.setenv("HTTP_TIMEOUT", "5")
        assert Settings().http_timeout == 30.0

    def test_empty_client_credentials_are_unset(self, monkeypatch):
        """Test blank Strava credentials count as not configured."""
        monkeypatch.setenv("COACH_STRAVA_CLIENT_ID", "")
        monkeypatch.setenv("COACH_STRAVA_CLIENT_SECRET", "None")
        settings = Settings()
        assert settings.strava_client_id is None
        assert settings.strava_client_secret is None

    def test_config_is_a_settings_dict(self):
        assert Settings.model_config["env_prefix"] == "COACH_"
        assert Settings.model_config["env_file"] == ".env"

    def test_get_settings_is_cached(self, data_dir):
        assert get_settings() is get_settings()
        assert get_settings().data_dir == data_dir
