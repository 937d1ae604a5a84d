"""Tests for service settings."""

from recipebox.config import Settings


class TestSettings:
    """Tests for Settings defaults and derived values."""

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.min_scale_factor == 0.1
        assert settings.max_scale_factor == 10.0
        assert settings.normalize_plural_units is False
        assert settings.sort_shopping_list_by_category is False

    def test_origins(self):
        settings = Settings(allowed_origins="http://a.test, http://b.test,")
        assert settings.origins == ["http://a.test", "http://b.test"]

    def test_is_development(self):
        assert Settings(environment="development").is_development
        assert Settings(environment="Development").is_development
        assert not Settings(environment="production").is_development

    def test_environment_variables(self, monkeypatch):
        monkeypatch.setenv("MAX_SCALE_FACTOR", "4")
        monkeypatch.setenv("NORMALIZE_PLURAL_UNITS", "true")

        settings = Settings()
        assert settings.max_scale_factor == 4.0
        assert settings.normalize_plural_units is True
