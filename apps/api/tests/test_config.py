import pytest

from photoindex.core.config import Settings
from photoindex.core.errors import ConfigurationError


class TestSettings:
    def test_given_no_environment_when_loading_settings_then_uses_defaults(self, monkeypatch):
        """
        Given: No photo index environment variables
        When: Loading settings
        Then: Defaults match the deployed Lambda configuration
        """
        # Given
        for var in ("OPENSEARCH_INDEX", "LEX_LOCALE_ID", "SEARCH_INTENT_NAME"):
            monkeypatch.delenv(var, raising=False)

        # When
        settings = Settings(_env_file=None)

        # Then
        assert settings.opensearch_index == "photos"
        assert settings.lex_locale_id == "en_US"
        assert settings.lex_session_id == "photos-session"
        assert settings.search_intent_name == "SearchIntent"
        assert settings.rekognition_max_labels == 10
        assert settings.rekognition_min_confidence == 80

    def test_given_environment_variables_when_loading_settings_then_reads_them(self, monkeypatch):
        # Given
        monkeypatch.setenv("OPENSEARCH_ENDPOINT", "https://search.example.com")
        monkeypatch.setenv("OPENSEARCH_INDEX", "pictures")
        monkeypatch.setenv("REKOGNITION_MAX_LABELS", "5")

        # When
        settings = Settings(_env_file=None)

        # Then
        assert settings.opensearch_endpoint == "https://search.example.com"
        assert settings.opensearch_index == "pictures"
        assert settings.rekognition_max_labels == 5


class TestRequire:
    def test_given_all_fields_present_when_requiring_then_does_not_raise(self):
        settings = Settings(_env_file=None, lex_bot_id="b", lex_bot_alias_id="a")
        settings.require("lex_bot_id", "lex_bot_alias_id")

    def test_given_blank_field_when_requiring_then_raises_configuration_error_naming_it(self):
        # Given
        settings = Settings(_env_file=None, opensearch_endpoint="   ", lex_bot_id="b")

        # When / Then
        with pytest.raises(ConfigurationError, match="OPENSEARCH_ENDPOINT") as excinfo:
            settings.require("lex_bot_id", "opensearch_endpoint")
        assert excinfo.value.missing == ["OPENSEARCH_ENDPOINT"]
