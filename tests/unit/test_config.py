"""Tests for text2cal configuration loading."""

from __future__ import annotations

import dataclasses
from datetime import date

import pytest

from text2cal.config import (
    DEFAULT_ENDPOINT,
    DEFAULT_GEMINI_MODEL,
    DEFAULT_MODEL,
    DEFAULT_TIMEOUT,
    ConfigError,
    ExtractionConfig,
    device_language_tags,
    load_config,
)


class TestLoadConfigDefaults:
    """Defaults when only the minimum is set."""

    def test_defaults(self, monkeypatch_env: dict[str, str]) -> None:
        config = load_config()

        assert config.endpoint == DEFAULT_ENDPOINT
        assert config.model == DEFAULT_MODEL
        assert config.force_structured_response is True
        assert config.provider == "openai"
        assert config.request_timeout == DEFAULT_TIMEOUT
        assert config.today == date.today()

    def test_today_is_passed_through(self, monkeypatch_env: dict[str, str]) -> None:
        assert load_config(today=date(2026, 2, 18)).today == date(2026, 2, 18)

    def test_directly_built_config_carries_today(self) -> None:
        assert ExtractionConfig().today == date.today()

    def test_language_settings_from_env(self, monkeypatch_env: dict[str, str]) -> None:
        config = load_config()

        assert config.keep_languages == "de-CH,en"
        assert config.translate_to == "English"


class TestApiKey:
    """API key resolution."""

    def test_default_key_used_with_default_endpoint(
        self, monkeypatch_env: dict[str, str]
    ) -> None:
        assert load_config().api_key == "test-openai-key-12345"

    def test_default_key_not_sent_to_custom_endpoint(
        self, monkeypatch_env: dict[str, str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TEXT2CAL_ENDPOINT", "https://llm.example.com/v1")

        config = load_config()

        assert config.endpoint == "https://llm.example.com/v1"
        assert config.api_key is None

    def test_endpoint_argument_also_drops_default_key(
        self, monkeypatch_env: dict[str, str]
    ) -> None:
        config = load_config(endpoint="http://localhost:11434/v1")

        assert config.api_key is None

    def test_explicit_key_used_with_custom_endpoint(
        self, monkeypatch_env: dict[str, str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TEXT2CAL_ENDPOINT", "https://llm.example.com/v1")
        monkeypatch.setenv("TEXT2CAL_API_KEY", "my-key")

        assert load_config().api_key == "my-key"

    @pytest.mark.parametrize("value", ["", "   ", "null"])
    def test_blank_or_null_key_is_unset(
        self, value: str, monkeypatch_env: dict[str, str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TEXT2CAL_API_KEY", value)

        assert load_config().api_key == "test-openai-key-12345"

    def test_gemini_uses_gemini_key_and_model(
        self, clean_env: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TEXT2CAL_PROVIDER", "gemini")
        monkeypatch.setenv("GEMINI_API_KEY", "g-key")
        monkeypatch.setenv("OPENAI_API_KEY", "o-key")

        config = load_config()

        assert config.provider == "gemini"
        assert config.api_key == "g-key"
        assert config.model == DEFAULT_GEMINI_MODEL

    def test_provider_argument_overrides_env(
        self, clean_env: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TEXT2CAL_PROVIDER", "openai")

        assert load_config(provider="gemini").provider == "gemini"


class TestInvalidValues:
    """Invalid values raise ConfigError naming the variable."""

    def test_invalid_provider(self, clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEXT2CAL_PROVIDER", "llama")

        with pytest.raises(ConfigError, match="TEXT2CAL_PROVIDER"):
            load_config()

    def test_invalid_boolean(self, clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEXT2CAL_FORCE_JSON", "maybe")

        with pytest.raises(ConfigError, match="TEXT2CAL_FORCE_JSON"):
            load_config()

    @pytest.mark.parametrize("value", ["soon", "0", "-5"])
    def test_invalid_timeout(
        self, value: str, clean_env: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TEXT2CAL_TIMEOUT", value)

        with pytest.raises(ConfigError, match="TEXT2CAL_TIMEOUT"):
            load_config()


class TestOverrides:
    """Optional variables are honoured."""

    @pytest.mark.parametrize(("value", "expected"), [("false", False), ("0", False), ("YES", True)])
    def test_force_json(
        self,
        value: str,
        expected: bool,
        clean_env: None,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("TEXT2CAL_FORCE_JSON", value)

        assert load_config().force_structured_response is expected

    def test_model_and_timeout(self, clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEXT2CAL_MODEL", "gpt-4o")
        monkeypatch.setenv("TEXT2CAL_TIMEOUT", "15")

        config = load_config()

        assert config.model == "gpt-4o"
        assert config.request_timeout == 15.0


class TestDeviceLanguages:
    """Language defaults derived from the environment."""

    def test_language_variable(self, clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LANGUAGE", "de_CH.UTF-8:en_US:de_CH")

        assert device_language_tags() == ["de-CH", "en-US"]

    def test_locale_fallback(self, clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("text2cal.config.locale.getlocale", lambda: ("fr_FR", "UTF-8"))

        assert device_language_tags() == ["fr-FR"]

    def test_c_locale_falls_back_to_english(
        self, clean_env: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr("text2cal.config.locale.getlocale", lambda: (None, None))

        assert device_language_tags() == ["en"]

    def test_defaults_derived_from_language(
        self, clean_env: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LANGUAGE", "de_CH:en")

        config = load_config()

        assert config.keep_languages == "de-CH,en"
        assert config.translate_to == "de"


class TestExtractionConfig:
    """The config value object."""

    def test_is_frozen(self) -> None:
        config = ExtractionConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.model = "other"  # type: ignore[misc]

    def test_repr_masks_api_key(self) -> None:
        config = ExtractionConfig(api_key="secret-key")

        assert "secret-key" not in repr(config)
        assert "'***'" in repr(config)
