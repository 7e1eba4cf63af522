import httpx
import pytest
from pydantic import ValidationError

from redactor.config.settings import Settings
from redactor.processor.exceptions import ConfigurationError
from redactor.remote.server_client import build_http_client


class TestSettingsDefaults:
    def test_default_poll_interval(self) -> None:
        s = Settings()
        assert s.job_poll_interval_seconds == 1.0

    def test_default_ocr_language(self) -> None:
        s = Settings()
        assert s.ocr_language == "english"

    def test_default_resource_paths(self) -> None:
        s = Settings()
        assert s.workfile_path == "PCCIS/V1/WorkFile"
        assert s.markup_burner_path == "PCCIS/V1/MarkupBurner"

    def test_default_timeout(self) -> None:
        s = Settings()
        assert s.prizmdoc_timeout_seconds == 60


class TestSettingsFromEnv:
    def test_loads_server_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PRIZMDOC_SERVER_URL", "http://prizm.example.com:18681")
        s = Settings()
        assert s.prizmdoc_server_url == "http://prizm.example.com:18681"

    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_poll_interval(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("JOB_POLL_INTERVAL_SECONDS", "0.5")
        s = Settings()
        assert s.job_poll_interval_seconds == 0.5

    def test_explicit_value_wins_over_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PRIZMDOC_SERVER_URL", "http://from-env")
        s = Settings(prizmdoc_server_url="http://from-cli")
        assert s.prizmdoc_server_url == "http://from-cli"


class TestSettingsValidation:
    def test_invalid_timeout_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PRIZMDOC_TIMEOUT_SECONDS", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()


class TestBuildHttpClient:
    def test_strips_trailing_slash(self) -> None:
        with build_http_client(Settings(prizmdoc_server_url="http://prizm.test/base/")) as client:
            assert str(client.base_url) == "http://prizm.test/base/"
            assert client.build_request("GET", "v2/x").url == httpx.URL(
                "http://prizm.test/base/v2/x"
            )

    def test_requires_server_url(self) -> None:
        with pytest.raises(ConfigurationError, match="prizmdoc_server_url"):
            build_http_client(Settings(prizmdoc_server_url=" "))
