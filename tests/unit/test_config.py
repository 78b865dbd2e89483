"""Tests for TestKitSettings loading and validation."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from fixture_testkit.core.config import TestKitSettings
from fixture_testkit.core.enums import Environment

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ("PORT", "HOST", "FIXTURES_DIR", "ENVIRONMENT", "LOG_LEVEL"):
        monkeypatch.delenv(f"TESTKIT_{name}", raising=False)


class TestDefaults:
    def test_defaults_match_local_test_server(self) -> None:
        settings = TestKitSettings()

        assert settings.host == "localhost"
        assert settings.port == 2426
        assert settings.fixtures_dir == Path("fixtures")
        assert settings.environment == Environment.TESTING
        assert settings.database_url is None


class TestEnvironmentOverrides:
    def test_port_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("TESTKIT_PORT", "9999")

        assert TestKitSettings().port == 9999

    def test_fixtures_dir_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("TESTKIT_FIXTURES_DIR", "tests/data")

        assert TestKitSettings().fixtures_dir == Path("tests/data")

    def test_explicit_arguments_win_over_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("TESTKIT_PORT", "9999")

        assert TestKitSettings(port=1234).port == 1234


class TestValidation:
    @pytest.mark.parametrize("port", [0, 65536, -1])
    def test_rejects_out_of_range_port(self, port: int) -> None:
        with pytest.raises(ValidationError):
            TestKitSettings(port=port)

    def test_log_level_is_upper_cased(self) -> None:
        assert TestKitSettings(log_level="debug").log_level == "DEBUG"

    @pytest.mark.parametrize(
        ("environment", "use_json"),
        [
            (Environment.DEVELOPMENT, False),
            (Environment.TESTING, True),
            (Environment.CI, True),
        ],
    )
    def test_json_logs_outside_development(
        self, environment: Environment, use_json: bool
    ) -> None:
        assert TestKitSettings(environment=environment).use_json_logs is use_json
