"""Settings tests: SCHENGEN_* environment variables feed the engine defaults."""

from datetime import date

import pytest

from schengen.config import Settings, get_settings
from schengen.errors import InvalidConfigError
from schengen.models.risk import CalculationMode
from schengen.schemas.compliance import ComplianceConfig
from schengen.schemas.thresholds import DaysRemainingThresholds, DaysUsedThresholds


@pytest.fixture
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in Settings.model_fields:
            monkeypatch.delenv(f"SCHENGEN_{name.upper()}", raising=False)
        settings = Settings(_env_file=None)
        assert settings.compliance_start_date == date(2025, 10, 12)
        assert settings.day_limit == 90
        assert settings.risk_green_days == 16
        assert settings.risk_amber_days == 1
        assert (settings.status_green_max, settings.status_amber_max, settings.status_red_max) == (60, 75, 89)
        assert settings.default_mode == "audit"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("SCHENGEN_COMPLIANCE_START_DATE", "2026-01-01")
        monkeypatch.setenv("SCHENGEN_RISK_GREEN_DAYS", "20")
        monkeypatch.setenv("SCHENGEN_DEFAULT_MODE", " Planning ")
        settings = Settings(_env_file=None)
        assert settings.compliance_start_date == date(2026, 1, 1)
        assert settings.risk_green_days == 20
        assert settings.default_mode == "planning"

    def test_unrelated_env_ignored(self, monkeypatch):
        monkeypatch.setenv("SCHENGEN_SOMETHING_ELSE", "x")
        Settings(_env_file=None)


class TestDefaultsFlowIntoModels:

    def test_config_defaults(self, monkeypatch, fresh_settings):
        monkeypatch.setenv("SCHENGEN_COMPLIANCE_START_DATE", "2026-02-01")
        monkeypatch.setenv("SCHENGEN_DEFAULT_MODE", "planning")
        monkeypatch.setenv("SCHENGEN_DAY_LIMIT", "60")
        config = ComplianceConfig()
        assert config.compliance_start_date == date(2026, 2, 1)
        assert config.mode == CalculationMode.planning
        assert config.limit == 60
        assert config.reference_date is None

    def test_threshold_defaults(self, monkeypatch, fresh_settings):
        monkeypatch.setenv("SCHENGEN_RISK_GREEN_DAYS", "25")
        monkeypatch.setenv("SCHENGEN_RISK_AMBER_DAYS", "5")
        monkeypatch.setenv("SCHENGEN_STATUS_GREEN_MAX", "50")
        remaining = DaysRemainingThresholds()
        used = DaysUsedThresholds()
        assert (remaining.green, remaining.amber) == (25, 5)
        assert used.green_max == 50

    def test_explicit_values_win(self, monkeypatch, fresh_settings):
        monkeypatch.setenv("SCHENGEN_DAY_LIMIT", "60")
        assert ComplianceConfig(limit=90).limit == 90


class TestConfigErrors:

    def test_non_numeric_threshold_mapping(self):
        thresholds = {"scheme": "days_used", "green_max": 60, "amber_max": 75, "red_max": "lots"}
        with pytest.raises(InvalidConfigError) as exc:
            ComplianceConfig(thresholds=thresholds)
        assert exc.value.config_key == "thresholds.red_max"

    def test_untagged_threshold_mapping(self):
        with pytest.raises(InvalidConfigError) as exc:
            ComplianceConfig(thresholds={"green": 20, "amber": 5})
        assert exc.value.config_key.startswith("thresholds")

    def test_tagged_threshold_mapping_accepted(self):
        config = ComplianceConfig(thresholds={"scheme": "days_remaining", "green": 20, "amber": 5})
        assert config.thresholds == DaysRemainingThresholds(green=20, amber=5)

    def test_unknown_mode(self):
        with pytest.raises(InvalidConfigError) as exc:
            ComplianceConfig(mode="forecast")
        assert exc.value.config_key == "mode"

    def test_unknown_default_mode_from_env(self, monkeypatch, fresh_settings):
        monkeypatch.setenv("SCHENGEN_DEFAULT_MODE", "forecast")
        with pytest.raises(InvalidConfigError) as exc:
            ComplianceConfig()
        assert exc.value.config_key == "default_mode"

    def test_threshold_model_built_directly(self):
        with pytest.raises(InvalidConfigError):
            DaysRemainingThresholds(green="plenty", amber=1)
