"""Tests for AgeSettings — unified settings with TOML source."""

from datetime import date
from pathlib import Path

import click
import pytest

from agecalc.config.settings import AgeSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("AGECALC_CONFIG", "AGECALC_TODAY", "AGECALC_QUIET", "AGECALC_VALIDATION__MIN_YEAR"):
        monkeypatch.delenv(name, raising=False)


class TestAgeSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = AgeSettings.from_cli(start=tmp_path)
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.today is None
        assert settings.config_path is None
        assert settings.validation.min_year == 1900
        assert settings.validation.reject_future_dates is False
        assert settings.display.show_total_months is False

    def test_frozen(self, tmp_path: Path) -> None:
        settings = AgeSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "agecalc.toml"
        toml.write_text("[validation]\nmin_year = 1950\n[display]\nshow_total_months = true\n")
        settings = AgeSettings.from_cli(start=tmp_path)
        assert settings.validation.min_year == 1950
        assert settings.validation.reject_future_dates is False  # default preserved
        assert settings.display.show_total_months is True
        assert settings.config_path == toml

    def test_walks_up_to_parent(self, tmp_path: Path) -> None:
        (tmp_path / "agecalc.toml").write_text("[validation]\nreject_future_dates = true\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        settings = AgeSettings.from_cli(start=nested)
        assert settings.validation.reject_future_dates is True

    def test_today_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "agecalc.toml").write_text('today = "2020-02-29"\n')
        settings = AgeSettings.from_cli(start=tmp_path)
        assert settings.today == date(2020, 2, 29)

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[validation]\nmin_year = 1990\n")
        settings = AgeSettings.from_cli(config_path=str(custom), start=tmp_path)
        assert settings.validation.min_year == 1990
        assert settings.config_path == custom

    def test_invalid_toml_raises_click_exception(self, tmp_path: Path) -> None:
        (tmp_path / "agecalc.toml").write_text("[validation\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            AgeSettings.from_cli(start=tmp_path)


class TestCliFlags:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = AgeSettings.from_cli(
            start=tmp_path,
            json_output=True,
            quiet=True,
            verbose=True,
            today=date(2024, 3, 10),
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True
        assert settings.today == date(2024, 3, 10)

    def test_none_flags_fall_through_to_toml(self, tmp_path: Path) -> None:
        (tmp_path / "agecalc.toml").write_text('today = "2021-07-04"\n')
        settings = AgeSettings.from_cli(start=tmp_path, today=None)
        assert settings.today == date(2021, 7, 4)

    def test_cli_today_overrides_toml(self, tmp_path: Path) -> None:
        (tmp_path / "agecalc.toml").write_text('today = "2021-07-04"\n')
        settings = AgeSettings.from_cli(start=tmp_path, today=date(2024, 1, 1))
        assert settings.today == date(2024, 1, 1)


class TestEnvVars:
    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AGECALC_QUIET", "true")
        settings = AgeSettings.from_cli(start=tmp_path)
        assert settings.quiet is True

    def test_nested_env_var_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("AGECALC_VALIDATION__MIN_YEAR", "1960")
        settings = AgeSettings.from_cli(start=tmp_path)
        assert settings.validation.min_year == 1960

    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "agecalc.toml").write_text('today = "2021-07-04"\n')
        monkeypatch.setenv("AGECALC_TODAY", "2022-08-05")
        settings = AgeSettings.from_cli(start=tmp_path)
        assert settings.today == date(2022, 8, 5)
