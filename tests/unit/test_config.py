"""Unit tests for settings.json and profile.yaml handling."""

import json

import pytest
import yaml

from fincalc.sdk.config import (
    ConfigNotFoundError,
    Profile,
    ProfileNotFoundError,
    get_config_dir,
    get_data_path,
    get_profile_path,
    get_profile_value,
    get_setting,
    clear_data_dir,
    get_store,
    load_profile,
    set_data_dir,
    set_profile_value,
    set_setting,
)


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Isolated config and data directories."""
    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"
    config_dir.mkdir()

    monkeypatch.setenv("FIN_CALC_CONFIG_PATH", str(config_dir))

    settings = {"data_dir": str(data_dir)}
    (config_dir / "settings.json").write_text(json.dumps(settings))

    return {"config_dir": config_dir, "data_dir": data_dir}


class TestPaths:
    """Tests for config and data directory resolution."""

    def test_config_dir_from_env(self, isolated_env):
        assert get_config_dir() == isolated_env["config_dir"]

    def test_config_dir_xdg_fallback(self, tmp_path, monkeypatch):
        monkeypatch.delenv("FIN_CALC_CONFIG_PATH", raising=False)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
        assert get_config_dir() == tmp_path / "xdg" / "fin-calc"

    def test_data_dir_from_settings(self, isolated_env):
        assert get_data_path() == isolated_env["data_dir"]

    def test_data_dir_xdg_fallback(self, tmp_path, monkeypatch):
        monkeypatch.setenv("FIN_CALC_CONFIG_PATH", str(tmp_path / "empty-config"))
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "share"))
        assert get_data_path() == tmp_path / "share" / "fin-calc"

    def test_store_lives_in_data_dir(self, isolated_env):
        assert get_store().path == isolated_env["data_dir"] / "state.json"

    def test_set_data_dir_creates_and_moves_store(self, isolated_env, tmp_path):
        new_dir = set_data_dir(tmp_path / "moved" / "data")

        assert new_dir.is_dir()
        assert get_data_path() == new_dir
        assert get_store().path == new_dir / "state.json"

    def test_set_data_dir_rejects_file(self, isolated_env, tmp_path):
        not_a_dir = tmp_path / "file.txt"
        not_a_dir.write_text("x")

        with pytest.raises(NotADirectoryError):
            set_data_dir(not_a_dir)
        assert get_data_path() == isolated_env["data_dir"]

    def test_clear_data_dir_reverts_to_default(self, isolated_env, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "share"))

        assert clear_data_dir() is True
        assert get_data_path() == tmp_path / "share" / "fin-calc"
        assert clear_data_dir() is False


class TestSettings:
    """Tests for settings.json accessors."""

    def test_set_and_get(self, isolated_env):
        set_setting("tax_year", 2025)

        assert get_setting("tax_year") == 2025
        assert get_setting("data_dir") == str(isolated_env["data_dir"])

    def test_missing_key_default(self, isolated_env):
        assert get_setting("nope", "fallback") == "fallback"


class TestProfile:
    """Tests for profile.yaml loading and updates."""

    def test_missing_profile_yields_defaults(self, isolated_env):
        profile = load_profile()

        assert profile == Profile()
        assert profile.budget.needs == 0.50
        assert profile.loan.term_months == 60
        assert profile.inflation_rate_percent == 3.0

    def test_require_exists(self, isolated_env):
        with pytest.raises(ProfileNotFoundError):
            load_profile(require_exists=True)

    def test_set_nested_value_persists(self, isolated_env):
        path = set_profile_value("budget.needs", 0.6)

        assert path == isolated_env["config_dir"] / "profile.yaml"
        assert get_profile_value("budget.needs") == 0.6
        assert yaml.safe_load(path.read_text())["budget"]["needs"] == 0.6

    def test_set_unknown_key_rejected(self, isolated_env):
        with pytest.raises(ConfigNotFoundError):
            set_profile_value("drive.folder_id", "abc")
        assert not get_profile_path().exists()

    def test_set_out_of_range_rejected(self, isolated_env):
        with pytest.raises(ConfigNotFoundError):
            set_profile_value("state_tax_rate", 1.5)

    def test_invalid_profile_file(self, isolated_env):
        (isolated_env["config_dir"] / "profile.yaml").write_text("budget:\n  needs: lots\n")
        with pytest.raises(ConfigNotFoundError, match="Invalid profile"):
            load_profile()

    def test_custom_profile_path_from_settings(self, isolated_env, tmp_path):
        custom = tmp_path / "elsewhere.yaml"
        custom.write_text("state_tax_rate: 0.0\n")
        set_setting("profile", str(custom))

        assert get_profile_path() == custom
        assert load_profile().state_tax_rate == 0.0

    def test_get_missing_value_default(self, isolated_env):
        assert get_profile_value("loan.nope", "x") == "x"
