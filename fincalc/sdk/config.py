"""Configuration management for fincalc.

Configuration is split into two files:

1. settings.json - Machine-specific settings
   - data_dir: where saved calculator state lives
   - tax_year: default tax rules year
   - profile: path to profile.yaml (optional, if not colocated)

2. profile.yaml - The user's planning assumptions
   - state_tax_rate: flat state income tax rate (decimal)
   - inflation_rate_percent: default annual inflation
   - budget: needs/wants/savings proportions
   - loan: default term and APR

Config directory resolution:
1. FIN_CALC_CONFIG_PATH environment variable (if set)
2. ~/.config/fin-calc/ (XDG_CONFIG_HOME fallback)

Data path follows XDG base directory conventions:
- settings.json "data_dir" key, else XDG_DATA_HOME/fin-calc/ or ~/.local/share/fin-calc/
"""

import json
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .store import JsonFileStore


APP_NAME = "fin-calc"
SETTINGS_FILENAME = "settings.json"
PROFILE_FILENAME = "profile.yaml"
STATE_FILENAME = "state.json"
TAX_RULES_DIRNAME = "tax-rules"


class ConfigNotFoundError(Exception):
    """Raised when no configuration is found."""
    pass


class ProfileNotFoundError(Exception):
    """Raised when no profile is found."""
    pass


# =============================================================================
# Profile schema
# =============================================================================


class BudgetProfile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    needs: float = Field(default=0.50, ge=0, le=1)
    wants: float = Field(default=0.30, ge=0, le=1)
    savings: float = Field(default=0.20, ge=0, le=1)


class LoanProfile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    term_months: int = Field(default=60, gt=0)
    annual_rate_percent: Optional[float] = Field(default=None, ge=0)


class Profile(BaseModel):
    """User planning assumptions from profile.yaml."""
    model_config = ConfigDict(extra="forbid")

    state_tax_rate: Optional[float] = Field(default=None, ge=0, le=1)
    inflation_rate_percent: float = Field(default=3.0, ge=0)
    budget: BudgetProfile = Field(default_factory=BudgetProfile)
    loan: LoanProfile = Field(default_factory=LoanProfile)


# =============================================================================
# Paths
# =============================================================================


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. FIN_CALC_CONFIG_PATH environment variable
    2. ~/.config/fin-calc/ (XDG_CONFIG_HOME)

    Returns:
        Path to the configuration directory
    """
    env_path = os.environ.get("FIN_CALC_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def get_tax_rules_override_dir() -> Path:
    """Directory holding user-supplied tax rules (<config_dir>/tax-rules)."""
    return get_config_dir() / TAX_RULES_DIRNAME


def get_data_path() -> Path:
    """Get the data directory path.

    Resolution order:
    1. settings.json "data_dir" key
    2. XDG_DATA_HOME/fin-calc/ (~/.local/share/fin-calc/)
    """
    data_dir = get_setting("data_dir")
    if data_dir:
        return Path(data_dir).expanduser()

    xdg_data_home = os.environ.get("XDG_DATA_HOME", Path.home() / ".local" / "share")
    return Path(xdg_data_home) / APP_NAME


def get_store() -> JsonFileStore:
    """Key-value store for saved calculator state, under the data directory."""
    return JsonFileStore(get_data_path() / STATE_FILENAME)


# =============================================================================
# settings.json
# =============================================================================


def load_settings() -> dict:
    """Load machine-specific settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    with open(settings_file, "r") as f:
        return json.load(f)


def save_settings(settings: dict) -> Path:
    """Save machine-specific settings to settings.json.

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value from settings.json."""
    return load_settings().get(key, default)


def set_setting(key: str, value: Any) -> Path:
    """Set a setting value in settings.json.

    Returns:
        Path to the saved settings file
    """
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def set_data_dir(path) -> Path:
    """Point saved calculator state at a new directory, creating it if needed.

    State already saved under the previous directory is left where it is.

    Returns:
        The resolved data directory

    Raises:
        NotADirectoryError: If path exists and is not a directory
    """
    data_path = Path(path).expanduser().resolve()
    if data_path.exists() and not data_path.is_dir():
        raise NotADirectoryError(f"Not a directory: {data_path}")
    data_path.mkdir(parents=True, exist_ok=True)
    set_setting("data_dir", str(data_path))
    return data_path


def clear_data_dir() -> bool:
    """Remove the data_dir setting. Returns False if it was not set."""
    settings = load_settings()
    if settings.pop("data_dir", None) is None:
        return False
    save_settings(settings)
    return True


# =============================================================================
# profile.yaml
# =============================================================================


def get_profile_path(require_exists: bool = False) -> Path:
    """Get the path to the profile.yaml file.

    Resolution order:
    1. settings.json "profile" key (if set)
    2. profile.yaml in config directory

    Raises:
        ProfileNotFoundError: If require_exists=True and no profile found
    """
    custom_profile = get_setting("profile")
    if custom_profile:
        profile_path = Path(custom_profile).expanduser()
        if require_exists and not profile_path.exists():
            raise ProfileNotFoundError(
                f"Profile not found at configured path: {profile_path}\n\n"
                f"Update settings.json or remove the 'profile' key."
            )
        return profile_path

    profile_path = get_config_dir() / PROFILE_FILENAME
    if require_exists and not profile_path.exists():
        raise ProfileNotFoundError(
            f"No profile found at {profile_path}\n\n"
            f"Create one with: fin-calc profile set state_tax_rate 0.05"
        )
    return profile_path


def load_profile(require_exists: bool = False) -> Profile:
    """Load and validate the user profile.

    A missing profile yields the default assumptions unless require_exists.

    Raises:
        ProfileNotFoundError: If require_exists=True and no profile found
        ConfigNotFoundError: If the profile exists but fails validation
    """
    profile_path = get_profile_path(require_exists=require_exists)

    if not profile_path.exists():
        return Profile()

    with open(profile_path, "r") as f:
        raw = yaml.safe_load(f) or {}

    try:
        return Profile.model_validate(raw)
    except ValidationError as e:
        raise ConfigNotFoundError(f"Invalid profile {profile_path}:\n{e}") from e


def save_profile(profile: Profile, path: Optional[Path] = None) -> Path:
    """Save the user profile to profile.yaml.

    Returns:
        Path to the saved profile file
    """
    if path is None:
        path = get_profile_path(require_exists=False)

    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.dump(profile.model_dump(exclude_none=True), f, default_flow_style=False, sort_keys=False)

    return path


def get_profile_value(key: str, default: Any = None) -> Any:
    """Get a profile value by dot-notation key (e.g., "budget.needs")."""
    value: Any = load_profile().model_dump()

    for part in key.split("."):
        if isinstance(value, dict) and part in value:
            value = value[part]
        else:
            return default

    return value


def set_profile_value(key: str, value: Any) -> Path:
    """Set a profile value by dot-notation key, validating the result.

    Raises:
        ConfigNotFoundError: If the resulting profile fails validation
    """
    data = load_profile().model_dump()

    parts = key.split(".")
    current = data
    for part in parts[:-1]:
        if not isinstance(current.get(part), dict):
            current[part] = {}
        current = current[part]
    current[parts[-1]] = value

    try:
        profile = Profile.model_validate(data)
    except ValidationError as e:
        raise ConfigNotFoundError(f"Invalid value for '{key}': {e}") from e

    return save_profile(profile)
