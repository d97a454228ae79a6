"""Config – 12-factor settings and loaders."""

from mp_flags.config.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from mp_flags.config.loaders import EnvSettingsLoader, SettingsLoader
from mp_flags.config.settings import FlagServiceSettings, Settings

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "FlagServiceSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
