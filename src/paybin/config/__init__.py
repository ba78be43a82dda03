"""Config – client settings and their loaders."""

from paybin.config.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from paybin.config.settings import PaybinSettings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "PaybinSettings",
    "SettingsLoader",
]
