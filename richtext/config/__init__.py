"""Configuration loading."""

from .settings import AppConfig, RouterConfig, SettingsConfigResolver, load_config

__all__ = ["AppConfig", "RouterConfig", "SettingsConfigResolver", "load_config"]
