"""
Configuration management for the rich text link converter.
"""

import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from ..services import ConfigResolver, ConfigurationError


@dataclass
class RouterConfig:
    """URL generation configuration."""
    base_url: str = "http://localhost"
    prefix_siteaccess: bool = True  # Put "/<siteaccess>" in front of the alias
    siteaccess_hosts: Dict[str, str] = field(default_factory=dict)  # siteaccess -> host


@dataclass
class AppConfig:
    """Main application configuration."""
    siteaccess: Optional[str] = None  # Current siteaccess name
    router: RouterConfig = field(default_factory=RouterConfig)
    parameters: Dict[str, Dict[str, Any]] = field(default_factory=dict)  # namespace -> name -> value
    log_level: str = "INFO"
    log_file: Optional[str] = None


def load_config(config_path: Path) -> AppConfig:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config.yaml file

    Returns:
        AppConfig instance

    Raises:
        ConfigurationError: If the file isn't valid YAML or not a mapping
    """
    if not config_path.exists():
        # Return default configuration
        return AppConfig()

    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file must contain a mapping: {config_path}")

    router_data = data.get('router') or {}
    if not isinstance(router_data, dict):
        raise ConfigurationError("'router' must be a mapping")
    router_config = RouterConfig(
        base_url=router_data.get('base_url', 'http://localhost'),
        prefix_siteaccess=router_data.get('prefix_siteaccess', True),
        siteaccess_hosts=dict(router_data.get('siteaccess_hosts') or {})
    )

    parameters = data.get('parameters') or {}
    if not isinstance(parameters, dict):
        raise ConfigurationError("'parameters' must be a mapping of namespaces")

    config = AppConfig(
        siteaccess=data.get('siteaccess'),
        router=router_config,
        parameters=parameters,
        log_level=data.get('log_level', 'INFO'),
        log_file=data.get('log_file')
    )

    return config


class SettingsConfigResolver(ConfigResolver):
    """Resolves parameters from the ``parameters`` section of an AppConfig."""

    def __init__(self, config: AppConfig):
        self.config = config

    def get_parameter(self, name: str, namespace: str, default: Any = None) -> Any:
        section = self.config.parameters.get(namespace) or {}
        if not isinstance(section, dict):
            raise ConfigurationError(f"Parameter namespace '{namespace}' must be a mapping")
        return section.get(name, default)
