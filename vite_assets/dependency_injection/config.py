import configparser
from typing import Any, Mapping, Optional

from vite_assets.models.vite_config import ViteConfig

_PATH = "vite.conf"
_CONFIG = None


# pylint:disable=global-statement
def get_config(path=None) -> configparser.ConfigParser:
    """
    Use this method only when it's not possible to inject config variables
    """
    global _CONFIG
    global _PATH
    if path is None:
        path = _PATH
    if _CONFIG is None or _PATH != path:
        _PATH = path
        _CONFIG = configparser.ConfigParser()
        _CONFIG.read(_PATH)
    return _CONFIG


def get_config_value(section: str, name: str, default: Any = None) -> Any:
    """
    Use this method only when it's not possible to inject config variables
    """
    config = get_config()
    if section in config and name in config[section]:
        return config[section][name]
    return default


def config_as_dict(config: configparser.ConfigParser) -> dict:
    return {section: dict(config[section]) for section in config.sections()}


# pylint:disable=too-few-public-methods
class RouterConfig:
    health_endpoint = get_config_value("misc", "health_endpoint", "/health")


def get_vite_config(vite_section: Optional[Mapping[str, Any]]) -> ViteConfig:
    if vite_section is None:
        return ViteConfig()
    return ViteConfig(**vite_section)
