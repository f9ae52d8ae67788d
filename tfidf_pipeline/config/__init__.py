"""
Config Module
YAML configuration loading
"""
from .config import AppConfig, DEFAULT_CONFIG_PATH, resolve_path, cfg

__all__ = ["AppConfig", "DEFAULT_CONFIG_PATH", "resolve_path", "cfg"]
