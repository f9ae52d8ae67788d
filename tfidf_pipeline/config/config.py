import yaml
import os
from pathlib import Path
from typing import Dict, Any, Union

from tfidf_pipeline.utils.logger import setup_logger

CONFIG_DIR = Path(__file__).resolve().parent
DEFAULT_CONFIG_PATH = CONFIG_DIR / "config.yaml"

logger = setup_logger("config")


class AppConfig:
    """
    Configuration loader class to handle YAML config file
    """
    def __init__(self, config_path: Union[str, Path] = DEFAULT_CONFIG_PATH):
        self.config_path = self._resolve(config_path)
        self._config = self._load_config()

    @staticmethod
    def _resolve(config_path: Union[str, Path]) -> Path:
        path = Path(config_path)
        if path.is_absolute() or path.exists():
            return path
        # Bare names like "config.yaml" refer to the packaged configs
        return CONFIG_DIR / path

    def _load_config(self) -> Dict[str, Any]:
        if not self.config_path.exists():
            raise FileNotFoundError(f"Config file not found at: {self.config_path}")
        with open(self.config_path, "r", encoding="utf-8") as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Error parsing YAML file: {e}")
        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ValueError(f"Config root must be a mapping: {self.config_path}")
        return config

    @property
    def config(self) -> Dict[str, Any]:
        "Get full configuration dict"
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        "Helper to get a value from config with a default"
        return self._config.get(key, default)

    def section(self, *keys: str) -> Dict[str, Any]:
        "Get a nested mapping, empty if any level is missing"
        node = self._config
        for key in keys:
            node = node.get(key) or {}
            if not isinstance(node, dict):
                raise ValueError(f"Config section {'.'.join(keys)} is not a mapping")
        return node


def resolve_path(path: str, base_dir: Union[str, Path, None] = None) -> str:
    """Make a config path absolute, relative paths are taken from base_dir (default: cwd)."""
    if os.path.isabs(path):
        return os.path.normpath(path)
    base = Path(base_dir) if base_dir is not None else Path.cwd()
    return os.path.normpath(str(base / path))


# Global instance
try:
    cfg = AppConfig()
except Exception as e:
    logger.warning(f"Could not load default config. Error: {e}")
    cfg = None

if __name__ == "__main__":
    if cfg:
        print("Config loaded successfully")
        data_path = cfg.section('pipeline', 'data').get('documents_path')
        print(f"Documents path: {data_path}")
    else:
        print("Failed to load config")
