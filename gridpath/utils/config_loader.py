"""
Configuration loader for the grid pathfinder.
Loads the pathfinder configuration from a YAML file and validates it.
"""

import yaml
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from config.schemas import PathFinderConfig
from config.settings import PATHFINDER_CONFIG_FILE
from gridpath.pathfinding.errors import ConfigurationError

DEFAULT_CONFIG_DIR = Path(__file__).resolve().parents[2] / "config"


class ConfigLoader:
    """load yaml config file into a validated PathFinderConfig"""

    def __init__(self, config_dir=DEFAULT_CONFIG_DIR):
        self.config_dir = Path(config_dir)

    def load_pathfinder_config(self, file_name: str = PATHFINDER_CONFIG_FILE) -> PathFinderConfig:
        """load pathfinder config from yaml file"""
        config_file = self.config_dir / file_name

        if not config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_file}")

        with open(config_file, 'r', encoding='utf-8') as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Could not parse {config_file}: {e}") from e

        # an empty file means defaults
        if config is None:
            config = {}
        if not isinstance(config, dict):
            raise ConfigurationError(f"{config_file} must contain a mapping, got {type(config).__name__}")

        try:
            return PathFinderConfig.model_validate(config)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration in {config_file}: {e}") from e

# global config loader instance
_config_loader: Optional[ConfigLoader] = None

def get_config_loader() -> ConfigLoader:
    """get global config loader instance"""
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader

def load_pathfinder_config() -> PathFinderConfig:
    """convenient function - load pathfinder config"""
    return get_config_loader().load_pathfinder_config()
