from pathlib import Path
import json
import yaml
import os
from typing import Optional, Union
from dotenv import load_dotenv
from pydantic import ValidationError
from site_archiver.exceptions import ConfigurationError
from site_archiver.models.config_models import ArchiveConfig

CONFIG_FILE_ENV = "CONFIG_FILE"

class ConfigService:
    """Service for loading the archive configuration"""

    def __init__(self):
        self._env_loaded = False
        self._load_environment()

    def _load_environment(self):
        """Load environment variables from .env file"""
        if not self._env_loaded:
            env_path = Path(__file__).parent.parent.parent / ".env"

            if env_path.exists():
                load_dotenv(env_path)
            else:
                load_dotenv()

            self._env_loaded = True

    def env_var(self, key: str, default: Optional[str] = None, required: bool = False) -> str:
        """Get environment variable with validation"""
        value = os.getenv(key, default)

        if required and not value:
            raise ConfigurationError(f"Required environment variable '{key}' is not set")

        return value

    @property
    def log_level(self) -> str:
        """Log level from environment"""
        return self.env_var("LOG_LEVEL", default="INFO")

    @property
    def config_file(self) -> Path:
        """Path of the archive configuration file"""
        return Path(self.env_var(CONFIG_FILE_ENV, required=True))

    def load_archive_config(self, config_path: Optional[Union[str, Path]] = None) -> ArchiveConfig:
        """Loads the archive configuration from a YAML or JSON file"""
        config_path = Path(config_path) if config_path else self.config_file

        if not config_path.is_file():
            raise ConfigurationError(f"Configuration file not found at {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as file:
                if config_path.suffix.lower() == ".json":
                    raw_config = json.load(file)
                else:
                    raw_config = yaml.safe_load(file)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Error reading configuration {config_path}: {e}")

        if not isinstance(raw_config, dict):
            raise ConfigurationError(f"Invalid configuration format in {config_path}")

        try:
            return ArchiveConfig(**raw_config)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration in {config_path}: {e}")


# Global instance
config_service = ConfigService()
