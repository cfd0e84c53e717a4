"""Configuration management for the implied foreign key tool."""

import os
from typing import Optional
from pathlib import Path
from dotenv import load_dotenv

from .models import FinderConfig


class Config:
    """Configuration manager for the implied foreign key tool."""

    def __init__(self, env_file: Optional[str] = None):
        """Initialize configuration.

        Args:
            env_file: Path to .env file. If None, looks for .env in current directory.
        """
        if env_file:
            load_dotenv(env_file)
        else:
            # Look for .env file in current directory and parent directories
            current_dir = Path.cwd()
            for parent in [current_dir] + list(current_dir.parents):
                env_path = parent / ".env"
                if env_path.exists():
                    load_dotenv(env_path)
                    break

    def get_finder_config(self, **overrides) -> FinderConfig:
        """Get finder configuration from environment variables.

        Args:
            **overrides: Configuration overrides

        Returns:
            FinderConfig instance
        """
        config_data = {
            "schema_file": self._get_env("SCHEMA_FILE"),
            "excluded_column_name": self._get_env("EXCLUDED_COLUMN_NAME", default="LanguageId"),
            "include_implied": self._get_bool_env("INCLUDE_IMPLIED", default=True),
            "exclude_implied_pattern": self._get_env("EXCLUDE_IMPLIED_PATTERN"),
            "output_format": self._get_env("OUTPUT_FORMAT", default="mermaid"),
            "output_file": self._get_env("OUTPUT_FILE"),
            "show_column_types": self._get_bool_env("SHOW_COLUMN_TYPES", default=True),
            "log_level": self._get_env("LOG_LEVEL", default="INFO"),
            "log_file": self._get_env("LOG_FILE"),
        }

        # Apply overrides
        config_data.update(overrides)

        return FinderConfig(**config_data)

    def _get_env(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get environment variable.

        Args:
            key: Environment variable name
            default: Default value if not set

        Returns:
            Environment variable value
        """
        return os.getenv(key, default)

    def _get_bool_env(self, key: str, default: bool = False) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(key, str(default)).lower()
        return value in ('true', '1', 'yes', 'on')

    def validate_config(self, config: FinderConfig) -> None:
        """Validate configuration.

        Args:
            config: FinderConfig to validate

        Raises:
            ValueError: If configuration is invalid
        """
        if not config.schema_file:
            raise ValueError("Schema file is required")
        if not Path(config.schema_file).exists():
            raise ValueError(f"Schema file {config.schema_file} does not exist")

        # Validate output file path
        if config.output_file:
            output_dir = Path(config.output_file).parent
            if not output_dir.exists():
                try:
                    output_dir.mkdir(parents=True, exist_ok=True)
                except OSError as e:
                    raise ValueError(f"Cannot create output directory {output_dir}: {e}")
