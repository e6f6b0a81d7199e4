"""focalcrop configuration using pydantic-settings.

All configuration is strongly typed and supports environment variables
and .env files.
"""

from pathlib import Path
from typing import TypeGuard

from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid.

    This exception provides clear, actionable error messages when
    configuration values required by a specific operation are not set.

    Example:
        >>> Settings(_env_file=None).require_output_dir()  # doctest: +ELLIPSIS
        Traceback (most recent call last):
        ...
        ConfigError: Output directory not configured. Set it in .env file or
        OUTPUT_DIR environment variable.
    """

    def __init__(self, key_name: str, env_var: str) -> None:
        """Initialize configuration error.

        Args:
            key_name: Human-readable name of the missing key.
            env_var: Environment variable name to set.
        """
        self.key_name = key_name
        self.env_var = env_var
        message = (
            f"{key_name} not configured. "
            f"Set it in .env file or {env_var} environment variable."
        )
        super().__init__(message)


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # "console" or "json"

    # Focal point search
    SLICE_COUNT: int = 20  # Strips per axis
    COLOR_WEIGHT: float = 0.5  # 0 = entropy only, 1 = color only

    # Output
    JPEG_QUALITY: int = 85
    OUTPUT_DIR: str | None = None

    @staticmethod
    def _is_configured(value: str | None) -> TypeGuard[str]:
        return value is not None and value.strip() != ""

    def require_output_dir(self) -> Path:
        """Get the output directory, raising ConfigError if not set.

        Used when the CLI is asked to write a crop with a bare file name.

        Returns:
            The output directory as a Path.

        Raises:
            ConfigError: If OUTPUT_DIR is not configured.
        """
        if not self._is_configured(self.OUTPUT_DIR):
            raise ConfigError("Output directory", "OUTPUT_DIR")
        return Path(self.OUTPUT_DIR)


# Singleton instance for import convenience
settings = Settings()
