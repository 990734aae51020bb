"""Configuration loading for s3kanban.

The configuration is a YAML file (``config.yml`` by default) with an ``s3``
section describing the object store, plus optional ``server`` and ``logging``
sections. It is loaded once at process start.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG_FILE = "config.yml"
DEFAULT_BOARD_KEY = "board.json"
DEFAULT_TIMEOUT = 10.0

# Environment variable -> S3Config attribute
ENV_OVERRIDES = {
    "S3KANBAN_S3_ENDPOINT": "endpoint",
    "S3KANBAN_S3_BUCKET": "bucket",
    "S3KANBAN_S3_REGION": "region",
    "S3KANBAN_S3_ACCESS_KEY": "access_key",
    "S3KANBAN_S3_SECRET_KEY": "secret_key",
}


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""


@dataclass
class S3Config:
    """Object store connection settings.

    Works with AWS S3 and S3-compatible services such as MinIO.
    """

    endpoint: str
    bucket: str
    region: str = "us-east-1"
    access_key: str = ""
    secret_key: str = field(default="", repr=False)
    use_path_style: bool = False
    disable_checksum: bool = False
    key: str = DEFAULT_BOARD_KEY
    timeout: float = DEFAULT_TIMEOUT


@dataclass
class ServerConfig:
    """HTTP server settings."""

    host: str = "0.0.0.0"
    port: int = 8080


@dataclass
class LoggingConfig:
    """Logging settings. ``None`` defers to the environment defaults."""

    dir: str | None = None
    level: str | None = None


@dataclass
class AppConfig:
    """Top-level s3kanban configuration."""

    s3: S3Config
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AppConfig:
        """Create config from dictionary.

        Args:
            data: Configuration dictionary from YAML.

        Returns:
            Parsed configuration object.

        Raises:
            ConfigError: If required fields are missing or have the wrong type.
        """
        s3_data = data.get("s3") or {}
        if not isinstance(s3_data, dict):
            raise ConfigError("Section s3 must be a mapping")

        s3_data = dict(s3_data)
        for env_name, attr in ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value:
                s3_data[attr] = value

        missing = [f for f in ("endpoint", "bucket") if not s3_data.get(f)]
        if missing:
            raise ConfigError(f"Missing required fields: {', '.join(f's3.{m}' for m in missing)}")

        try:
            s3 = S3Config(
                endpoint=str(s3_data["endpoint"]),
                bucket=str(s3_data["bucket"]),
                region=str(s3_data.get("region") or "us-east-1"),
                access_key=str(s3_data.get("access_key") or ""),
                secret_key=str(s3_data.get("secret_key") or ""),
                use_path_style=bool(s3_data.get("use_path_style", False)),
                disable_checksum=bool(s3_data.get("disable_checksum", False)),
                key=str(s3_data.get("key") or DEFAULT_BOARD_KEY),
                timeout=float(s3_data.get("timeout", DEFAULT_TIMEOUT)),
            )

            server_data = data.get("server") or {}
            server = ServerConfig(
                host=str(server_data.get("host", "0.0.0.0")),
                port=int(server_data.get("port", 8080)),
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid configuration value: {e}") from e

        logging_data = data.get("logging") or {}
        log_config = LoggingConfig(
            dir=logging_data.get("dir"),
            level=logging_data.get("level"),
        )

        return cls(s3=s3, server=server, logging=log_config)


def load_config(config_path: Path | str) -> AppConfig:
    """Load s3kanban configuration from a YAML file.

    Args:
        config_path: Path to config.yml file.

    Returns:
        Parsed configuration object.

    Raises:
        ConfigError: If file doesn't exist or is invalid.
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a YAML mapping, got {type(data).__name__}")

    return AppConfig.from_dict(data)


def find_config(start_path: Path | str | None = None) -> Path:
    """Find the configuration file.

    ``S3KANBAN_CONFIG`` wins if set. Otherwise walks up the directory tree
    looking for config.yml.

    Args:
        start_path: Starting directory. Defaults to current directory.

    Returns:
        Path to config.yml file.

    Raises:
        ConfigError: If no config file is found.
    """
    env_path = os.environ.get("S3KANBAN_CONFIG")
    if env_path:
        return Path(env_path)

    start_path = Path.cwd() if start_path is None else Path(start_path)

    current = start_path.resolve()
    while True:
        config_path = current / DEFAULT_CONFIG_FILE
        if config_path.exists():
            return config_path
        if current == current.parent:
            break
        current = current.parent

    raise ConfigError(f"No {DEFAULT_CONFIG_FILE} found in {start_path} or any parent directory")
