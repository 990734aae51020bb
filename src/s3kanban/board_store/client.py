"""boto3 client construction for S3-compatible object stores."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import urlparse

import boto3
from botocore.config import Config

from s3kanban.config import ConfigError

if TYPE_CHECKING:
    from s3kanban.config import S3Config

logger = logging.getLogger(__name__)


def build_client_config(cfg: S3Config) -> Config:
    """Build the botocore client config for the given settings.

    Store calls get a bounded connect/read timeout and a single attempt, so
    transient failures surface to the caller instead of being retried.
    """
    options: dict[str, Any] = {
        "region_name": cfg.region,
        "connect_timeout": cfg.timeout,
        "read_timeout": cfg.timeout,
        "retries": {"total_max_attempts": 1, "mode": "standard"},
        "s3": {"addressing_style": "path" if cfg.use_path_style else "auto"},
    }
    if cfg.disable_checksum:
        # Many S3-compatible servers reject the default CRC32 trailers
        options["request_checksum_calculation"] = "when_required"
        options["response_checksum_validation"] = "when_required"
    return Config(**options)


def create_s3_client(cfg: S3Config) -> Any:
    """Create an S3 client for the configured endpoint.

    Compatible with MinIO and other S3-compatible services.

    Args:
        cfg: Object store settings.

    Returns:
        A boto3 S3 client.

    Raises:
        ConfigError: If the endpoint is missing or not an http(s) URL.
    """
    if not cfg.endpoint:
        raise ConfigError("S3 endpoint is required")

    parsed = urlparse(cfg.endpoint)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"Invalid S3 endpoint: {cfg.endpoint!r}")

    logger.info(
        "Creating S3 client (endpoint=%s, bucket=%s, region=%s, path_style=%s)",
        cfg.endpoint,
        cfg.bucket,
        cfg.region,
        cfg.use_path_style,
    )
    session = boto3.session.Session()
    return session.client(
        "s3",
        endpoint_url=cfg.endpoint,
        aws_access_key_id=cfg.access_key or None,
        aws_secret_access_key=cfg.secret_key or None,
        config=build_client_config(cfg),
    )
