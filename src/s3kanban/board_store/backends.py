"""Key-value blob backends the Board Store persists into."""

from __future__ import annotations

import logging
import threading
from typing import Any, Protocol

from botocore.exceptions import BotoCoreError, ClientError

from s3kanban.board_store.exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)

# Error codes S3 (and compatible servers) use for an absent object
MISSING_OBJECT_CODES = frozenset({"NoSuchKey", "NotFound", "404"})
MISSING_BUCKET_CODES = frozenset({"NoSuchBucket", "NotFound", "404"})


def _error_code(error: ClientError) -> str:
    return str(error.response.get("Error", {}).get("Code", ""))


class BlobBackend(Protocol):
    """Interface for a key-value blob backend."""

    def get(self, key: str) -> bytes | None:
        """Return the blob stored under key, or None when absent."""
        ...

    def put(self, key: str, data: bytes) -> None:
        """Overwrite the blob stored under key."""
        ...

    def check(self) -> None:
        """Verify the backend is reachable and ready."""
        ...


class S3Backend:
    """Blob backend on an S3 bucket.

    Every failure other than "object absent" is raised as
    StorageUnavailableError; nothing is retried here.
    """

    def __init__(self, client: Any, bucket: str) -> None:
        """Initialize S3 backend.

        Args:
            client: A boto3 S3 client
            bucket: Bucket holding the board document
        """
        self.client = client
        self.bucket = bucket

    def get(self, key: str) -> bytes | None:
        try:
            response = self.client.get_object(Bucket=self.bucket, Key=key)
            body = response["Body"]
            try:
                return bytes(body.read())
            finally:
                body.close()
        except ClientError as e:
            if _error_code(e) in MISSING_OBJECT_CODES:
                return None
            raise StorageUnavailableError(
                f"Error loading s3://{self.bucket}/{key}: {e}"
            ) from e
        except BotoCoreError as e:
            raise StorageUnavailableError(
                f"Error loading s3://{self.bucket}/{key}: {e}"
            ) from e

    def put(self, key: str, data: bytes) -> None:
        try:
            self.client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=data,
                ContentType="application/json",
            )
        except (ClientError, BotoCoreError) as e:
            raise StorageUnavailableError(
                f"Error saving s3://{self.bucket}/{key}: {e}"
            ) from e

    def check(self) -> None:
        try:
            self.client.head_bucket(Bucket=self.bucket)
        except ClientError as e:
            if _error_code(e) in MISSING_BUCKET_CODES:
                raise StorageUnavailableError(f"Bucket {self.bucket} does not exist") from e
            raise StorageUnavailableError(f"Error checking bucket {self.bucket}: {e}") from e
        except BotoCoreError as e:
            raise StorageUnavailableError(f"Error checking bucket {self.bucket}: {e}") from e


class MemoryBackend:
    """In-process blob backend, for tests and local runs without S3."""

    def __init__(self, blobs: dict[str, bytes] | None = None) -> None:
        self.blobs: dict[str, bytes] = dict(blobs or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> bytes | None:
        with self._lock:
            return self.blobs.get(key)

    def put(self, key: str, data: bytes) -> None:
        with self._lock:
            self.blobs[key] = bytes(data)

    def check(self) -> None:
        pass
