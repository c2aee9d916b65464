"""S3-compatible object storage (AWS S3, MinIO, etc.)."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from filekeeper.infrastructure.exceptions import (
    StorageClientError,
    StorageNotFoundError,
    StorageServiceError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_NOT_FOUND_CODES = frozenset({"NoSuchKey", "404", "NotFound"})


class S3StorageService:
    """S3-compatible storage against a single bucket.

    Uses boto3 (sync) via asyncio.to_thread for async API. ClientError (the
    service answered and refused) maps to StorageServiceError; BotoCoreError
    (endpoint unreachable, credentials, timeouts) maps to StorageClientError.
    """

    backend_name = "s3"

    def __init__(
        self,
        bucket: str,
        region: str = "us-east-1",
        endpoint_url: str | None = None,
        access_key: str | None = None,
        secret_key: str | None = None,
        client: Any | None = None,
    ) -> None:
        """Initialize S3 client.

        Args:
            bucket: Bucket name.
            region: AWS region.
            endpoint_url: Custom endpoint (MinIO/localstack).
            access_key: Optional; uses env/IAM if not set.
            secret_key: Optional.
            client: Pre-built boto3 S3 client (tests).
        """
        self.bucket = bucket
        self.region = region
        self.endpoint_url = endpoint_url
        if client is not None:
            self._client = client
            return
        extra = {} if endpoint_url is None else {"endpoint_url": endpoint_url}
        self._client = boto3.client(
            "s3",
            region_name=region,
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
            **extra,
        )

    async def _call(self, operation: str, key: str, fn: Callable[[], T]) -> T:
        """Run a blocking boto3 call in a thread and translate its failures."""
        try:
            return await asyncio.to_thread(fn)
        except ClientError as e:
            code = str(e.response.get("Error", {}).get("Code", ""))
            if code in _NOT_FOUND_CODES:
                logger.warning("[S3] Object %s not found in bucket %s", key, self.bucket)
                raise StorageNotFoundError(key) from e
            logger.error(
                "[S3-SERVICE-ERROR] Failed to %s file %s in bucket %s",
                operation,
                key,
                self.bucket,
                exc_info=True,
            )
            raise StorageServiceError(key, operation, str(e)) from e
        except BotoCoreError as e:
            logger.error(
                "[S3-CLIENT-ERROR] Client error in connecting to S3 to %s file %s",
                operation,
                key,
                exc_info=True,
            )
            raise StorageClientError(key, operation, str(e)) from e

    async def save(self, key: str, content: bytes) -> None:
        """Put content under key (overwrites)."""
        logger.info("[S3] Saving file to S3 bucket: %s with key: %s", self.bucket, key)
        await self._call(
            "save",
            key,
            lambda: self._client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=content,
                ContentLength=len(content),
            ),
        )

    async def load(self, key: str) -> bytes:
        """Get full object content."""
        logger.info("[S3] Loading file %s from S3 bucket: %s", key, self.bucket)

        def _get() -> bytes:
            resp = self._client.get_object(Bucket=self.bucket, Key=key)
            return resp["Body"].read()

        return await self._call("load", key, _get)

    async def delete(self, key: str) -> None:
        """Delete object; head_object first so a missing key raises StorageNotFoundError."""
        logger.info("[S3] Deleting file %s from S3 bucket: %s", key, self.bucket)

        def _delete() -> None:
            self._client.head_object(Bucket=self.bucket, Key=key)
            self._client.delete_object(Bucket=self.bucket, Key=key)

        await self._call("delete", key, _delete)

    async def exists(self, key: str) -> bool:
        """Return True if object exists."""
        try:
            await self._call(
                "exists",
                key,
                lambda: self._client.head_object(Bucket=self.bucket, Key=key),
            )
        except StorageNotFoundError:
            return False
        return True
