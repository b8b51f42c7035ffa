"""Bucket-bound facade over the object operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, AsyncIterator

from objstore.common.config import get_settings
from objstore.infra.storage import objects
from objstore.infra.storage.client import (
    DeleteResult,
    HeadResult,
    ListEntry,
    S3Client,
    StorageError,
    StoredObject,
)
from objstore.infra.storage.s3_client import build_s3_client

if TYPE_CHECKING:
    from objstore.common.config import Settings


class ObjectStore:
    """Binds an ``S3Client`` to one bucket.

    Holds no state besides the client and the bucket name, so a single
    instance can be shared by concurrent tasks.
    """

    def __init__(self, client: S3Client, bucket: str) -> None:
        if not bucket:
            raise StorageError("bucket is required")
        self._client = client
        self._bucket = bucket

    @classmethod
    def from_settings(cls, settings: "Settings | None" = None) -> "ObjectStore":
        """Build a store from S3 settings.

        Raises:
            StorageError: If ``S3_BUCKET`` is not configured.
        """
        settings = settings or get_settings()
        if not settings.S3_BUCKET:
            raise StorageError("S3_BUCKET is not configured")
        return cls(build_s3_client(settings), settings.S3_BUCKET)

    @property
    def client(self) -> S3Client:
        return self._client

    @property
    def bucket(self) -> str:
        return self._bucket

    async def put(
        self,
        path: str,
        body: objects.Body,
        metadata: dict[str, str] | None = None,
        *,
        compress: bool = False,
    ) -> str:
        if compress:
            return await objects.put_object_with_compression(
                self._client, self._bucket, body, path, metadata
            )
        return await objects.put_object(
            self._client, self._bucket, body, path, metadata
        )

    async def head(self, path: str) -> HeadResult | None:
        return await objects.head_object(self._client, self._bucket, path)

    async def exists(self, path: str) -> bool:
        return await self.head(path) is not None

    async def get(self, path: str) -> StoredObject | None:
        return await objects.get_object(self._client, self._bucket, path)

    async def list_objects(self, prefix: str = "") -> list[ListEntry]:
        return await objects.list_objects(self._client, self._bucket, prefix)

    def iter_objects(
        self, prefix: str = "", page_size: int | None = None
    ) -> AsyncIterator[ListEntry]:
        return objects.iter_objects(self._client, self._bucket, prefix, page_size)

    async def delete(self, path: str) -> DeleteResult:
        return await objects.delete_object(self._client, self._bucket, path)
