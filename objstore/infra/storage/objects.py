"""Object operations over an S3-compatible client.

Each operation derives request metadata from the object path, optionally
transforms the payload, issues exactly one remote call through ``execute``
and normalizes the result. A missing object is reported as ``None`` by
``head_object`` and ``get_object``; every other error propagates unchanged.
"""

from __future__ import annotations

import logging
from typing import Any, AsyncIterator

from objstore.infra.storage.client import (
    HEAD_ABSENCE_CODES,
    NO_SUCH_KEY,
    DeleteResult,
    HeadResult,
    ListEntry,
    S3Client,
    StoredObject,
    error_code,
)
from objstore.infra.storage.content import cache_control_for, content_type_for
from objstore.infra.storage.executor import execute, gzip_bytes

logger = logging.getLogger("storage")

GZIP_ENCODING = "gzip"

Body = bytes | bytearray | memoryview


def _as_bytes(body: Body) -> bytes | bytearray:
    # memoryview length counts items, not bytes, and botocore does not accept it
    if isinstance(body, memoryview):
        return body.tobytes()
    return body


def _put_params(
    *,
    bucket: str,
    path: str,
    body: bytes | bytearray,
    metadata: dict[str, str] | None,
    content_encoding: str | None = None,
) -> dict[str, Any]:
    params: dict[str, Any] = {
        "Bucket": bucket,
        "Key": path,
        "Body": body,
        "ContentType": content_type_for(path),
        "CacheControl": cache_control_for(path),
    }
    # botocore rejects None for optional members, so absent means omitted
    if metadata is not None:
        params["Metadata"] = metadata
    if content_encoding:
        params["ContentEncoding"] = content_encoding
    return params


async def put_object(
    client: S3Client,
    bucket: str,
    body: Body,
    path: str,
    metadata: dict[str, str] | None = None,
) -> str:
    """Write ``body`` to ``bucket/path`` and return ``path``."""
    params = _put_params(
        bucket=bucket, path=path, body=_as_bytes(body), metadata=metadata
    )
    await execute(client, "put_object", params)
    return path


async def put_object_with_compression(
    client: S3Client,
    bucket: str,
    body: Body,
    path: str,
    metadata: dict[str, str] | None = None,
) -> str:
    """Write ``body`` gzipped when that makes it strictly smaller.

    The gzip form is sent with ``ContentEncoding: gzip`` only if it is
    shorter than the original; otherwise the original bytes are sent and no
    encoding is declared. Returns ``path``.
    """
    body = _as_bytes(body)
    compressed = await gzip_bytes(body)
    if len(compressed) < len(body):
        payload, encoding = compressed, GZIP_ENCODING
    else:
        payload, encoding = body, None

    params = _put_params(
        bucket=bucket,
        path=path,
        body=payload,
        metadata=metadata,
        content_encoding=encoding,
    )
    await execute(client, "put_object", params)
    return path


async def head_object(client: S3Client, bucket: str, path: str) -> HeadResult | None:
    """Fetch object metadata, or ``None`` if the object does not exist."""
    try:
        return await execute(client, "head_object", {"Bucket": bucket, "Key": path})
    except Exception as exc:
        if error_code(exc) not in HEAD_ABSENCE_CODES:
            raise
        logger.debug("storage_object_missing operation=head_object key=%s", path)
        return None


def _drain_body(response: dict[str, Any]) -> dict[str, Any]:
    body = response.get("Body")
    if body is None or not hasattr(body, "read"):
        return response
    try:
        return {**response, "Body": body.read()}
    finally:
        close = getattr(body, "close", None)
        if close is not None:
            close()


async def get_object(client: S3Client, bucket: str, path: str) -> StoredObject | None:
    """Fetch an object with its full payload, or ``None`` if it does not exist.

    A streaming ``Body`` is drained in the same worker thread as the request,
    so the returned ``Body`` is always ``bytes`` and the download is timed as
    part of the operation.
    """
    try:
        return await execute(
            client, "get_object", {"Bucket": bucket, "Key": path}, _drain_body
        )
    except Exception as exc:
        if error_code(exc) != NO_SUCH_KEY:
            raise
        logger.debug("storage_object_missing operation=get_object key=%s", path)
        return None


async def list_objects(client: S3Client, bucket: str, prefix: str) -> list[ListEntry]:
    """List the first page of objects under ``prefix``.

    Only one ListObjectsV2 page (up to 1000 keys) is returned; use
    ``iter_objects`` to walk every page.
    """
    response = await execute(
        client, "list_objects_v2", {"Bucket": bucket, "Prefix": prefix}
    )
    return list(response.get("Contents", []))


async def iter_objects(
    client: S3Client,
    bucket: str,
    prefix: str,
    page_size: int | None = None,
) -> AsyncIterator[ListEntry]:
    """Yield every object under ``prefix``, following continuation tokens.

    Pages are fetched lazily as the iterator advances. Each call starts from
    the first page.
    """
    params: dict[str, Any] = {"Bucket": bucket, "Prefix": prefix}
    if page_size is not None:
        params["MaxKeys"] = int(page_size)

    while True:
        response = await execute(client, "list_objects_v2", params)
        for entry in response.get("Contents", []):
            yield entry
        token = response.get("NextContinuationToken")
        if not response.get("IsTruncated") or not token:
            return
        params = {**params, "ContinuationToken": token}


async def delete_object(client: S3Client, bucket: str, path: str) -> DeleteResult:
    """Delete ``bucket/path`` and return the raw service result."""
    return await execute(client, "delete_object", {"Bucket": bucket, "Key": path})
