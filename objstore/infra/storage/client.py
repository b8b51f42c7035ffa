"""Storage client protocol and data types.

This module defines the typed interface of the S3 operations the facade
relies on, the response shapes it hands back to callers, and the error codes
used to tell a missing object apart from a real failure.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Protocol, TypedDict

# Error codes reported for a missing object. A HEAD 404 has no error body, so
# botocore fills the code with the bare status ("404"); "NotFound" is what
# other S3 SDKs report for the same case. GET carries the XML code
# ("NoSuchKey").
NOT_FOUND = "NotFound"
HEAD_NOT_FOUND = "404"
HEAD_ABSENCE_CODES: frozenset[str] = frozenset({NOT_FOUND, HEAD_NOT_FOUND})
NO_SUCH_KEY = "NoSuchKey"


class StorageError(RuntimeError):
    """Raised when the storage layer is misconfigured."""


class HeadResult(TypedDict, total=False):
    """Metadata returned by a HEAD object request."""

    AcceptRanges: str
    LastModified: datetime
    ContentLength: int
    ETag: str
    CacheControl: str
    ContentEncoding: str
    ContentType: str
    Metadata: dict[str, str]


class StoredObject(HeadResult, total=False):
    """A fetched object: HEAD metadata plus the full payload."""

    Body: bytes


class ListEntry(TypedDict, total=False):
    """A single entry of a ListObjectsV2 page."""

    Key: str
    LastModified: datetime
    ETag: str
    Size: int
    StorageClass: str


class DeleteResult(TypedDict, total=False):
    """Raw result of a DeleteObject request."""

    DeleteMarker: bool
    VersionId: str
    RequestCharged: str


class S3Client(Protocol):
    """Protocol listing the S3 operations used by the facade.

    A boto3 ``s3`` client satisfies it. Every method takes keyword arguments
    in the S3 wire vocabulary (Bucket, Key, Body, ...) and returns the parsed
    response dict, or raises ``botocore.exceptions.ClientError``.
    """

    def put_object(self, **params: Any) -> dict[str, Any]: ...

    def head_object(self, **params: Any) -> dict[str, Any]: ...

    def get_object(self, **params: Any) -> dict[str, Any]: ...

    def list_objects_v2(self, **params: Any) -> dict[str, Any]: ...

    def delete_object(self, **params: Any) -> dict[str, Any]: ...


def error_code(exc: BaseException) -> str | None:
    """Return the service error code carried by ``exc``, if any.

    Understands botocore's ``ClientError`` (``response["Error"]["Code"]``) as
    well as any exception exposing a plain ``code`` attribute.
    """
    response = getattr(exc, "response", None)
    if isinstance(response, dict):
        code = response.get("Error", {}).get("Code")
        if code is not None:
            return str(code)
    code = getattr(exc, "code", None)
    return code if isinstance(code, str) else None
