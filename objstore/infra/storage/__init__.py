"""Object storage facade.

Async operations over an S3-compatible client (AWS S3, MinIO, ...), with
path-based Content-Type/Cache-Control inference, optional gzip compression,
and ``None`` for missing objects on head/get.
"""

from .client import (
    HEAD_ABSENCE_CODES,
    HEAD_NOT_FOUND,
    NO_SUCH_KEY,
    NOT_FOUND,
    DeleteResult,
    HeadResult,
    ListEntry,
    S3Client,
    StorageError,
    StoredObject,
    error_code,
)
from .content import cache_control_for, content_type_for
from .executor import execute, gzip_bytes
from .objects import (
    delete_object,
    get_object,
    head_object,
    iter_objects,
    list_objects,
    put_object,
    put_object_with_compression,
)
from .s3_client import build_s3_client
from .store import ObjectStore

__all__ = [
    "HEAD_ABSENCE_CODES",
    "HEAD_NOT_FOUND",
    "NOT_FOUND",
    "NO_SUCH_KEY",
    "DeleteResult",
    "HeadResult",
    "ListEntry",
    "ObjectStore",
    "S3Client",
    "StorageError",
    "StoredObject",
    "build_s3_client",
    "cache_control_for",
    "content_type_for",
    "delete_object",
    "error_code",
    "execute",
    "get_object",
    "gzip_bytes",
    "head_object",
    "iter_objects",
    "list_objects",
    "put_object",
    "put_object_with_compression",
]
