"""In-memory S3 client for exercising the storage facade."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from botocore.exceptions import ClientError


def client_error(code: str, operation: str, message: str | None = None) -> ClientError:
    return ClientError(
        {"Error": {"Code": code, "Message": message or code}},
        operation,
    )


@dataclass
class MockS3Client:
    """Stores objects per bucket and reports S3's error codes for missing keys."""

    objects: dict[str, dict[str, Any]] = field(default_factory=dict)
    calls: list[tuple[str, dict[str, Any]]] = field(default_factory=list)

    def put_object(self, **params: Any) -> dict[str, Any]:
        self.calls.append(("put_object", params))
        body = bytes(params["Body"])
        etag = f'"{hashlib.md5(body).hexdigest()}"'
        self.objects[f"{params['Bucket']}/{params['Key']}"] = {
            "Body": body,
            "ETag": etag,
            "LastModified": datetime.now(timezone.utc),
            "ContentType": params.get("ContentType"),
            "CacheControl": params.get("CacheControl"),
            "ContentEncoding": params.get("ContentEncoding"),
            "Metadata": dict(params.get("Metadata") or {}),
        }
        return {"ETag": etag}

    def _lookup(self, params: dict[str, Any], code: str, operation: str) -> dict[str, Any]:
        key = f"{params['Bucket']}/{params['Key']}"
        if key not in self.objects:
            raise client_error(code, operation)
        return self.objects[key]

    def _head(self, obj: dict[str, Any]) -> dict[str, Any]:
        head = {
            "AcceptRanges": "bytes",
            "LastModified": obj["LastModified"],
            "ContentLength": len(obj["Body"]),
            "ETag": obj["ETag"],
            "CacheControl": obj["CacheControl"],
            "ContentType": obj["ContentType"],
            "Metadata": obj["Metadata"],
        }
        if obj["ContentEncoding"]:
            head["ContentEncoding"] = obj["ContentEncoding"]
        return head

    def head_object(self, **params: Any) -> dict[str, Any]:
        self.calls.append(("head_object", params))
        return self._head(self._lookup(params, "404", "HeadObject"))

    def get_object(self, **params: Any) -> dict[str, Any]:
        self.calls.append(("get_object", params))
        obj = self._lookup(params, "NoSuchKey", "GetObject")
        return {**self._head(obj), "Body": obj["Body"]}

    def list_objects_v2(self, **params: Any) -> dict[str, Any]:
        self.calls.append(("list_objects_v2", params))
        bucket_prefix = f"{params['Bucket']}/"
        keys = sorted(
            name[len(bucket_prefix):]
            for name in self.objects
            if name.startswith(bucket_prefix)
            and name[len(bucket_prefix):].startswith(params.get("Prefix", ""))
        )
        start = int(params.get("ContinuationToken", 0))
        max_keys = int(params.get("MaxKeys", 1000))
        page = keys[start:start + max_keys]
        response: dict[str, Any] = {
            "IsTruncated": start + max_keys < len(keys),
            "KeyCount": len(page),
        }
        if page:
            response["Contents"] = [
                {
                    "Key": key,
                    "LastModified": self.objects[bucket_prefix + key]["LastModified"],
                    "ETag": self.objects[bucket_prefix + key]["ETag"],
                    "Size": len(self.objects[bucket_prefix + key]["Body"]),
                    "StorageClass": "STANDARD",
                }
                for key in page
            ]
        if response["IsTruncated"]:
            response["NextContinuationToken"] = str(start + max_keys)
        return response

    def delete_object(self, **params: Any) -> dict[str, Any]:
        self.calls.append(("delete_object", params))
        self.objects.pop(f"{params['Bucket']}/{params['Key']}", None)
        return {}
