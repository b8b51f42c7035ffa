"""Run blocking storage and codec calls off the event loop."""

from __future__ import annotations

import asyncio
import gzip
import logging
import time
from typing import Any, Callable, Mapping

from objstore.common.config import get_settings
from objstore.infra.observability.metrics import record_operation
from objstore.infra.storage.client import S3Client, error_code

logger = logging.getLogger("storage")


def _invoke(
    method: Callable[..., dict[str, Any]],
    params: Mapping[str, Any],
    finish: Callable[[dict[str, Any]], dict[str, Any]] | None,
) -> dict[str, Any]:
    result = method(**params)
    return finish(result) if finish is not None else result


async def execute(
    client: S3Client,
    operation: str,
    params: Mapping[str, Any],
    finish: Callable[[dict[str, Any]], dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Invoke ``operation`` on ``client`` with ``params`` as keyword arguments.

    The call runs in the default executor so the event loop stays free. The
    client's result is returned as is; any exception it raises propagates
    unchanged. No retries, no timeout.

    ``finish``, if given, runs on the result in the same worker thread and
    counts as part of the operation for metrics and error logging.
    """
    method = getattr(client, operation)
    started = time.perf_counter()
    outcome = "ok"
    try:
        return await asyncio.to_thread(_invoke, method, params, finish)
    except Exception as exc:
        outcome = "error"
        code = error_code(exc)
        logger.debug(
            "storage_operation_failed operation=%s code=%s",
            operation,
            code,
            extra={
                "extra": {
                    "operation": operation,
                    "bucket": params.get("Bucket"),
                    "key": params.get("Key"),
                    "code": code,
                }
            },
        )
        raise
    finally:
        duration = time.perf_counter() - started
        if get_settings().ENABLE_METRICS:
            record_operation(operation, outcome, duration)
        logger.debug(
            "storage_operation operation=%s outcome=%s duration_ms=%.2f",
            operation,
            outcome,
            duration * 1000,
        )


async def gzip_bytes(data: bytes) -> bytes:
    """Gzip the whole buffer in a worker thread.

    ``mtime`` is pinned so identical payloads compress to identical bytes.
    """
    return await asyncio.to_thread(gzip.compress, data, mtime=0)
