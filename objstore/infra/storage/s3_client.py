"""boto3 client construction for S3-compatible services.

Works with AWS S3, MinIO, and other S3-compatible object storage services.

Dependencies:
    - boto3
    - botocore
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import boto3
from botocore.config import Config

from objstore.common.config import get_settings
from objstore.infra.storage.client import S3Client

if TYPE_CHECKING:
    from objstore.common.config import Settings


def build_s3_client(settings: "Settings | None" = None) -> S3Client:
    """Create a boto3 S3 client from settings.

    Args:
        settings: Settings carrying the S3 configuration. Defaults to the
            cached environment settings.

    Returns:
        A boto3 ``s3`` client, which satisfies ``S3Client``.
    """
    settings = settings or get_settings()
    config = Config(s3={"addressing_style": settings.S3_ADDRESSING_STYLE})

    return boto3.client(
        "s3",
        endpoint_url=settings.S3_ENDPOINT_URL,
        region_name=settings.S3_REGION,
        aws_access_key_id=settings.S3_ACCESS_KEY_ID,
        aws_secret_access_key=settings.S3_SECRET_ACCESS_KEY,
        use_ssl=bool(settings.S3_USE_SSL),
        config=config,
    )
