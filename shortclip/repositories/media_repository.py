import json
import logging
import uuid
from datetime import timedelta

from flask import current_app
from minio.error import S3Error

from shortclip.extensions.minio_client import get_minio_client


logger = logging.getLogger(__name__)

_MISSING_OBJECT_CODES = {"NoSuchKey", "NoSuchBucket", "NoSuchObject"}


def _bucket() -> str:
    return current_app.config["MINIO_BUCKET"]


def _public_read_policy(bucket: str) -> str:
    return json.dumps({
        "Version": "2012-10-17",
        "Statement": [
            {
                "Effect": "Allow",
                "Principal": {"AWS": ["*"]},
                "Action": ["s3:GetObject"],
                "Resource": [f"arn:aws:s3:::{bucket}/*"],
            }
        ],
    })


def ensure_bucket() -> bool:
    """Create the media bucket with a public-read policy if it is missing.

    Returns True when the bucket was created by this call.
    """
    minio = get_minio_client()
    bucket = _bucket()

    if minio.bucket_exists(bucket_name=bucket):
        logger.info("MinIO bucket '%s' exists", bucket)
        return False

    minio.make_bucket(bucket_name=bucket)
    minio.set_bucket_policy(bucket_name=bucket, policy=_public_read_policy(bucket))
    logger.info("MinIO bucket '%s' created", bucket)
    return True


def build_object_name(namespace: str, original_filename: str) -> str:
    _, dot, extension = (original_filename or "").rpartition(".")
    if dot and extension:
        return f"{namespace}/{uuid.uuid4()}.{extension}"
    return f"{namespace}/{uuid.uuid4()}"


def store(namespace, stream, length, content_type, original_filename) -> str:
    object_name = build_object_name(namespace, original_filename)
    upload_kwargs = {
        "bucket_name": _bucket(),
        "object_name": object_name,
        "data": stream,
        "length": length,
        "content_type": content_type,
    }
    if length == -1:
        upload_kwargs["part_size"] = 10 * 1024 * 1024

    get_minio_client().put_object(**upload_kwargs)
    return object_name


def presign(object_name: str, ttl_seconds=None) -> str:
    if ttl_seconds is None:
        ttl_seconds = current_app.config["PRESIGNED_URL_TTL_SECONDS"]

    return get_minio_client().presigned_get_object(
        bucket_name=_bucket(),
        object_name=object_name,
        expires=timedelta(seconds=ttl_seconds),
    )


def public_url(presigned_url: str) -> str:
    return presigned_url.split("?", 1)[0]


def object_exists(object_name: str) -> bool:
    try:
        get_minio_client().stat_object(
            bucket_name=_bucket(),
            object_name=object_name,
        )
    except S3Error as e:
        if e.code in _MISSING_OBJECT_CODES:
            return False
        raise
    return True
