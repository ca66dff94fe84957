from collections import namedtuple
from threading import Lock

import urllib3
from flask import current_app
from minio import Minio


MinioSettings = namedtuple(
    "MinioSettings",
    [
        "endpoint",
        "access_key",
        "secret_key",
        "secure",
        "connect_timeout",
        "read_timeout",
        "pool_maxsize",
    ],
)

_minio_client = None
_minio_settings = None
_minio_lock = Lock()


def current_settings() -> MinioSettings:
    config = current_app.config
    return MinioSettings(
        endpoint=f"{config['MINIO_ENDPOINT']}:{config['MINIO_PORT']}",
        access_key=config["MINIO_ACCESS_KEY"],
        secret_key=config["MINIO_SECRET_KEY"],
        secure=config["MINIO_SECURE"],
        connect_timeout=config["MINIO_CONNECT_TIMEOUT"],
        read_timeout=config["MINIO_READ_TIMEOUT"],
        pool_maxsize=config.get("MINIO_HTTP_POOL_MAXSIZE", 32),
    )


def build_client(settings: MinioSettings) -> Minio:
    # Failed calls surface to the request instead of being retried.
    http_client = urllib3.PoolManager(
        timeout=urllib3.Timeout(
            connect=settings.connect_timeout,
            read=settings.read_timeout,
        ),
        retries=False,
        maxsize=settings.pool_maxsize,
    )
    return Minio(
        settings.endpoint,
        access_key=settings.access_key,
        secret_key=settings.secret_key,
        secure=settings.secure,
        http_client=http_client,
    )


def get_minio_client():
    """Return the shared client, rebuilding it when the app's MinIO settings change."""
    global _minio_client, _minio_settings

    settings = current_settings()
    with _minio_lock:
        if _minio_client is None or _minio_settings != settings:
            _minio_client = build_client(settings)
            _minio_settings = settings
        return _minio_client
