from flask import current_app

from shortclip.repositories import media_repository
from shortclip.services.errors import MediaStorageError, NotFoundError


VIDEO_NAMESPACE = "videos"
THUMBNAIL_NAMESPACE = "thumbnails"


def _get_stream_and_length(file_storage):
    stream = getattr(file_storage, "stream", file_storage)
    try:
        stream.seek(0, 2)
        length = stream.tell()
        stream.seek(0)
        return stream, length
    except Exception:
        try:
            stream.seek(0)
        except Exception:
            pass
        return stream, -1


def _validate_upload(file_storage, missing_message, mime_prefix, type_message):
    if file_storage is None or not getattr(file_storage, "filename", ""):
        raise ValueError(missing_message)

    mimetype = getattr(file_storage, "mimetype", None) or ""
    if not mimetype.startswith(mime_prefix):
        raise ValueError(type_message)

    stream, length = _get_stream_and_length(file_storage)
    if length > current_app.config["MAX_UPLOAD_BYTES"]:
        raise ValueError("File too large")
    return stream, length, mimetype


def _upload(file_storage, namespace, stream, length, mimetype):
    try:
        object_name = media_repository.store(
            namespace=namespace,
            stream=stream,
            length=length,
            content_type=mimetype,
            original_filename=file_storage.filename,
        )
        url = media_repository.public_url(media_repository.presign(object_name))
    except Exception as e:
        raise MediaStorageError("Media storage is unavailable") from e
    return object_name, url


def upload_video(file_storage):
    stream, length, mimetype = _validate_upload(
        file_storage,
        "No video file provided",
        "video/",
        "Only video files are allowed",
    )
    object_name, url = _upload(file_storage, VIDEO_NAMESPACE, stream, length, mimetype)
    return {"videoUrl": url, "fileName": object_name}


def upload_thumbnail(file_storage):
    stream, length, mimetype = _validate_upload(
        file_storage,
        "No thumbnail file provided",
        "image/",
        "Only image files are allowed",
    )
    object_name, url = _upload(
        file_storage, THUMBNAIL_NAMESPACE, stream, length, mimetype
    )
    return {"thumbnailUrl": url, "fileName": object_name}


def get_video_url(file_name: str):
    if not media_repository.object_exists(file_name):
        raise NotFoundError("Video not found")
    return {"url": media_repository.presign(file_name)}
