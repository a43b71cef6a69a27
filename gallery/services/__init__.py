"""Convenience exports for service layer."""
from .media_service import (
    create_audio,
    create_dance_video,
    create_painting,
    delete_record_or_404,
    get_record_or_404,
    list_records,
)
from .record_store import RecordStore, RecordStoreError, parse_record_key
from .upload_storage import StoredUpload, TransientStorage, UploadStorageError
from .upload_validator import (
    AUDIO_POLICY,
    IMAGE_POLICY,
    MediaKind,
    UnsupportedMediaTypeError,
    UploadPolicy,
    UploadRejectedError,
    UploadTooLargeError,
    policy_for,
    video_policy,
)

__all__ = [
    "create_audio",
    "create_dance_video",
    "create_painting",
    "delete_record_or_404",
    "get_record_or_404",
    "list_records",
    "RecordStore",
    "RecordStoreError",
    "parse_record_key",
    "StoredUpload",
    "TransientStorage",
    "UploadStorageError",
    "AUDIO_POLICY",
    "IMAGE_POLICY",
    "MediaKind",
    "UnsupportedMediaTypeError",
    "UploadPolicy",
    "UploadRejectedError",
    "UploadTooLargeError",
    "policy_for",
    "video_policy",
]
