# backend/app/services/validator.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


MB = 1024 * 1024


@dataclass(frozen=True)
class UploadConfig:
    max_size: int
    allowed_types: tuple[str, ...]
    directory: str  # under the public root


UPLOAD_CONFIGS: dict[str, UploadConfig] = {
    "photo": UploadConfig(
        max_size=20 * MB,
        allowed_types=("image/jpeg", "image/jpg", "image/png", "image/webp", "image/avif"),
        directory="photos",
    ),
    "video": UploadConfig(
        max_size=500 * MB,
        allowed_types=("video/mp4", "video/mov", "video/avi", "video/mkv", "video/webm"),
        directory="videos",
    ),
    "audio": UploadConfig(
        max_size=50 * MB,
        allowed_types=("audio/mpeg", "audio/mp3", "audio/wav", "audio/flac", "audio/aac"),
        directory="audio",
    ),
    "document": UploadConfig(
        max_size=100 * MB,
        allowed_types=(
            "application/pdf",
            "application/msword",
            "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        ),
        directory="documents",
    ),
}


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    error: Optional[str] = None


def get_config(category: str) -> UploadConfig:
    try:
        return UPLOAD_CONFIGS[category]
    except KeyError:
        raise ValueError(f"Unknown upload category: {category}") from None


def validate_file(category: str, content_type: str | None, size: int) -> ValidationResult:
    """
    Size first, then the declared MIME type.

    The declared type is trusted as-is: no content sniffing.
    """
    config = get_config(category)

    if size > config.max_size:
        return ValidationResult(
            valid=False,
            error=f"File size exceeds maximum allowed size of {config.max_size // MB}MB",
        )

    if content_type not in config.allowed_types:
        return ValidationResult(
            valid=False,
            error=f"File type {content_type} is not allowed. Allowed types: {', '.join(config.allowed_types)}",
        )

    return ValidationResult(valid=True)
