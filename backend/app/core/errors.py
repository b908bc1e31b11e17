# backend/app/core/errors.py
from __future__ import annotations

from fastapi import status


class AppError(Exception):
    """Base error translated into a `{success: false, error}` response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str, status_code: int | None = None):
        super().__init__(detail)
        self.detail = detail
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    """Client-caused: missing params, bad metadata, rejected file."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class StorageError(AppError):
    """Catalog file or upload directory could not be written."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
