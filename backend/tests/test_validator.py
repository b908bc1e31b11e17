import pytest

from app.services.validator import MB, UPLOAD_CONFIGS, validate_file


@pytest.mark.parametrize(
    "category,content_type,limit_mb",
    [
        ("photo", "image/jpeg", 20),
        ("video", "video/mp4", 500),
        ("audio", "audio/mpeg", 50),
        ("document", "application/pdf", 100),
    ],
)
def test_size_limit_boundary(category, content_type, limit_mb):
    assert UPLOAD_CONFIGS[category].max_size == limit_mb * MB

    at_limit = validate_file(category, content_type, limit_mb * MB)
    assert at_limit.valid
    assert at_limit.error is None

    over = validate_file(category, content_type, limit_mb * MB + 1)
    assert not over.valid
    assert over.error == f"File size exceeds maximum allowed size of {limit_mb}MB"


def test_disallowed_type_lists_allowed_types():
    result = validate_file("audio", "audio/ogg", 10)
    assert not result.valid
    assert "File type audio/ogg is not allowed" in result.error
    assert "audio/mpeg, audio/mp3, audio/wav, audio/flac, audio/aac" in result.error


def test_declared_type_is_trusted():
    # No sniffing: whatever the client claims is what gets checked
    assert validate_file("photo", "image/png", 3).valid


def test_size_checked_before_type():
    result = validate_file("photo", "text/plain", 21 * MB)
    assert "20MB" in result.error


def test_unknown_category():
    with pytest.raises(ValueError):
        validate_file("midi", "audio/midi", 1)
