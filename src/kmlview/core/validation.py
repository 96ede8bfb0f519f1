"""
File validation utilities for KML uploads.
"""

import logging
from pathlib import Path

from kmlview.core.errors import FileTooLargeError, ValidationError

logger = logging.getLogger(__name__)


def validate_file_extension(filename: str, allowed_extensions: tuple[str, ...]) -> str:
    """
    Validate that the file has an allowed extension.

    Args:
        filename: The name of the file to validate
        allowed_extensions: Tuple of allowed file extensions (with dots)

    Returns:
        The lowercase file extension (with dot)

    Raises:
        ValidationError: If the file extension is not allowed
    """
    extension = Path(filename).suffix.lower()

    if not extension:
        raise ValidationError("File has no extension", field="file")

    if extension not in allowed_extensions:
        raise ValidationError(
            f"File type '{extension}' not allowed. "
            f"Allowed types: {', '.join(allowed_extensions)}",
            field="file",
        )

    return extension


def validate_file_size(file_size: int, max_size: int) -> None:
    """
    Validate that the file size is within limits.

    Args:
        file_size: Size of the file in bytes
        max_size: Maximum allowed size in bytes

    Raises:
        ValidationError: If the file is empty
        FileTooLargeError: If the file exceeds the maximum size
    """
    if file_size == 0:
        raise ValidationError("File is empty", field="file")

    if file_size > max_size:
        max_mb = max_size / (1024 * 1024)
        actual_mb = file_size / (1024 * 1024)
        raise FileTooLargeError(
            f"File size ({actual_mb:.2f}MB) exceeds maximum allowed size ({max_mb:.2f}MB)",
            file_size=file_size,
            max_size=max_size,
        )


def decode_kml_text(content: bytes) -> str:
    """
    Decode uploaded bytes as text.

    A UTF-8 byte order mark is dropped and undecodable bytes are replaced,
    so the XML parser sees the document as a browser text read would.
    """
    return content.decode("utf-8-sig", errors="replace")
