"""
Checksum utilities for verifying transferred files.
"""

import hashlib

from .constants import TRANSFER_CHUNK_SIZE


def compute_md5(file_path: str, chunk_size: int = TRANSFER_CHUNK_SIZE) -> str:
    """
    Compute the MD5 hex digest of a local file.

    The file is read in chunks so large artifacts are never loaded into
    memory at once.

    Args:
        file_path: Path to the file to hash
        chunk_size: Number of bytes read per iteration

    Returns:
        Lowercase hexadecimal MD5 digest

    Example:
        >>> compute_md5("/tmp/empty.bin")
        'd41d8cd98f00b204e9800998ecf8427e'
    """
    digest = hashlib.md5()  # nosec B324 - matches the checksum the server reports
    with open(file_path, "rb") as f:
        for chunk in iter(lambda: f.read(chunk_size), b""):
            digest.update(chunk)
    return digest.hexdigest()


def checksums_match(expected: str, actual: str) -> bool:
    """Compare two hex digests case-insensitively."""
    return expected.strip().lower() == actual.strip().lower()


__all__ = ["compute_md5", "checksums_match"]
