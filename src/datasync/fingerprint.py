from __future__ import annotations

import hashlib
import os

from loguru import logger

from .config import FINGERPRINT_BUFFER_SIZE


class FingerprintError(OSError):
    """Raised when a file exists but its content cannot be read."""

    def __init__(self, path: str | os.PathLike[str], cause: OSError) -> None:
        super().__init__(f"I/O error reading file {os.fspath(path)}: {cause}")
        self.path = os.fspath(path)


def compute_md5(
    path: str | os.PathLike[str], buffer_size: int = FINGERPRINT_BUFFER_SIZE
) -> str | None:
    """Return the lowercase hex MD5 of a file, or None when there is nothing to hash.

    A missing file and an empty file both return None. Content is streamed in
    `buffer_size` chunks so memory use does not grow with the file.
    """
    try:
        handle = open(path, "rb")
    except FileNotFoundError:
        return None
    except OSError as exc:
        logger.error(f"Failed to open {path} for hashing: {exc}")
        raise FingerprintError(path, exc) from exc

    md5 = hashlib.md5()
    seen_bytes = 0
    with handle:
        while True:
            try:
                chunk = handle.read(buffer_size)
            except OSError as exc:
                logger.error(f"Failed to read {path} while hashing: {exc}")
                raise FingerprintError(path, exc) from exc
            if not chunk:
                break
            seen_bytes += len(chunk)
            md5.update(chunk)

    if seen_bytes == 0:
        return None
    digest = md5.hexdigest()
    logger.debug(f"md5: {path} -> {digest} ({seen_bytes} bytes)")
    return digest
