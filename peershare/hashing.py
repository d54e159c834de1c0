"""SHA-256 digests of data and files as lowercase hex strings."""

from __future__ import annotations

import hashlib
import os
from typing import Union

from peershare.config import CHUNK_SIZE

Data = Union[bytes, bytearray, memoryview, str]


def sha256(data: Data) -> str:
    """Hex digest of ``data``; text is hashed as its UTF-8 bytes."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).hexdigest()


def sha256_file(filepath: str | os.PathLike[str]) -> str:
    """Hex digest of a file's contents.

    Raises OSError when the file cannot be read.
    """
    digest = hashlib.sha256()
    with open(filepath, "rb") as handle:
        for block in iter(lambda: handle.read(CHUNK_SIZE), b""):
            digest.update(block)
    return digest.hexdigest()