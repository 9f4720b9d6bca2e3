"""File operations: copy, encrypt, decrypt, compare, read and hash files."""

from __future__ import annotations

import os
from collections.abc import Iterator
from itertools import zip_longest

from .cipher import decrypt_line, encrypt_line
from .sha256 import sha256_hex

StrPath = str | os.PathLike[str]

# Latin-1 maps every byte to the code point of the same value, so the
# character cipher can be applied to raw bytes one-to-one.
_BYTE_CODEC = "latin-1"


def strings_equal(a: str, b: str) -> bool:
    """Return True when both strings have the same content and length."""
    return a == b


def read_file(path: StrPath) -> bytes:
    """Return the whole content of a file as bytes."""
    with open(path, "rb") as handle:
        return handle.read()


def copy_file(source: StrPath, destination: StrPath) -> None:
    """Write an exact byte-for-byte copy of ``source`` to ``destination``."""
    data = read_file(source)
    with open(destination, "wb") as handle:
        handle.write(data)


def _transform_file(source: StrPath, destination: StrPath, transform) -> None:
    text = read_file(source).decode(_BYTE_CODEC)
    with open(destination, "wb") as handle:
        handle.write(transform(text).encode(_BYTE_CODEC))


def encrypt_file(source: StrPath, destination: StrPath) -> None:
    """Encrypt every byte of ``source`` and write the result to ``destination``."""
    _transform_file(source, destination, encrypt_line)


def decrypt_file(source: StrPath, destination: StrPath) -> None:
    """Decrypt every byte of ``source`` and write the result to ``destination``."""
    _transform_file(source, destination, decrypt_line)


def _lines(path: StrPath) -> Iterator[bytes]:
    with open(path, "rb") as handle:
        for line in handle:
            yield line[:-1] if line.endswith(b"\n") else line


def files_equal(first: StrPath, second: StrPath) -> bool:
    """Compare two files line by line.

    A final line terminator does not count as an extra line. A file that
    cannot be opened makes the files unequal.
    """
    missing = object()
    try:
        return all(
            a is not missing and b is not missing and a == b
            for a, b in zip_longest(_lines(first), _lines(second), fillvalue=missing)
        )
    except OSError:
        return False


def hash_file(path: StrPath) -> str:
    """Return the SHA-256 hex digest of a file, or "" when the file is empty."""
    content = read_file(path)
    if not content:
        return ""
    return sha256_hex(content)