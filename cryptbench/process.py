"""One unit of benchmark work: copy, encrypt, hash, decrypt and verify a file."""

from __future__ import annotations

import os
from pathlib import Path

from .files import (
    copy_file,
    decrypt_file,
    encrypt_file,
    files_equal,
    hash_file,
    strings_equal,
)

ORIGINAL_NAME = "original.txt"
COPY_SUFFIX = ".txt"
ENCRYPTED_SUFFIX = ".sha"
DECRYPTED_SUFFIX = ".des"


def run_process(workdir: str | os.PathLike[str], index: int) -> tuple[bool, bool]:
    """Run the work for copy number ``index`` inside ``workdir``.

    Copies ``original.txt`` to ``<index>.txt``, encrypts it into
    ``<index>.sha``, hashes the copy twice, decrypts into ``<index>.des``
    and compares that with the original.

    Returns whether the two hashes matched and whether the decrypted file
    equals the original.
    """
    base = Path(workdir)
    original = base / ORIGINAL_NAME
    copy = base / f"{index}{COPY_SUFFIX}"
    encrypted = base / f"{index}{ENCRYPTED_SUFFIX}"
    decrypted = base / f"{index}{DECRYPTED_SUFFIX}"

    copy_file(original, copy)
    encrypt_file(copy, encrypted)

    first_hash = hash_file(copy)
    second_hash = hash_file(copy)
    hashes_match = strings_equal(first_hash, second_hash)

    decrypt_file(encrypted, decrypted)
    contents_match = files_equal(decrypted, original)

    return hashes_match, contents_match