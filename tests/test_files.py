import pytest

from cryptbench.files import (
    copy_file,
    decrypt_file,
    encrypt_file,
    files_equal,
    hash_file,
    read_file,
    strings_equal,
)
from cryptbench.sha256 import sha256_hex

MESSAGE = b"PRUEBA DE ARCHIVO CON CANCION DE BISFP 8038\nsegunda linea 12345\n"


@pytest.fixture
def workspace(tmp_path):
    (tmp_path / "origin.txt").write_bytes(MESSAGE)
    return tmp_path


def test_strings_equal():
    assert strings_equal("abc", "abc") is True
    assert strings_equal("abc", "abd") is False
    assert strings_equal("abc", "abcd") is False


def test_copy_is_exact(workspace):
    copy_file(workspace / "origin.txt", workspace / "copia1.txt")
    assert read_file(workspace / "copia1.txt") == MESSAGE


def test_copy_binary_bytes(tmp_path):
    data = bytes(range(256))
    (tmp_path / "a.bin").write_bytes(data)
    copy_file(tmp_path / "a.bin", tmp_path / "b.bin")
    assert (tmp_path / "b.bin").read_bytes() == data


def test_copy_missing_source_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        copy_file(tmp_path / "missing.txt", tmp_path / "out.txt")


def test_archive_workflow(workspace):
    origin = workspace / "origin.txt"
    copy = workspace / "copia1.txt"
    encrypted = workspace / "copia1_encriptada.txt"
    decrypted = workspace / "d_copia1.txt"

    copy_file(origin, copy)
    encrypt_file(copy, encrypted)
    decrypt_file(encrypted, decrypted)

    assert read_file(encrypted).startswith(b"SUXHED GH DUFKLYR FRQ FDQFLRQ GH ELVIS 1961")
    origin_hash = hash_file(origin)
    encrypted_hash = hash_file(encrypted)
    assert strings_equal(origin_hash, encrypted_hash) is False
    assert files_equal(origin, decrypted) is True
    assert read_file(decrypted) == MESSAGE


def test_encrypt_file_pinned(tmp_path):
    (tmp_path / "in.txt").write_bytes(b"ABC xyz 0189")
    encrypt_file(tmp_path / "in.txt", tmp_path / "out.txt")
    assert (tmp_path / "out.txt").read_bytes() == b"DEF abc 9810"


def test_non_ascii_bytes_pass_through(tmp_path):
    data = b"\xe9\xff\x00!"
    (tmp_path / "in.bin").write_bytes(data)
    encrypt_file(tmp_path / "in.bin", tmp_path / "enc.bin")
    assert (tmp_path / "enc.bin").read_bytes() == data


def test_decrypt_undoes_encrypt_for_all_bytes(tmp_path):
    data = bytes(range(256))
    (tmp_path / "in.bin").write_bytes(data)
    encrypt_file(tmp_path / "in.bin", tmp_path / "enc.bin")
    decrypt_file(tmp_path / "enc.bin", tmp_path / "dec.bin")
    assert (tmp_path / "dec.bin").read_bytes() == data


def test_files_equal_ignores_final_newline(tmp_path):
    (tmp_path / "a").write_bytes(b"a\nb\n")
    (tmp_path / "b").write_bytes(b"a\nb")
    assert files_equal(tmp_path / "a", tmp_path / "b") is True


def test_files_equal_detects_differences(tmp_path):
    (tmp_path / "a").write_bytes(b"a\nb\n")
    (tmp_path / "b").write_bytes(b"a\nc\n")
    (tmp_path / "c").write_bytes(b"a\nb\nc\n")
    assert files_equal(tmp_path / "a", tmp_path / "b") is False
    assert files_equal(tmp_path / "a", tmp_path / "c") is False
    assert files_equal(tmp_path / "c", tmp_path / "a") is False


def test_files_equal_missing_file_is_false(tmp_path):
    (tmp_path / "a").write_bytes(b"x")
    assert files_equal(tmp_path / "a", tmp_path / "missing") is False
    assert files_equal(tmp_path / "missing", tmp_path / "a") is False


def test_hash_file_known_vector(tmp_path):
    (tmp_path / "abc.txt").write_bytes(b"abc")
    assert hash_file(tmp_path / "abc.txt") == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_hash_file_matches_content_hash(workspace):
    assert hash_file(workspace / "origin.txt") == sha256_hex(MESSAGE)


def test_hash_empty_file_is_empty_string(tmp_path):
    (tmp_path / "empty.txt").write_bytes(b"")
    assert hash_file(tmp_path / "empty.txt") == ""


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "nothing.txt")