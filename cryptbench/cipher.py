"""Character cipher: Caesar shift of 3 for ASCII letters, mirrored digits."""

import string

_SHIFT = 3


def _shifted(alphabet: str, shift: int) -> str:
    shift %= len(alphabet)
    return alphabet[shift:] + alphabet[:shift]


_LETTERS = string.ascii_uppercase + string.ascii_lowercase
_ENCRYPTED_LETTERS = _shifted(string.ascii_uppercase, _SHIFT) + _shifted(
    string.ascii_lowercase, _SHIFT
)
_MIRRORED_DIGITS = string.digits[::-1]

_ENCRYPT_LETTERS = str.maketrans(_LETTERS, _ENCRYPTED_LETTERS)
_DECRYPT_LETTERS = str.maketrans(_ENCRYPTED_LETTERS, _LETTERS)
_MIRROR_DIGITS = str.maketrans(string.digits, _MIRRORED_DIGITS)

_ENCRYPT_TABLE = {**_ENCRYPT_LETTERS, **_MIRROR_DIGITS}
_DECRYPT_TABLE = {**_DECRYPT_LETTERS, **_MIRROR_DIGITS}


def _single(ch: str) -> str:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ch


def encrypt_letter(ch: str) -> str:
    """Shift an ASCII letter three places forward; other characters pass through."""
    return _single(ch).translate(_ENCRYPT_LETTERS)


def encrypt_digit(ch: str) -> str:
    """Mirror a decimal digit about the middle ('0' <-> '9'); others pass through."""
    return _single(ch).translate(_MIRROR_DIGITS)


def encrypt_char(ch: str) -> str:
    """Encrypt one character, choosing the digit or letter rule."""
    return _single(ch).translate(_ENCRYPT_TABLE)


def encrypt_line(line: str) -> str:
    """Encrypt every character of a string."""
    return line.translate(_ENCRYPT_TABLE)


def decrypt_letter(ch: str) -> str:
    """Shift an ASCII letter three places back; other characters pass through."""
    return _single(ch).translate(_DECRYPT_LETTERS)


def decrypt_digit(ch: str) -> str:
    """Undo the digit mirroring (the mirror is its own inverse)."""
    return _single(ch).translate(_MIRROR_DIGITS)


def decrypt_char(ch: str) -> str:
    """Decrypt one character, choosing the digit or letter rule."""
    return _single(ch).translate(_DECRYPT_TABLE)


def decrypt_line(line: str) -> str:
    """Decrypt every character of a string."""
    return line.translate(_DECRYPT_TABLE)