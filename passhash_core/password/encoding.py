"""
PHC String Encoding
===================
Serialize Argon2id parameters, salt and key to a self-describing string,
and parse them back.

Format:
    $argon2id$v=<version>$m=<memory>,t=<time>,p=<parallelism>$<salt>$<key>

Salt and key are standard-alphabet base64 without padding. Decoding is
strict: only the canonical encoding of a byte string is accepted.
"""

import base64
import binascii
import string
from typing import Tuple

from ..config import ALGORITHM, ARGON2_VERSION
from ..exceptions import InvalidEncodedHash, VersionMismatch
from .params import Parameters

PREFIX = f"${ALGORITHM}$v="

_B64_ALPHABET = frozenset(string.ascii_letters + string.digits + "+/")
_ASCII_DIGITS = frozenset(string.digits)

# Numeric fields are 32-bit unsigned in the Argon2 reference implementation
UINT32_MAX = 2**32 - 1
_MAX_DIGITS = len(str(UINT32_MAX))


def _b64encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii").rstrip("=")


def _b64decode(segment: str, offset: int) -> bytes:
    if not segment:
        raise InvalidEncodedHash("empty base64 segment", offset)
    if not _B64_ALPHABET.issuperset(segment) or len(segment) % 4 == 1:
        raise InvalidEncodedHash("malformed base64 segment", offset)

    try:
        data = base64.b64decode(segment + "=" * (-len(segment) % 4), validate=True)
    except binascii.Error as e:
        raise InvalidEncodedHash("malformed base64 segment", offset) from e

    # Non-zero unused trailing bits decode fine but are not canonical
    if _b64encode(data) != segment:
        raise InvalidEncodedHash("non-canonical base64 segment", offset)
    return data


def encode(key: bytes, params: Parameters) -> str:
    """
    Format a derived key and its parameters as a PHC string.

    The salt comes from ``params``; ``params.key_len`` is implied by the
    key and is not written.
    """
    return (
        f"{PREFIX}{ARGON2_VERSION}"
        f"$m={params.memory_cost},t={params.time_cost},p={params.parallelism}"
        f"${_b64encode(params.salt)}${_b64encode(key)}"
    )


class _Scanner:
    """Left-to-right reader over the fixed PHC grammar."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def literal(self, token: str) -> None:
        if not self.text.startswith(token, self.pos):
            raise InvalidEncodedHash(f"expected {token!r}", self.pos)
        self.pos += len(token)

    def integer(self) -> int:
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] in _ASCII_DIGITS:
            self.pos += 1
        if self.pos == start:
            raise InvalidEncodedHash("expected an unsigned integer", start)
        if self.pos - start > _MAX_DIGITS:
            raise InvalidEncodedHash("integer field too long", start)
        value = int(self.text[start:self.pos])
        if value > UINT32_MAX:
            raise InvalidEncodedHash("integer field out of range", start)
        return value

    def segment(self) -> Tuple[str, int]:
        """Read up to the next ``$`` (exclusive)."""
        start = self.pos
        end = self.text.find("$", start)
        if end == -1:
            raise InvalidEncodedHash("missing '$' delimiter", len(self.text))
        self.pos = end
        return self.text[start:end], start

    def remainder(self) -> Tuple[str, int]:
        start = self.pos
        self.pos = len(self.text)
        return self.text[start:], start


def decode(encoded: str) -> Tuple[bytes, Parameters]:
    """
    Parse a PHC string produced by :func:`encode`.

    Args:
        encoded: The stored hash string

    Returns:
        Tuple of (key, parameters); ``parameters.key_len`` is ``len(key)``

    Raises:
        InvalidEncodedHash: If the string does not match the grammar
        VersionMismatch: If the string is well formed but uses another
            Argon2 version
    """
    if not isinstance(encoded, str):
        raise InvalidEncodedHash("encoded hash must be a string")

    scanner = _Scanner(encoded)
    scanner.literal(PREFIX)
    version = scanner.integer()
    scanner.literal("$m=")
    memory_cost = scanner.integer()
    scanner.literal(",t=")
    time_cost = scanner.integer()
    scanner.literal(",p=")
    parallelism = scanner.integer()
    scanner.literal("$")
    salt_text, salt_offset = scanner.segment()
    scanner.literal("$")
    key_text, key_offset = scanner.remainder()

    salt = _b64decode(salt_text, salt_offset)
    key = _b64decode(key_text, key_offset)

    if version != ARGON2_VERSION:
        raise VersionMismatch(expected=ARGON2_VERSION, found=version)

    return key, Parameters(
        salt=salt,
        time_cost=time_cost,
        memory_cost=memory_cost,
        parallelism=parallelism,
        key_len=len(key),
    )
