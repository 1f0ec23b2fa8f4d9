"""
Password Hashing Exceptions
===========================
Exception classes for encoding, decoding and salt generation.
"""

from typing import Optional


class PasswordHashError(Exception):
    """Base exception for all password hashing errors."""

    code = "PASSWORD_HASH_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidEncodedHash(PasswordHashError):
    """Raised when an encoded hash does not match the PHC grammar."""

    code = "INVALID_ENCODED_HASH"

    def __init__(self, message: str = "invalid encoded hash", position: Optional[int] = None):
        super().__init__(message)
        self.position = position

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} (at offset {self.position})"


class VersionMismatch(PasswordHashError):
    """Raised when a well-formed hash was produced by another Argon2 revision."""

    code = "VERSION_MISMATCH"

    def __init__(self, expected: int, found: int):
        super().__init__(f"version mismatch: expected v={expected}, found v={found}")
        self.expected = expected
        self.found = found


class RandomSourceError(PasswordHashError):
    """Raised when the secure entropy source cannot supply bytes."""

    code = "RANDOM_SOURCE_ERROR"
