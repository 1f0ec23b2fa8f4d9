"""
Passhash Core Library
=====================
Argon2id password hashing with PHC-style encoded strings.
"""

__version__ = "0.1.0"

# Configuration
from passhash_core.config import ALGORITHM, ARGON2_VERSION, HashConfig

# Errors
from passhash_core.exceptions import (
    PasswordHashError,
    InvalidEncodedHash,
    VersionMismatch,
    RandomSourceError,
)

# Password Hashing
from passhash_core.password import (
    Parameters,
    generate_salt,
    derive_key,
    encode,
    decode,
    Argon2idHasher,
    get_cached_hasher,
    hash_password,
    verify_password,
    verify_and_upgrade,
    needs_rehash,
    hash_password_sync,
    verify_password_sync,
)

# Logging
from passhash_core.logging_setup import setup_logging, get_logger

__all__ = [
    # Configuration
    "ALGORITHM",
    "ARGON2_VERSION",
    "HashConfig",
    # Errors
    "PasswordHashError",
    "InvalidEncodedHash",
    "VersionMismatch",
    "RandomSourceError",
    # Password Hashing
    "Parameters",
    "generate_salt",
    "derive_key",
    "encode",
    "decode",
    "Argon2idHasher",
    "get_cached_hasher",
    "hash_password",
    "verify_password",
    "verify_and_upgrade",
    "needs_rehash",
    "hash_password_sync",
    "verify_password_sync",
    # Logging
    "setup_logging",
    "get_logger",
]
