"""
Password Hashing
================
Argon2id password hashing with PHC string encoding.

- Memory-hard: resistant to GPU/ASIC attacks
- Self-describing: the stored string carries version, costs and salt
- Strict decoding: non-canonical strings are rejected
- Constant-time key comparison on verify
"""

from .params import Parameters
from .salt import generate_salt
from .kdf import derive_key
from .encoding import encode, decode
from .hasher import Argon2idHasher, get_cached_hasher
from .sync_ops import hash_password_sync, verify_password_sync
from .async_ops import hash_password, verify_password, verify_and_upgrade
from .utils import needs_rehash
from .legacy import verify_bcrypt

__all__ = [
    # Primitives
    "Parameters",
    "generate_salt",
    "derive_key",
    # Encoding
    "encode",
    "decode",
    # Hasher
    "Argon2idHasher",
    "get_cached_hasher",
    # Sync Operations
    "hash_password_sync",
    "verify_password_sync",
    # Async Operations
    "hash_password",
    "verify_password",
    "verify_and_upgrade",
    # Utils
    "needs_rehash",
    "verify_bcrypt",
]
