"""
Legacy bcrypt Verification
==========================
Read-only support for bcrypt hashes that predate Argon2id, so they can be
verified once and upgraded.
"""

import bcrypt
import structlog

from .hasher import BCRYPT_PREFIXES
from .kdf import Secret, to_bytes

logger = structlog.get_logger(__name__)


def is_bcrypt_hash(hash: str) -> bool:
    return bool(hash) and hash.startswith(BCRYPT_PREFIXES)


def verify_bcrypt(password: Secret, hash: str) -> bool:
    """Verify a bcrypt hash. Malformed hashes return False."""
    if not is_bcrypt_hash(hash):
        return False
    try:
        return bcrypt.checkpw(to_bytes(password), hash.encode("utf-8"))
    except ValueError as e:
        logger.debug("legacy_bcrypt_hash_rejected", error=str(e))
        return False
