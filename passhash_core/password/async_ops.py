"""
Async Password Hashing
======================
Async-safe password hashing and verification using Argon2id.

Each call runs in the default thread pool executor so the memory-hard
derivation does not block the event loop.
"""

import asyncio
from typing import Optional, Tuple

import structlog

from .hasher import get_cached_hasher
from .kdf import Secret
from .legacy import is_bcrypt_hash, verify_bcrypt
from .utils import needs_rehash

logger = structlog.get_logger(__name__)


async def hash_password(password: Secret) -> str:
    """
    Hash a password using Argon2id.

    Args:
        password: Plain text password to hash

    Returns:
        Argon2id hash string (includes algorithm, parameters, salt, and hash)

    Raises:
        RandomSourceError: If no salt could be generated
    """
    hasher = get_cached_hasher()
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, hasher.hash, password)


async def verify_password(password: Secret, hash: str) -> bool:
    """
    Verify a password against an Argon2id hash.

    Args:
        password: Plain text password to verify
        hash: Encoded Argon2id hash

    Returns:
        True if password matches, False otherwise (including malformed hashes)
    """
    hasher = get_cached_hasher()
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, hasher.verify, password, hash)


async def verify_and_upgrade(
    password: Secret,
    hash: str,
) -> Tuple[bool, Optional[str]]:
    """
    Verify password and return new hash if upgrade is needed.

    This is the recommended function for login flows. Unlike
    :func:`verify_password` it also accepts legacy bcrypt hashes.

    Args:
        password: Plain text password
        hash: Existing hash (Argon2id or bcrypt)

    Returns:
        Tuple of (is_valid, new_hash_or_none)

    Example:
        >>> valid, new_hash = await verify_and_upgrade(password, stored_hash)
        >>> if valid and new_hash:
        >>>     await update_user_password_hash(user_id, new_hash)
    """
    loop = asyncio.get_running_loop()

    if is_bcrypt_hash(hash):
        is_valid = await loop.run_in_executor(None, verify_bcrypt, password, hash)
        if is_valid:
            logger.info("legacy_bcrypt_hash_verified")
    else:
        is_valid = await verify_password(password, hash)

    if not is_valid:
        return False, None

    if needs_rehash(hash):
        new_hash = await hash_password(password)
        logger.info("password_hash_upgraded")
        return True, new_hash

    return True, None
