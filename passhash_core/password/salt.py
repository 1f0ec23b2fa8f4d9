"""
Salt Generation
===============
Cryptographically secure random salts.
"""

import secrets

import structlog

from ..exceptions import RandomSourceError

logger = structlog.get_logger(__name__)


def generate_salt(length: int) -> bytes:
    """
    Generate ``length`` random bytes from the OS entropy source.

    Raises:
        ValueError: If length is not positive
        RandomSourceError: If the entropy source fails
    """
    if length <= 0:
        raise ValueError("Salt length must be positive")

    try:
        return secrets.token_bytes(length)
    except OSError as e:
        logger.error("password_salt_generation_failed", length=length, error=str(e))
        raise RandomSourceError("secure random source unavailable") from e
