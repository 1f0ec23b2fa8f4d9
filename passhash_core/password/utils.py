"""
Password Utilities
==================
Utility functions for password management.
"""

from .hasher import get_cached_hasher


def needs_rehash(hash: str) -> bool:
    """
    Check if a hash needs to be upgraded.

    Returns True if:
    - Hash is bcrypt (should migrate to Argon2id)
    - Hash is not a decodable Argon2id string
    - Hash uses parameters other than the configured ones

    Args:
        hash: The hash to check

    Returns:
        True if the hash should be re-computed
    """
    return get_cached_hasher().check_needs_rehash(hash)
