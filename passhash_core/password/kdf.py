"""
Key Derivation
==============
Thin wrapper over the argon2-cffi Argon2id primitive.
"""

from typing import Union

from argon2.low_level import ARGON2_VERSION, Type, hash_secret_raw

from .params import Parameters

Secret = Union[str, bytes]


def to_bytes(password: Secret) -> bytes:
    if isinstance(password, str):
        return password.encode("utf-8")
    return bytes(password)


def derive_key(password: Secret, params: Parameters) -> bytes:
    """
    Derive a raw Argon2id key from ``password`` using ``params``.

    Raises argon2.exceptions.HashingError if the primitive rejects the
    parameters (for example zero iterations or too little memory per lane).
    """
    return hash_secret_raw(
        secret=to_bytes(password),
        salt=bytes(params.salt),
        time_cost=params.time_cost,
        memory_cost=params.memory_cost,
        parallelism=params.parallelism,
        hash_len=params.key_len,
        type=Type.ID,
        version=ARGON2_VERSION,
    )
