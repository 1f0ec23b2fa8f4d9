"""
Argon2 Parameters
=================
Value object describing how a key was (or will be) derived.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Parameters:
    """
    Salt and cost parameters for one Argon2id derivation.

    Attributes:
        salt: Opaque salt bytes
        time_cost: Number of iterations
        memory_cost: Working memory in KiB
        parallelism: Number of lanes
        key_len: Derived key length in bytes
    """
    salt: bytes
    time_cost: int
    memory_cost: int
    parallelism: int
    key_len: int

    def __post_init__(self):
        if not isinstance(self.salt, (bytes, bytearray)):
            raise TypeError("salt must be bytes")
        for name in ("time_cost", "memory_cost", "parallelism", "key_len"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
