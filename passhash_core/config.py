"""
Password Hashing Configuration
==============================
Argon2id cost parameters, overridable from the environment.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from argon2.low_level import ARGON2_VERSION


def available_cpus() -> int:
    """CPUs this process may run on (affinity-aware where the platform supports it)."""
    if hasattr(os, "sched_getaffinity"):
        return len(os.sched_getaffinity(0)) or 1
    return os.cpu_count() or 1


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return int(value)


# Fixed algorithm identity. The decoder compares against these.
ALGORITHM = "argon2id"

DEFAULT_TIME_COST = 1
DEFAULT_MEMORY_COST = 64 * 1024  # KiB
DEFAULT_KEY_LEN = 32
DEFAULT_SALT_LEN = 16

TIME_COST = _env_int("PASSHASH_TIME_COST", DEFAULT_TIME_COST)
MEMORY_COST = _env_int("PASSHASH_MEMORY_COST", DEFAULT_MEMORY_COST)
PARALLELISM = _env_int("PASSHASH_PARALLELISM", None)
KEY_LEN = _env_int("PASSHASH_KEY_LEN", DEFAULT_KEY_LEN)
SALT_LEN = _env_int("PASSHASH_SALT_LEN", DEFAULT_SALT_LEN)


@dataclass(frozen=True)
class HashConfig:
    """Cost parameters used when producing new hashes."""
    time_cost: int = field(default=TIME_COST)
    memory_cost: int = field(default=MEMORY_COST)
    parallelism: Optional[int] = field(default=PARALLELISM)  # None: host CPU count
    key_len: int = field(default=KEY_LEN)
    salt_len: int = field(default=SALT_LEN)

    def resolve_parallelism(self) -> int:
        """Configured parallelism, or the number of CPUs available right now."""
        if self.parallelism is not None:
            return self.parallelism
        return available_cpus()
