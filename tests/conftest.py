import pytest

from passhash_core.config import HashConfig
from passhash_core.password import Argon2idHasher, async_ops, sync_ops, utils


@pytest.fixture
def fast_config():
    """Cheap cost parameters so most tests stay fast."""
    return HashConfig(time_cost=1, memory_cost=1024, parallelism=1, key_len=32, salt_len=16)


@pytest.fixture
def fast_hasher(fast_config):
    return Argon2idHasher(fast_config)


@pytest.fixture
def fast_default_hasher(fast_hasher, monkeypatch):
    """Route the module-level sync/async operations through the cheap hasher."""
    for module in (async_ops, sync_ops, utils):
        monkeypatch.setattr(module, "get_cached_hasher", lambda: fast_hasher)
    return fast_hasher
