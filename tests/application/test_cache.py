"""Process-wide cache behaviour: reuse, monotonic upgrade, refresh, and races."""

from __future__ import annotations

import threading
from pathlib import Path

import pytest

from lib_config_paths.application.cache import PathsCache
from lib_config_paths.domain.errors import InvalidArgument
from lib_config_paths.domain.identity import EntryModuleInfo
from tests.support import FakeIdentityProvider, build_resolver

ENTRY = EntryModuleInfo(company="Acme", product="Widget", version="1.0", manifest_module_name="widget.py")


@pytest.fixture()
def identity() -> FakeIdentityProvider:
    return FakeIdentityProvider(entry=ENTRY, friendly="widget")


@pytest.fixture()
def cache(identity: FakeIdentityProvider) -> PathsCache:
    return PathsCache(build_resolver(identity=identity))


def test_current_is_reused(cache: PathsCache, identity: FakeIdentityProvider) -> None:
    """Repeated implicit requests return the same snapshot."""
    first = cache.current
    second = cache.current
    assert first is second
    assert identity.calls == 1


def test_upgrade_to_user_config(cache: PathsCache, identity: FakeIdentityProvider) -> None:
    """A snapshot without user paths is replaced when they are requested."""
    lean = cache.get_paths(include_user_config=False)
    assert lean.roaming_config_file is None

    rich = cache.get_paths(include_user_config=True)
    assert rich.roaming_config_file is not None
    assert rich.local_config_file is not None
    assert identity.calls == 2


def test_rich_snapshot_is_not_downgraded(cache: PathsCache, identity: FakeIdentityProvider) -> None:
    """A snapshot with user paths also serves requests without them."""
    rich = cache.get_paths(include_user_config=True)
    again = cache.get_paths(include_user_config=False)
    assert again is rich
    assert again.roaming_config_file is not None
    assert identity.calls == 1


def test_refresh_forces_recomputation(cache: PathsCache, identity: FakeIdentityProvider) -> None:
    """``refresh`` makes the next request resolve again."""
    before = cache.current
    cache.refresh()
    after = cache.current
    assert identity.calls == 2
    assert after is not before
    assert after == before


def test_refresh_resets_upgrade_state(cache: PathsCache, identity: FakeIdentityProvider) -> None:
    """After ``refresh`` a lean request publishes a lean snapshot."""
    cache.current
    cache.refresh()
    lean = cache.get_paths(include_user_config=False)
    assert lean.includes_user_config is False
    assert identity.calls == 2


def test_explicit_path_bypasses_cache(cache: PathsCache, identity: FakeIdentityProvider, tmp_path: Path) -> None:
    """Explicit executables are resolved fresh and never cached."""
    exe = tmp_path / "other"
    exe.write_text("", encoding="utf-8")

    first = cache.get_paths(str(exe))
    second = cache.get_paths(str(exe))

    assert first is not second
    assert first == second
    assert identity.calls == 0
    assert cache.current.application_uri == "/opt/acme/widget.py"


def test_explicit_missing_path_raises(cache: PathsCache, tmp_path: Path) -> None:
    """A missing explicit executable raises through the cache."""
    with pytest.raises(InvalidArgument):
        cache.get_paths(str(tmp_path / "missing"))


def test_concurrent_readers_share_one_snapshot(cache: PathsCache) -> None:
    """Concurrent first readers all observe a single published snapshot."""
    results = []
    barrier = threading.Barrier(8)

    def read() -> None:
        barrier.wait()
        results.append(cache.current)

    threads = [threading.Thread(target=read) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 8
    assert all(result is results[0] for result in results)
