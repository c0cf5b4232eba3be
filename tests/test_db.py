"""
Tests for the sqlite snapshot store.
"""

from __future__ import annotations

import db
from conftest import make_member
from db import SnapshotStore
from registry import MemberRegistry


def test_load_empty_store(store: SnapshotStore) -> None:
    assert store.load() == []


def test_save_then_load_keeps_order(store: SnapshotStore) -> None:
    members = [
        make_member("c", full_name="Zoë Ñandú", fee_amount=10080.000000000002),
        make_member("b", plan_id="PRE", payment_method="card"),
        make_member("a", age=16),
    ]
    store.save(members)
    assert store.load() == members


def test_hydrate_from_load_reproduces_snapshot(store: SnapshotStore) -> None:
    members = [make_member("b"), make_member("a")]
    store.save(members)
    registry = MemberRegistry()
    registry.hydrate(store.load())
    assert list(registry.list()) == members


def test_save_overwrites(store: SnapshotStore) -> None:
    store.save([make_member("a"), make_member("b")])
    store.save([make_member("c")])
    assert [m.id for m in store.load()] == ["c"]


def test_keys_are_independent(tmp_path) -> None:
    first = SnapshotStore(db_file=tmp_path / "kv.db", key="one")
    second = SnapshotStore(db_file=tmp_path / "kv.db", key="two")
    first.save([make_member("a")])
    assert second.load() == []


def test_clear(store: SnapshotStore) -> None:
    store.save([make_member("a")])
    store.clear()
    assert store.load() == []


def test_corrupt_snapshot_loads_empty(store: SnapshotStore) -> None:
    db.set_value(store.db_file, store.key, "{not json")
    assert store.load() == []


def test_store_uses_config_defaults(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("GYM_DB_FILE", str(tmp_path / "env.db"))
    monkeypatch.setenv("GYM_SNAPSHOT_KEY", "env_key")
    store = SnapshotStore()
    assert store.db_file == tmp_path / "env.db"
    assert store.key == "env_key"
    store.save([make_member("a")])
    assert db.get_value(tmp_path / "env.db", "env_key") is not None
