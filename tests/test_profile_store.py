"""test suite for ProfileStore."""
import logging
import pytest
import sys
import threading
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from profilemanager.domain.errors import NotFoundError
from profilemanager.domain.models import ProfileFields
from profilemanager.profiles.store import ProfileStore


def make_fields(name="Alice", **overrides) -> ProfileFields:
    values = dict(
        name=name,
        email=f"{name.lower()}@x.com",
        phone="555-0100",
        age=30,
        gender="Female",
        hobbies=("Reading",),
        notifications_enabled=True,
    )
    values.update(overrides)
    return ProfileFields(**values)


@pytest.fixture
def store():
    return ProfileStore()


class TestAdd:
    def test_add_single_profile(self, store):
        """scenario A: one record, not a favorite."""
        profile = store.add(make_fields())

        assert len(store) == 1
        assert store.snapshot() == (profile,)
        assert profile.is_favorite is False

    def test_add_preserves_fields(self, store):
        fields = make_fields(phone="", hobbies=("Reading", "Coding"))
        profile = store.add(fields)

        assert profile.fields == fields
        assert profile.name == "Alice"
        assert profile.email == "alice@x.com"
        assert profile.hobbies == ("Reading", "Coding")
        assert profile.notifications_enabled is True

    def test_ids_unique_and_order_kept(self, store):
        names = ["Alice", "Bob", "Carol", "Dave", "Eve"]
        added = [store.add(make_fields(n)) for n in names]

        snapshot = store.snapshot()
        assert [p.name for p in snapshot] == names
        assert len({p.id for p in snapshot}) == len(names)
        assert [p.id for p in snapshot] == [p.id for p in added]

    def test_same_fields_get_distinct_ids(self, store):
        a = store.add(make_fields())
        b = store.add(make_fields())
        assert a.id != b.id
        assert len(store) == 2


class TestUpdate:
    def test_update_renames_in_place(self, store):
        """scenario C: edit keeps id and position."""
        alice = store.add(make_fields("Alice"))
        updated = store.update(alice.id, make_fields("Alicia"))

        assert len(store) == 1
        assert updated.id == alice.id
        assert store.snapshot()[0].name == "Alicia"

    def test_update_leaves_others_untouched(self, store):
        a = store.add(make_fields("A"))
        b = store.add(make_fields("B"))
        c = store.add(make_fields("C"))

        store.update(b.id, make_fields("B2", age=41))

        snapshot = store.snapshot()
        assert [p.id for p in snapshot] == [a.id, b.id, c.id]
        assert snapshot[0] == a
        assert snapshot[2] == c
        assert snapshot[1].name == "B2"
        assert snapshot[1].age == 41

    def test_update_takes_favorite_from_fields(self, store):
        profile = store.add(make_fields())
        store.toggle_favorite(profile.id)

        kept = store.update(profile.id, make_fields(is_favorite=True))
        assert kept.is_favorite is True

        cleared = store.update(profile.id, make_fields(is_favorite=False))
        assert cleared.is_favorite is False

    def test_update_missing_id(self, store):
        store.add(make_fields())
        before = store.snapshot()

        with pytest.raises(NotFoundError) as exc_info:
            store.update("missing", make_fields("Ghost"))

        assert exc_info.value.profile_id == "missing"
        assert store.snapshot() == before


class TestDelete:
    def test_delete_keeps_rest(self, store):
        """scenario B: add Alice and Bob, delete Alice."""
        alice = store.add(make_fields("Alice"))
        bob = store.add(make_fields("Bob"))

        assert store.delete(alice.id) is True
        assert store.snapshot() == (bob,)

    def test_delete_middle_keeps_order(self, store):
        a = store.add(make_fields("A"))
        b = store.add(make_fields("B"))
        c = store.add(make_fields("C"))

        store.delete(b.id)
        assert [p.id for p in store.snapshot()] == [a.id, c.id]

    def test_delete_twice_is_noop(self, store):
        a = store.add(make_fields("A"))
        store.add(make_fields("B"))

        store.delete(a.id)
        after_first = store.snapshot()

        assert store.delete(a.id) is False
        assert store.snapshot() == after_first

    def test_delete_unknown_on_empty_store(self, store):
        assert store.delete("nope") is False
        assert len(store) == 0


class TestToggleFavorite:
    def test_toggle_returns_new_value(self, store):
        profile = store.add(make_fields())
        assert store.toggle_favorite(profile.id) is True
        assert store.get(profile.id).is_favorite is True

    def test_toggle_twice_restores(self, store):
        profile = store.add(make_fields())
        store.toggle_favorite(profile.id)
        store.toggle_favorite(profile.id)
        assert store.get(profile.id) == profile

    def test_toggle_touches_only_flag(self, store):
        a = store.add(make_fields("A"))
        b = store.add(make_fields("B"))

        store.toggle_favorite(a.id)

        snapshot = store.snapshot()
        assert [p.id for p in snapshot] == [a.id, b.id]
        assert snapshot[0].fields == a.fields.model_copy(update={"is_favorite": True})
        assert snapshot[1] == b

    def test_toggle_missing_id(self, store):
        """scenario D: store unchanged, nothing created."""
        with pytest.raises(NotFoundError):
            store.toggle_favorite("missing")
        assert len(store) == 0


class TestSnapshot:
    def test_snapshot_is_immutable(self, store):
        store.add(make_fields())
        snapshot = store.snapshot()

        assert isinstance(snapshot, tuple)
        with pytest.raises(Exception):
            snapshot[0].name = "Mallory"

    def test_snapshot_not_affected_by_later_changes(self, store):
        a = store.add(make_fields("A"))
        snapshot = store.snapshot()

        store.add(make_fields("B"))
        store.delete(a.id)

        assert snapshot == (a,)

    def test_get_and_contains(self, store):
        profile = store.add(make_fields())
        assert profile.id in store
        assert "missing" not in store
        assert store.get(profile.id) == profile
        with pytest.raises(NotFoundError):
            store.get("missing")


class TestSubscribe:
    def test_listener_sees_each_mutation(self, store):
        events = []
        store.subscribe(events.append)

        profile = store.add(make_fields())
        store.update(profile.id, make_fields("Alicia"))
        store.toggle_favorite(profile.id)
        store.delete(profile.id)

        assert [e.kind for e in events] == ["added", "updated", "favorite_toggled", "deleted"]
        assert all(e.profile_id == profile.id for e in events)
        assert events[0].snapshot == (profile,)
        assert events[-1].snapshot == ()

    def test_noops_do_not_notify(self, store):
        events = []
        store.subscribe(events.append)

        store.delete("missing")
        with pytest.raises(NotFoundError):
            store.toggle_favorite("missing")

        assert events == []

    def test_unsubscribe(self, store):
        events = []
        unsubscribe = store.subscribe(events.append)
        unsubscribe()

        store.add(make_fields())
        assert events == []


    def test_listener_error_reaches_caller_after_mutation(self, store):
        def failing(event):
            raise RuntimeError("render failed")

        store.subscribe(failing)

        with pytest.raises(RuntimeError, match="render failed"):
            store.add(make_fields())

        assert len(store) == 1
        assert store.snapshot()[0].name == "Alice"

    def test_subscribe_from_many_threads(self, store):
        events = []
        unsubscribers = []

        def register():
            unsubscribers.append(store.subscribe(events.append))

        threads = [threading.Thread(target=register) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        store.add(make_fields())
        assert len(events) == 8

        for unsubscribe in unsubscribers:
            unsubscribe()
        store.add(make_fields("Bob"))
        assert len(events) == 8


class TestConcurrency:
    def test_parallel_adds_keep_unique_ids(self, store):
        per_thread = 200

        def worker(n):
            for i in range(per_thread):
                store.add(make_fields(f"T{n}x{i}"))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        snapshot = store.snapshot()
        assert len(snapshot) == 8 * per_thread
        assert len({p.id for p in snapshot}) == 8 * per_thread

    def test_snapshots_never_see_partial_toggles(self, store):
        profiles = [store.add(make_fields(f"P{i}")) for i in range(20)]
        bad = []
        done = threading.Event()

        def toggler():
            for _ in range(200):
                for p in profiles:
                    store.toggle_favorite(p.id)
            done.set()

        def reader():
            while not done.is_set():
                snapshot = store.snapshot()
                if [p.id for p in snapshot] != [p.id for p in profiles]:
                    bad.append(snapshot)

        threads = [threading.Thread(target=toggler), threading.Thread(target=reader)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert bad == []
        # even number of flips per record
        assert all(p.is_favorite is False for p in store.snapshot())


class TestLogging:
    def test_toggle_logs_at_debug(self, store, caplog):
        profile = store.add(make_fields())

        with caplog.at_level(logging.DEBUG, logger="profilemanager.profiles.store"):
            store.toggle_favorite(profile.id)

        assert any(
            profile.id in r.getMessage() and r.levelno == logging.DEBUG
            for r in caplog.records
        )


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
