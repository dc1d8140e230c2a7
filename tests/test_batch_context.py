"""Tests for atomic batches and concurrent access."""

import threading

import pytest

from synonym_graph import SynonymStore


class TestBatch:
    """store.batch() applies links all-or-nothing."""

    def test_commits_on_success(self, store):
        with store.batch():
            store.link("happy", ["joyful"])
            store.link("sad", ["unhappy"])
        assert len(store) == 4
        assert len(store.get_history()) == 2

    def test_rolls_back_on_error(self, store):
        store.link("happy", ["joyful"])
        before = store.to_dict()
        with pytest.raises(RuntimeError):
            with store.batch():
                store.link("happy", ["glad"])
                store.link("sad", ["unhappy"])
                raise RuntimeError("boom")
        assert store.to_dict() == before
        assert len(store.get_history()) == 1

    def test_nested_rolls_back_outermost(self, store):
        with pytest.raises(RuntimeError):
            with store.batch():
                store.link("happy", ["joyful"])
                with store.batch():
                    store.link("sad", ["unhappy"])
                raise RuntimeError("boom")
        assert len(store) == 0

    def test_inner_rollback_keeps_outer_links(self, store):
        with store.batch():
            store.link("happy", ["joyful"])
            with pytest.raises(RuntimeError):
                with store.batch():
                    store.link("sad", ["unhappy"])
                    raise RuntimeError("boom")
            store.link("big", ["large"])
        assert store.words() == ["big", "happy", "joyful", "large"]
        assert [h.word for h in store.get_history()] == ["happy", "big"]

    def test_usable_after_rollback(self, store):
        with pytest.raises(RuntimeError):
            with store.batch():
                store.link("happy", ["joyful"])
                raise RuntimeError("boom")
        store.link("happy", ["glad"])
        assert set(store.lookup("happy").synonyms) == {"glad"}


class TestConcurrency:
    """Concurrent writers and readers keep the invariants."""

    def test_concurrent_links(self):
        store = SynonymStore()
        errors = []

        def writer(n):
            try:
                for i in range(200):
                    store.link(f"w{n}-{i}", [f"w{n}-{i + 1}", "hub"])
            except Exception as e:  # pragma: no cover - surfaced below
                errors.append(e)

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert store.check_invariants() == []
        assert len(store.get_history()) == 8 * 200
        assert len(store.lookup("hub")) == 8 * 201

    def test_reader_never_sees_half_a_batch(self):
        store = SynonymStore(record_history=False)
        done = threading.Event()
        seen = []

        def reader():
            while not done.is_set():
                seen.append(len(store.resolve_transitive("a0")))

        t = threading.Thread(target=reader)
        t.start()
        for round_ in range(50):
            with store.batch():
                store.link(f"a{round_}", [f"b{round_}"])
                store.link(f"b{round_}", [f"a{round_ + 1}"])
        done.set()
        t.join()

        # Each batch adds exactly two words to a0's component.
        assert all(n % 2 == 0 for n in seen)
