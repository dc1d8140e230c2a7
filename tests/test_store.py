"""Tests for linking and direct lookup."""

import pytest

from synonym_graph import SynonymStore, ValidationError, ValidationFailure


def _neighbors(store, word):
    return {w.casefold() for w in store.lookup(word).synonyms}


class TestLink:
    """Group links are symmetric and fully connected."""

    def test_symmetry(self, store):
        result = store.link("happy", ["joyful", "glad"])
        assert result.is_valid
        assert _neighbors(store, "happy") == {"joyful", "glad"}
        assert "happy" in _neighbors(store, "joyful")
        assert "happy" in _neighbors(store, "glad")

    def test_group_is_fully_connected(self, store):
        store.link("happy", ["joyful", "glad"])
        assert _neighbors(store, "joyful") == {"happy", "glad"}
        assert _neighbors(store, "glad") == {"happy", "joyful"}

    def test_no_self_loops(self, store):
        store.link("happy", ["joyful"])
        store.link("joyful", ["glad", "happy"])
        for word in store.words():
            assert word.casefold() not in _neighbors(store, word)

    def test_idempotent(self, store):
        store.link("happy", ["joyful", "glad"])
        before = store.to_dict()
        store.link("happy", ["joyful", "glad"])
        assert store.to_dict() == before

    def test_duplicate_synonyms_collapse(self, store):
        store.link("happy", ["joyful", "JOYFUL", "Joyful"])
        assert store.lookup("happy").synonyms == frozenset({"joyful"})
        assert len(store) == 2

    def test_later_links_only_add(self, store):
        store.link("happy", ["joyful"])
        store.link("happy", ["glad"])
        assert _neighbors(store, "happy") == {"joyful", "glad"}
        # The second group does not connect the first group's members.
        assert _neighbors(store, "joyful") == {"happy"}

    def test_accepts_generator(self, store):
        assert store.link("happy", (w for w in ["joyful", "glad"])).is_valid
        assert _neighbors(store, "happy") == {"joyful", "glad"}


class TestCaseInsensitivity:
    """Identity ignores case; the first spelling is kept for display."""

    def test_lookup_other_case(self, store):
        store.link("Happy", ["Joyful"])
        group = store.lookup("HAPPY")
        assert "Joyful" in group.synonyms
        assert group.word == "HAPPY"

    def test_first_spelling_wins(self, store):
        store.link("Happy", ["Joyful"])
        store.link("JOYFUL", ["glad"])
        assert "Joyful" in store.lookup("glad").synonyms
        assert store.words() == ["glad", "Happy", "Joyful"]

    def test_whitespace_is_significant(self, store):
        store.link("happy", [" glad"])
        assert "glad" not in store
        assert " glad" in store


class TestRejectedLink:
    """Validation failures leave the store untouched."""

    @pytest.mark.parametrize("word, synonyms, failure", [
        ("", ["a"], ValidationFailure.INVALID_WORD),
        ("happy", [], ValidationFailure.INVALID_SYNONYM_LIST),
        ("happy", ["joyful", ""], ValidationFailure.INVALID_SYNONYM_LIST),
        ("happy", ["happy"], ValidationFailure.SELF_REFERENCE),
        ("happy", ["joyful", "Happy"], ValidationFailure.SELF_REFERENCE),
    ])
    def test_no_partial_mutation(self, store, word, synonyms, failure):
        store.link("sad", ["unhappy"])
        before = store.to_dict()
        result = store.link(word, synonyms)
        assert result.failure is failure
        assert result.message
        assert store.to_dict() == before
        assert len(store.get_history()) == 1


class TestLookup:
    """Direct lookup."""

    def test_unknown_word_is_empty(self, store):
        group = store.lookup("nonexistent")
        assert group.word == "nonexistent"
        assert len(group) == 0

    def test_lookup_does_not_mutate(self, store):
        store.lookup("nonexistent")
        assert len(store) == 0
        assert "nonexistent" not in store

    def test_direct_only(self, store_with_data):
        group = store_with_data.lookup("happy")
        assert set(group.synonyms) == {"Joyful", "cheerful"}

    def test_blank_word_rejected(self, store):
        with pytest.raises(ValidationError):
            store.lookup("  ")


class TestInspection:
    """words(), components(), containment."""

    def test_len_and_contains(self, store_with_data):
        assert len(store_with_data) == 6
        assert "ELATED" in store_with_data
        assert "gloomy" not in store_with_data
        assert None not in store_with_data

    def test_components(self, store_with_data):
        assert store_with_data.components() == [
            ["cheerful", "Elated", "Happy", "Joyful"],
            ["sad", "unhappy"],
        ]

    def test_empty_store(self):
        store = SynonymStore()
        assert store.words() == []
        assert store.components() == []
        assert store.to_dict() == {}
