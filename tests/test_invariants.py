"""Tests for graph invariant checks."""

import pytest

from synonym_graph import InvariantViolationError


class TestCleanGraph:
    """Graphs built through link() satisfy every invariant."""

    def test_no_findings(self, store_with_data):
        assert store_with_data.check_invariants() == []
        store_with_data.assert_invariants()

    def test_empty_store(self, store):
        assert store.check_invariants() == []


class TestCorruptGraph:
    """Findings for graphs damaged behind the API."""

    def test_asymmetric_link(self, store_with_data):
        store_with_data._neighbors["sad"].add("happy")
        results = store_with_data.check_invariants()
        assert any(
            r.rule_id == "VAL-SYM-001" and r.word == "sad" for r in results
        )
        with pytest.raises(InvariantViolationError, match="VAL-SYM-001"):
            store_with_data.assert_invariants()

    def test_self_link(self, store_with_data):
        store_with_data._neighbors["sad"].add("sad")
        results = store_with_data.check_invariants()
        assert any(r.rule_id == "VAL-SYM-002" for r in results)

    def test_non_canonical_key(self, store_with_data):
        store_with_data._neighbors["Gloomy"] = set()
        results = store_with_data.check_invariants()
        assert any(
            r.rule_id == "VAL-SYM-003" and r.severity == "ERROR"
            for r in results
        )

    def test_missing_display_is_warning(self, store_with_data):
        del store_with_data._display["sad"]
        results = store_with_data.check_invariants()
        assert [r.severity for r in results] == ["WARNING"]
        store_with_data.assert_invariants()
