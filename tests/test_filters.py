"""Tests for function list filtering."""

from __future__ import annotations

from lambdaview.filters import filter_entities


class TestFilterEntities:
    def test_substring_then_sorted(self) -> None:
        assert filter_entities(["b", "alpha", "Zeta"], "a") == ["Zeta", "alpha"]

    def test_case_sensitive(self) -> None:
        assert filter_entities(["Alpha", "beta"], "A") == ["Alpha"]

    def test_no_pattern_sorts_all(self) -> None:
        assert filter_entities(["b", "alpha", "Zeta"]) == ["Zeta", "alpha", "b"]

    def test_empty_pattern_keeps_all(self) -> None:
        assert filter_entities(["b", "a"], "") == ["a", "b"]

    def test_no_match(self) -> None:
        assert filter_entities(["b", "c"], "zzz") == []

    def test_accepts_iterator(self) -> None:
        assert filter_entities(iter(["orders-prod", "orders-dev", "users"]), "orders") == ["orders-dev", "orders-prod"]
