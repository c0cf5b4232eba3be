"""
Tests for free-text member search.
"""

from __future__ import annotations

from conftest import make_member
from search import filter_members

MEMBERS = [
    make_member("c", full_name="Carla Gomez", national_id=41_222_333),
    make_member("b", full_name="Bruno Diaz", national_id=30_111_222),
    make_member("a", full_name="ana MARTINEZ", national_id=25_000_111),
]


def test_empty_query_returns_all_in_order() -> None:
    assert filter_members(MEMBERS, "") == MEMBERS
    assert filter_members(MEMBERS, None) == MEMBERS


def test_name_match_is_case_insensitive() -> None:
    assert [m.id for m in filter_members(MEMBERS, "MARTI")] == ["a"]
    assert [m.id for m in filter_members(MEMBERS, "bruno")] == ["b"]


def test_national_id_substring() -> None:
    assert [m.id for m in filter_members(MEMBERS, "222")] == ["c", "b"]
    assert [m.id for m in filter_members(MEMBERS, "25000111")] == ["a"]


def test_results_keep_registry_order() -> None:
    assert [m.id for m in filter_members(MEMBERS, "a")] == ["c", "b", "a"]


def test_no_match() -> None:
    assert filter_members(MEMBERS, "zzz") == []
