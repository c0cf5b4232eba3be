"""
search.py
Free-text member search by name or national id.
"""

from __future__ import annotations

from typing import Iterable

from models import Member


def filter_members(members: Iterable[Member], query: str) -> list[Member]:
    """
    Members whose name or national id contains the query (case-insensitive),
    in their original order. An empty query matches everyone.
    """
    needle = (query or "").lower()
    if not needle:
        return list(members)
    return [
        m for m in members
        if needle in m.full_name.lower() or needle in str(m.national_id).lower()
    ]
