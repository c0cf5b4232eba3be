"""
registry.py
In-memory member registry (most recently added first).
"""

from __future__ import annotations

import uuid
from typing import Iterable

from logger import get_logger
from models import MAX_CAPACITY, Member

logger = get_logger(__name__)


class CapacityExceededError(RuntimeError):
    """Raised when a member is added to a full registry."""


class DuplicateMemberIdError(ValueError):
    """Raised when a member id was already issued by this registry."""


class MemberRegistry:
    """
    Owns the ordered member collection.

    Ids are unique for the registry's lifetime: an id that was added or
    hydrated once is never accepted again, even after removal. National
    ids are not unique.
    """

    def __init__(self, capacity: int = MAX_CAPACITY) -> None:
        self.capacity = capacity
        self._members: list[Member] = []
        self._issued_ids: set[str] = set()

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self):
        return iter(self.list())

    @property
    def is_full(self) -> bool:
        return len(self._members) >= self.capacity

    def new_member_id(self) -> str:
        while True:
            member_id = uuid.uuid4().hex
            if member_id not in self._issued_ids:
                return member_id

    def add(self, member: Member) -> Member:
        if self.is_full:
            raise CapacityExceededError(f"Registry is at capacity ({self.capacity}).")
        if member.id in self._issued_ids:
            raise DuplicateMemberIdError(f"Member id already issued: {member.id}")

        self._members.insert(0, member)
        self._issued_ids.add(member.id)
        logger.debug("Added member %s (%d/%d)", member.id, len(self._members), self.capacity)
        return member

    def remove(self, member_id: str) -> bool:
        for i, m in enumerate(self._members):
            if m.id == member_id:
                del self._members[i]
                logger.debug("Removed member %s", member_id)
                return True
        return False

    def get(self, member_id: str) -> Member | None:
        return next((m for m in self._members if m.id == member_id), None)

    def list(self) -> tuple[Member, ...]:
        return tuple(self._members)

    def hydrate(self, members: Iterable[Member]) -> None:
        """Replace the whole collection with a stored snapshot. No validation."""
        self._members = list(members)
        self._issued_ids.update(m.id for m in self._members)
        logger.info("Hydrated registry with %d members", len(self._members))
