"""
service.py
Caller-facing operations: register, remove, search, summarize.

Every successful add/remove is followed by a snapshot save, so the store
never lags the registry by more than one operation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol, Sequence

from advisor import AdvisorClient
from logger import get_logger
from models import Member
from pricing import compute_fee
from registry import MemberRegistry
from reports import Summary, summarize
from search import filter_members
from utils import parse_int_field, sample_requests
from validation import (
    RejectionReason,
    normalize_payment_method,
    normalize_plan,
    validate,
)

logger = get_logger(__name__)


class MemberStore(Protocol):
    def load(self) -> list[Member]: ...

    def save(self, members: Sequence[Member]) -> None: ...


@dataclass(frozen=True)
class RegistrationResult:
    member: Member | None = None
    reason: RejectionReason | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.reason is None


class MembershipService:
    def __init__(
        self,
        store: MemberStore | None = None,
        registry: MemberRegistry | None = None,
        advisor: AdvisorClient | None = None,
    ) -> None:
        self.store = store
        self.registry = registry if registry is not None else MemberRegistry()
        self._advisor = advisor

    def load(self) -> None:
        """Hydrate the registry from the store (once, at startup)."""
        if self.store is not None:
            self.registry.hydrate(self.store.load())

    def _save(self) -> None:
        if self.store is not None:
            self.store.save(self.registry.list())

    def register_member(self, fields: Mapping) -> RegistrationResult:
        result = validate(fields, len(self.registry), self.registry.capacity)
        if not result.ok:
            logger.info("Registration rejected: %s", result.reason.value)
            return RegistrationResult(reason=result.reason, message=result.message)

        req = result.request
        member = Member(
            id=self.registry.new_member_id(),
            full_name=req.full_name,
            national_id=req.national_id,
            age=req.age,
            location_code=req.location_code,
            plan_id=req.plan_id,
            payment_method=req.payment_method,
            fee_amount=compute_fee(req.age, req.plan_id, req.payment_method),
        )
        self.registry.add(member)
        self._save()
        logger.info("Registered member %s at %s (fee %.2f)", member.id, member.location_code, member.fee_amount)
        return RegistrationResult(member=member)

    def remove_member(self, member_id: str) -> bool:
        removed = self.registry.remove(member_id)
        if removed:
            self._save()
            logger.info("Removed member %s", member_id)
        return removed

    def members(self) -> tuple[Member, ...]:
        return self.registry.list()

    def search(self, query: str) -> list[Member]:
        return filter_members(self.registry.list(), query)

    def summarize(self) -> Summary:
        return summarize(self.registry.list())

    def projected_fee(self, fields: Mapping) -> float:
        """Fee preview for a form being filled in; a missing age counts as 0."""
        age = parse_int_field(fields.get("age")) or 0
        return compute_fee(
            age,
            normalize_plan(fields.get("plan_id")),
            normalize_payment_method(fields.get("payment_method")),
        )

    def ask_advisor(self) -> str:
        if self._advisor is None:
            self._advisor = AdvisorClient()
        return self._advisor.get_insight(self.summarize())

    def insert_sample_data(self) -> list[RegistrationResult]:
        """Register the demo members (adds new members on every run)."""
        return [self.register_member(form) for form in sample_requests()]
