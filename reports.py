"""
reports.py
Revenue and per-location breakdowns derived from the member list.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import pandas as pd

from models import LOCATIONS, MAX_CAPACITY, Member, plan_display_name


@dataclass(frozen=True)
class LocationStats:
    location_code: str
    count: int
    income: float


@dataclass(frozen=True)
class Summary:
    total_revenue: float
    total_count: int
    per_location: tuple[LocationStats, ...]

    def to_dict(self) -> dict:
        return {
            "total_revenue": self.total_revenue,
            "total_count": self.total_count,
            "per_location": [
                {"location_code": s.location_code, "count": s.count, "income": s.income}
                for s in self.per_location
            ],
        }


def summarize(members: Iterable[Member]) -> Summary:
    """
    Totals over all members plus one entry per catalog location, in catalog
    order. Locations without members report count=0 and income=0.
    """
    members = list(members)
    per_location = []
    for code in LOCATIONS:
        at_location = [m for m in members if m.location_code == code]
        per_location.append(
            LocationStats(
                location_code=code,
                count=len(at_location),
                income=sum((m.fee_amount for m in at_location), 0.0),
            )
        )

    return Summary(
        total_revenue=sum((m.fee_amount for m in members), 0.0),
        total_count=len(members),
        per_location=tuple(per_location),
    )


def income_share(income: float, total: float) -> float:
    """Percentage of total revenue; 0 when there is no revenue yet."""
    if not total:
        return 0.0
    return income / total * 100


def capacity_usage(count: int, capacity: int = MAX_CAPACITY) -> int:
    return round(count / capacity * 100)


def summary_to_frame(summary: Summary) -> pd.DataFrame:
    rows = [
        {
            "location": s.location_code,
            "members": s.count,
            "income": s.income,
            "share_pct": round(income_share(s.income, summary.total_revenue), 1),
        }
        for s in summary.per_location
    ]
    return pd.DataFrame(rows, columns=["location", "members", "income", "share_pct"])


def members_to_frame(members: Iterable[Member]) -> pd.DataFrame:
    """Display table. The fee column is rounded; stored amounts are untouched."""
    rows = [
        {
            "id": m.id,
            "full_name": m.full_name,
            "age": m.age,
            "national_id": m.national_id,
            "location": m.location_code,
            "plan": plan_display_name(m.plan_id),
            "payment": m.payment_method,
            "fee": round(m.fee_amount),
        }
        for m in members
    ]
    return pd.DataFrame(
        rows,
        columns=["id", "full_name", "age", "national_id", "location", "plan", "payment", "fee"],
    )
