"""
models.py
Lightweight domain helpers (catalog reference data, dataclasses).
"""

from __future__ import annotations
from dataclasses import dataclass, asdict

MAX_CAPACITY = 390

NATIONAL_ID_MIN = 2_000_000
NATIONAL_ID_MAX = 59_999_999

# Facility codes, in the order reports list them
LOCATIONS = ("CBA", "ROS", "MDP", "BUE")

PAYMENT_METHODS = ("cash", "card")

DEFAULT_LOCATION = "CBA"
DEFAULT_PLAN = "BAS"
DEFAULT_PAYMENT_METHOD = "cash"


@dataclass(frozen=True)
class Plan:
    id: str
    display_name: str
    base_price: int


PLANS = {
    "BAS": Plan("BAS", "Basic", 12000),
    "STD": Plan("STD", "Standard", 18000),
    "PRE": Plan("PRE", "Premium", 25000),
}


def get_plan(plan_id: str) -> Plan | None:
    return PLANS.get(plan_id)


def plan_display_name(plan_id: str) -> str:
    plan = get_plan(plan_id)
    return plan.display_name if plan else plan_id


@dataclass(frozen=True)
class Member:
    id: str
    full_name: str
    national_id: int
    age: int
    location_code: str
    plan_id: str
    payment_method: str  # cash/card
    fee_amount: float

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Member":
        return cls(
            id=str(data["id"]),
            full_name=data["full_name"],
            national_id=int(data["national_id"]),
            age=int(data["age"]),
            location_code=data["location_code"],
            plan_id=data["plan_id"],
            payment_method=data["payment_method"],
            fee_amount=float(data["fee_amount"]),
        )
