"""
validation.py
Registration checks: required fields, national id range, capacity.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from models import (
    DEFAULT_LOCATION,
    DEFAULT_PLAN,
    LOCATIONS,
    MAX_CAPACITY,
    NATIONAL_ID_MAX,
    NATIONAL_ID_MIN,
)
from utils import clean_text, parse_int_field


class RejectionReason(str, Enum):
    MISSING_REQUIRED_FIELD = "MissingRequiredField"
    INVALID_NATIONAL_ID = "InvalidNationalId"
    CAPACITY_EXCEEDED = "CapacityExceeded"


@dataclass(frozen=True)
class RegistrationRequest:
    full_name: str
    national_id: int
    age: int
    location_code: str
    plan_id: str
    payment_method: str


@dataclass(frozen=True)
class ValidationResult:
    request: RegistrationRequest | None = None
    reason: RejectionReason | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.reason is None


def _rejected(reason: RejectionReason, message: str) -> ValidationResult:
    return ValidationResult(reason=reason, message=message)


def normalize_location(value) -> str:
    code = clean_text(value).upper()
    return code if code in LOCATIONS else DEFAULT_LOCATION


def normalize_plan(value) -> str:
    # Unknown plan ids are kept as given; they price to 0.
    return clean_text(value).upper() or DEFAULT_PLAN


def normalize_payment_method(value) -> str:
    return "card" if clean_text(value).lower() == "card" else "cash"


def validate(fields: Mapping, registry_size: int, capacity: int = MAX_CAPACITY) -> ValidationResult:
    """
    Check a registration form against the current registry size.

    Checks run in order and stop at the first failure:
    required fields, national id range, capacity. Location, plan and
    payment method are never rejected; missing or unknown values fall
    back to defaults.
    """
    full_name = clean_text(fields.get("full_name"))
    national_id = parse_int_field(fields.get("national_id"))
    age = parse_int_field(fields.get("age"))

    if not full_name:
        return _rejected(RejectionReason.MISSING_REQUIRED_FIELD, "Full name is required.")
    if national_id is None:
        return _rejected(RejectionReason.MISSING_REQUIRED_FIELD, "National ID must be a number.")
    if age is None:
        return _rejected(RejectionReason.MISSING_REQUIRED_FIELD, "Age must be a number.")

    if not NATIONAL_ID_MIN <= national_id <= NATIONAL_ID_MAX:
        return _rejected(
            RejectionReason.INVALID_NATIONAL_ID,
            f"National ID must be between {NATIONAL_ID_MIN:,} and {NATIONAL_ID_MAX:,}.",
        )

    if registry_size >= capacity:
        return _rejected(
            RejectionReason.CAPACITY_EXCEEDED,
            f"Maximum capacity of {capacity} members reached.",
        )

    request = RegistrationRequest(
        full_name=full_name,
        national_id=national_id,
        age=age,
        location_code=normalize_location(fields.get("location_code")),
        plan_id=normalize_plan(fields.get("plan_id")),
        payment_method=normalize_payment_method(fields.get("payment_method")),
    )
    return ValidationResult(request=request)
