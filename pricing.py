"""
pricing.py
Fee calculation for new members.
"""

from __future__ import annotations

from models import get_plan

YOUTH_AGE_LIMIT = 18
YOUTH_DISCOUNT = 0.8
CARD_SURCHARGE = 1.05


def compute_fee(age: int, plan_id: str, payment_method: str) -> float:
    """
    Fee owed for a member.

    Unknown plans price to 0. The youth discount is applied first and the
    card surcharge is applied on top of the discounted amount. The result
    is not rounded.
    """
    plan = get_plan(plan_id)
    fee = float(plan.base_price) if plan else 0.0

    if age < YOUTH_AGE_LIMIT:
        fee *= YOUTH_DISCOUNT

    if payment_method == "card":
        fee *= CARD_SURCHARGE

    return fee


def format_amount(amount: float) -> str:
    """Display form, rounded to whole currency units (e.g. $10,080)."""
    return f"${amount:,.0f}"
