"""
utils.py
Form parsing, exports, sample data.
"""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from models import Member


def clean_text(value) -> str:
    if value is None:
        return ""
    return str(value).strip()


def parse_int_field(value) -> int | None:
    """
    Parse a form value into an int. Returns None for blanks, booleans,
    fractional numbers and any other non-integer text.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    text = str(value).strip()
    if not text:
        return None
    try:
        return int(text, 10)
    except ValueError:
        return None


def members_to_csv_bytes(members: Iterable[Member]) -> bytes:
    columns = ["id", "full_name", "national_id", "age", "location_code", "plan_id", "payment_method", "fee_amount"]
    df = pd.DataFrame([m.to_dict() for m in members], columns=columns)
    return df.to_csv(index=False).encode("utf-8")


def sample_requests() -> list[dict]:
    """
    Registration forms for a handful of demo members (one per location,
    mixing plans, ages and payment methods).
    """
    return [
        {"full_name": "Lucia Fernandez", "national_id": "30123456", "age": "34",
         "location_code": "CBA", "plan_id": "PRE", "payment_method": "card"},
        {"full_name": "Tomas Gimenez", "national_id": "45987654", "age": "16",
         "location_code": "ROS", "plan_id": "BAS", "payment_method": "cash"},
        {"full_name": "Valentina Ruiz", "national_id": "27555111", "age": "41",
         "location_code": "MDP", "plan_id": "STD", "payment_method": "cash"},
        {"full_name": "Mateo Alvarez", "national_id": "44002003", "age": "17",
         "location_code": "BUE", "plan_id": "STD", "payment_method": "card"},
    ]
