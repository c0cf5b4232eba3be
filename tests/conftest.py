import sys
from pathlib import Path

# Project modules live at the repository root
ROOT_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT_DIR))

import pytest

from db import SnapshotStore
from models import Member
from registry import MemberRegistry
from service import MembershipService


def make_member(
    member_id: str = "m1",
    full_name: str = "Ana Perez",
    national_id: int = 30_000_000,
    age: int = 30,
    location_code: str = "CBA",
    plan_id: str = "BAS",
    payment_method: str = "cash",
    fee_amount: float = 12000.0,
) -> Member:
    return Member(
        id=member_id,
        full_name=full_name,
        national_id=national_id,
        age=age,
        location_code=location_code,
        plan_id=plan_id,
        payment_method=payment_method,
        fee_amount=fee_amount,
    )


def valid_form(**overrides) -> dict:
    form = {
        "full_name": "Ana Perez",
        "national_id": "30000000",
        "age": "30",
        "location_code": "CBA",
        "plan_id": "BAS",
        "payment_method": "cash",
    }
    form.update(overrides)
    return form


@pytest.fixture
def store(tmp_path):
    """Snapshot store backed by a temporary sqlite file"""
    return SnapshotStore(db_file=tmp_path / "test.db", key="test_snapshot")


@pytest.fixture
def registry():
    return MemberRegistry()


@pytest.fixture
def service(store):
    return MembershipService(store=store)
