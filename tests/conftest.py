import copy
from decimal import Decimal

import pytest

from accounts.models import User
from alma.models import Fee


FEE_SAMPLE = {
    "id": "12345678910",
    "type": {"value": "OVERDUEFINE", "desc": "Overdue fine"},
    "status": {"value": "ACTIVE", "desc": "Active"},
    "user_primary_id": {"value": "12345678910", "link": "https://something.com"},
    "balance": 3.0,
    "remaining_vat_amount": 0.0,
    "original_amount": 3.0,
    "original_vat_amount": 0.0,
    "creation_time": "2010-10-27T10:59:00Z",
    "status_time": "2019-05-30T02:01:11Z",
    "comment": "CALL_ITEMNUM: QP 355.2 P76 2000 | ITEM_COPYNUM: 4 | USER_ALT_ID: 123456789",
    "owner": {"value": "SCOTT", "desc": "Scott Library"},
    "title": (
        "Principles of neural science / edited by Eric R. Kandel, James H. Schwartz, "
        "Thomas M. Jessell ; art direction by Sarah Mack and Jane Dodd."
    ),
    "barcode": {"value": "39007047016860", "link": "https://something.com"},
    "link": "https://something.com",
}


@pytest.fixture
def fee_sample():
    return copy.deepcopy(FEE_SAMPLE)


@pytest.fixture
def make_user(db):
    def _make(yorku_id="101010", username="12345678910", **extra):
        return User.objects.create_user(username=username, yorku_id=yorku_id, **extra)
    return _make


@pytest.fixture
def local_user(make_user):
    return make_user()


@pytest.fixture
def make_fee(db):
    counter = {"n": 0}

    def _make(**fields):
        counter["n"] += 1
        values = {
            "fee_id": f"fee-{counter['n']}",
            "user_primary_id": "12345678910",
            "yorku_id": "101010",
            "fee_status": Fee.STATUS_ACTIVE,
            "balance": Decimal("1.00"),
        }
        values.update(fields)
        return Fee.objects.create(**values)
    return _make
