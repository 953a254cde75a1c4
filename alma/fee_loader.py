"""Load Alma fees for a patron into the local alma_fees table.

Flow for one patron: every ACTIVE fee is demoted to STALE, then each fee
Alma still reports is parsed and upserted, which brings it back to the
status Alma gives it. Fees are never deleted.
"""

import logging
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from django.db import transaction
from django.utils import timezone
from django.utils.dateparse import parse_datetime

from .models import Fee

logger = logging.getLogger(__name__)

MISSING = "n/a"
# alma_fees amounts are stored with two decimal places
CENTS = Decimal("0.01")


class FeeParseError(ValueError):
    """An Alma fee payload that cannot be turned into a Fee."""


class FeeSyncError(Exception):
    """A patron whose fees cannot be synced."""


def get_val(data: Mapping, key, sub_key=None) -> Optional[Any]:
    """
    Read ``data[key]`` or ``data[key][sub_key]``.

    A missing key gives "n/a" when a sub key was asked for and None
    otherwise. A scalar where a nested mapping was expected counts as
    missing.
    """
    value = data.get(str(key))
    if value is None:
        return MISSING if sub_key is not None else None
    if sub_key is None:
        return value
    if not isinstance(value, Mapping):
        return MISSING
    return value.get(str(sub_key))


@dataclass(frozen=True)
class AlmaFee:
    fee_id: str
    user_primary_id: str
    yorku_id: str
    fee_type: Optional[str]
    fee_description: Optional[str]
    fee_status: Optional[str]
    balance: Optional[Decimal]
    remaining_vat_amount: Optional[Decimal]
    original_amount: Optional[Decimal]
    original_vat_amount: Optional[Decimal]
    creation_time: Optional[datetime]
    status_time: Optional[datetime]
    owner_id: Optional[str]
    owner_description: Optional[str]
    item_title: Optional[str]
    item_barcode: Optional[str]


@dataclass(frozen=True)
class FeeUpdate:
    """The part of a fee that may change after it is first stored."""

    balance: Optional[Decimal]
    remaining_vat_amount: Optional[Decimal]
    fee_status: Optional[str]
    status_time: Optional[datetime]

    @classmethod
    def from_alma_fee(cls, fee: AlmaFee) -> "FeeUpdate":
        return cls(**{f.name: getattr(fee, f.name) for f in fields(cls)})

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    def apply(self, row: Fee) -> Fee:
        for name, value in asdict(self).items():
            setattr(row, name, value)
        return row


def _amount(data, key):
    v = get_val(data, key)
    if v is None:
        return None
    try:
        return Decimal(str(v)).quantize(CENTS)
    except InvalidOperation as e:
        raise FeeParseError(f"Invalid amount for '{key}': {v!r}") from e


def _timestamp(data, key):
    raw = get_val(data, key)
    if raw is None:
        return None
    try:
        dt = parse_datetime(str(raw))
    except ValueError as e:
        raise FeeParseError(f"Invalid timestamp for '{key}': {raw!r}") from e
    if dt is None:
        raise FeeParseError(f"Invalid timestamp for '{key}': {raw!r}")
    if timezone.is_naive(dt):
        dt = timezone.make_aware(dt)
    return dt


def parse_alma_fee(data: Mapping, local_user) -> AlmaFee:
    fee_id = get_val(data, "id")
    if fee_id is None:
        raise FeeParseError("Alma fee without 'id'")

    reported_primary_id = get_val(data, "user_primary_id", "value")
    if reported_primary_id not in (MISSING, None, local_user.username):
        logger.warning(
            "Alma fee %s reports user %s but is being loaded for %s",
            fee_id,
            reported_primary_id,
            local_user.username,
        )

    return AlmaFee(
        fee_id=str(fee_id),
        user_primary_id=local_user.username,
        yorku_id=local_user.yorku_id,
        fee_type=get_val(data, "type", "value"),
        fee_description=get_val(data, "type", "desc"),
        fee_status=get_val(data, "status", "value"),
        balance=_amount(data, "balance"),
        remaining_vat_amount=_amount(data, "remaining_vat_amount"),
        original_amount=_amount(data, "original_amount"),
        original_vat_amount=_amount(data, "original_vat_amount"),
        creation_time=_timestamp(data, "creation_time"),
        status_time=_timestamp(data, "status_time"),
        owner_id=get_val(data, "owner", "value"),
        owner_description=get_val(data, "owner", "desc"),
        item_title=get_val(data, "title"),
        item_barcode=get_val(data, "barcode", "value"),
    )


def upsert_fee(fee: AlmaFee) -> Fee:
    existing = Fee.objects.filter(
        fee_id=fee.fee_id, user_primary_id=fee.user_primary_id
    ).first()
    if existing is None:
        return Fee.objects.create(**asdict(fee))

    FeeUpdate.from_alma_fee(fee).apply(existing)
    existing.save(update_fields=FeeUpdate.field_names() + ["updated_at"])
    return existing


def mark_all_active_fees_as_stale(user) -> int:
    return Fee.objects.active().filter(user_primary_id=user.username).update(
        fee_status=Fee.STATUS_STALE, updated_at=timezone.now()
    )


def sync_fees_for_user(user, fees=None) -> list[Fee]:
    if not user.yorku_id:
        raise FeeSyncError(f"User {user.username} has no yorku_id; cannot store Alma fees")

    if fees is None:
        from .client import get_user_fees

        fees = get_user_fees(user.username)

    logger.info("Syncing %d Alma fees for %s", len(fees), user.username)
    with transaction.atomic():
        staled = mark_all_active_fees_as_stale(user)
        stored = [upsert_fee(parse_alma_fee(f, user)) for f in fees]
    logger.info(
        "Alma fee sync for %s done: %d stored, %d previously active",
        user.username,
        len(stored),
        staled,
    )
    return stored
