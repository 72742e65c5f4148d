"""
Lifecycle status of a rabbit, derived from its age and weight.

Rules are evaluated in order; the first match wins:

    1. sick / sold are sticky and returned unchanged
    2. no birth date                      -> young
    3. 40 <= age < 60                     -> weaned
    4. weight >= 2.5 kg and 60 <= age < 120 -> ready_for_sale
    5. age >= 120                         -> breeder
    6. otherwise                          -> young

An animal aged 60-119 days under the sale weight therefore falls back to
``young``.
"""
from __future__ import annotations

import math
from datetime import date, datetime, time
from typing import Optional, Union

from .schemas import RabbitStatus, TERMINAL_STATUSES

WEANING_AGE_DAYS = 40
SALE_AGE_DAYS = 60
BREEDER_AGE_DAYS = 120
SALE_WEIGHT_KG = 2.5

_SECONDS_PER_DAY = 24 * 60 * 60


def _as_datetime(value: Union[date, datetime], tzinfo=None) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min, tzinfo=tzinfo)


def age_in_days(birth_date: date, as_of: Union[date, datetime]) -> int:
    """Whole days between birth (at midnight) and ``as_of``, rounded up."""
    now = _as_datetime(as_of)
    born = _as_datetime(birth_date, tzinfo=now.tzinfo)
    elapsed = abs((now - born).total_seconds())
    return math.ceil(elapsed / _SECONDS_PER_DAY)


def derive_status(
    birth_date: Optional[date],
    current_weight: Optional[float],
    existing_status: Optional[RabbitStatus],
    as_of: Union[date, datetime],
) -> RabbitStatus:
    if existing_status is not None and RabbitStatus(existing_status) in TERMINAL_STATUSES:
        return RabbitStatus(existing_status)

    if birth_date is None:
        return RabbitStatus.YOUNG

    age = age_in_days(birth_date, as_of)
    weight = current_weight or 0

    if WEANING_AGE_DAYS <= age < SALE_AGE_DAYS:
        return RabbitStatus.WEANED
    if weight >= SALE_WEIGHT_KG and SALE_AGE_DAYS <= age < BREEDER_AGE_DAYS:
        return RabbitStatus.READY_FOR_SALE
    if age >= BREEDER_AGE_DAYS:
        return RabbitStatus.BREEDER

    return RabbitStatus.YOUNG
