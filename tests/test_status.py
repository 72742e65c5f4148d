from datetime import date, datetime, timedelta, timezone

import pytest

from cunigestion.schemas import RabbitStatus
from cunigestion.status import age_in_days, derive_status

TODAY = date(2026, 3, 15)


def born(days: int) -> date:
    return TODAY - timedelta(days=days)


def test_age_is_whole_days_for_a_date():
    assert age_in_days(born(40), TODAY) == 40


def test_age_rounds_partial_days_up():
    now = datetime(2026, 3, 15, 10, 30, tzinfo=timezone.utc)
    assert age_in_days(born(40), now) == 41


def test_age_of_future_birth_date_is_positive():
    assert age_in_days(TODAY + timedelta(days=5), TODAY) == 5


@pytest.mark.parametrize("status", [RabbitStatus.SICK, RabbitStatus.SOLD])
def test_terminal_statuses_are_sticky(status):
    assert derive_status(born(200), 5.0, status, TODAY) == status
    assert derive_status(None, 0, status, TODAY) == status
    assert derive_status(born(45), 1.0, status.value, TODAY) == status


def test_missing_birth_date_is_young():
    assert derive_status(None, 3.0, None, TODAY) == RabbitStatus.YOUNG


@pytest.mark.parametrize(
    "age, weight, expected",
    [
        (39, 0.8, RabbitStatus.YOUNG),
        (40, 0.9, RabbitStatus.WEANED),
        (59, 3.0, RabbitStatus.WEANED),
        (60, 2.5, RabbitStatus.READY_FOR_SALE),
        (119, 2.8, RabbitStatus.READY_FOR_SALE),
        (120, 0.5, RabbitStatus.BREEDER),
        (120, 4.0, RabbitStatus.BREEDER),
        (400, None, RabbitStatus.BREEDER),
    ],
)
def test_status_boundaries(age, weight, expected):
    assert derive_status(born(age), weight, None, TODAY) == expected


def test_light_rabbit_past_weaning_window_falls_back_to_young():
    assert derive_status(born(65), 1.0, None, TODAY) == RabbitStatus.YOUNG


def test_non_terminal_existing_status_is_recomputed():
    assert derive_status(born(130), 3.0, RabbitStatus.YOUNG, TODAY) == RabbitStatus.BREEDER
    assert derive_status(born(10), 0.3, RabbitStatus.BREEDER, TODAY) == RabbitStatus.YOUNG


def test_derivation_is_repeatable():
    args = (born(75), 2.7, None, TODAY)
    assert derive_status(*args) == derive_status(*args)
