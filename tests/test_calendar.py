from datetime import date, datetime

from cbs_rates.utils.calendar import is_weekend, local_date_from_timestamp


def test_is_weekend_for_each_day_of_a_week() -> None:
    # 2024-05-13 is a Monday.
    flags = [is_weekend(date(2024, 5, day)) for day in range(13, 20)]
    assert flags == [False, False, False, False, False, True, True]


def test_local_date_from_timestamp() -> None:
    moment = datetime(2024, 5, 15, 12, 30)
    assert local_date_from_timestamp(moment.timestamp()) == date(2024, 5, 15)
