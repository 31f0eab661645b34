from datetime import datetime, timedelta, timezone

import pytest

from essay_feed.chronology import (
    assign_timestamps,
    format_offset,
    generation_date,
    offset_seconds,
    pub_date,
)
from essay_feed.models import ArticleLink, TimedArticle


def _links(count):
    return [ArticleLink(url=f"http://example.com/{i}", title=f"Essay {i}") for i in range(count)]


def test_offsets_count_down_to_zero():
    assert [offset_seconds(i, 3) for i in range(3)] == [2, 1, 0]


def test_offset_is_clamped_at_zero():
    assert offset_seconds(5, 3) == 0


def test_single_article_gets_zero_offset():
    assert offset_seconds(0, 1) == 0


@pytest.mark.parametrize(
    "offset, expected",
    [
        (0, "00:00:00"),
        (59, "00:00:59"),
        (61, "00:01:01"),
        (3661, "01:01:01"),
        (90000, "25:00:00"),
    ],
)
def test_format_offset(offset, expected):
    assert format_offset(offset) == expected


def test_generation_date_is_day_portion_in_utc(fixed_now):
    assert generation_date(fixed_now) == "Fri, 01 Mar 2024"


def test_generation_date_converts_other_timezones():
    late_evening = datetime(2024, 2, 29, 23, 30, tzinfo=timezone(timedelta(hours=-5)))

    assert generation_date(late_evening) == "Fri, 01 Mar 2024"


def test_generation_date_treats_naive_as_utc():
    assert generation_date(datetime(2024, 3, 1, 1, 2, 3)) == "Fri, 01 Mar 2024"


def test_pub_date_format(fixed_now):
    assert pub_date(fixed_now, 0, 3) == "Fri, 01 Mar 2024 00:00:02 GMT"


def test_assign_timestamps_shares_day_and_counts_down(fixed_now):
    timed = assign_timestamps(_links(4), fixed_now)

    assert [t.pub_date for t in timed] == [
        "Fri, 01 Mar 2024 00:00:03 GMT",
        "Fri, 01 Mar 2024 00:00:02 GMT",
        "Fri, 01 Mar 2024 00:00:01 GMT",
        "Fri, 01 Mar 2024 00:00:00 GMT",
    ]
    assert timed[0] == TimedArticle(url="http://example.com/0", title="Essay 0", pub_date=timed[0].pub_date)


def test_time_suffix_is_non_increasing_for_long_listing(fixed_now):
    timed = assign_timestamps(_links(150), fixed_now)
    prefixes = {t.pub_date[:16] for t in timed}
    suffixes = [t.pub_date[17:25] for t in timed]

    assert prefixes == {"Fri, 01 Mar 2024"}
    assert suffixes == sorted(suffixes, reverse=True)
    assert suffixes[0] == "00:02:29"
    assert suffixes[-1] == "00:00:00"


def test_assign_timestamps_empty(fixed_now):
    assert assign_timestamps([], fixed_now) == ()
