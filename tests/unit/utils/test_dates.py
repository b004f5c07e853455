#!/usr/bin/env python3
"""
test_dates.py
-------------
Tests for date helpers: ISO rendering, effective dates, month names.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import date, datetime, timedelta, timezone

# --- Third-party imports ---
import pytest

# --- Local imports ---
from almanac.dataclasses.content_item import ContentItem
from almanac.utils.dates import (
    date_or_string,
    effective_date,
    month_name,
    to_datetime,
    year_month,
)


class TestDateOrString:
    """Tests for date_or_string."""

    def test_date(self) -> None:
        assert date_or_string(date(2024, 1, 5)) == "2024-01-05"

    def test_naive_datetime(self) -> None:
        assert date_or_string(datetime(2024, 1, 5, 23, 30)) == "2024-01-05"

    def test_aware_datetime_converted_to_utc(self) -> None:
        late_evening = datetime(2024, 1, 5, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
        assert date_or_string(late_evening) == "2024-01-06"

    def test_string_passthrough(self) -> None:
        assert date_or_string("2024-01-05T10:00:00") == "2024-01-05T10:00:00"

    def test_other_values_stringified(self) -> None:
        assert date_or_string(2024) == "2024"


class TestEffectiveDate:
    """Tests for effective_date."""

    def test_uses_item_date(self) -> None:
        item = ContentItem(url="a", date=date(2024, 3, 9))
        assert effective_date(item) == "2024-03-09"

    def test_created_wins(self) -> None:
        item = ContentItem(url="a", date=date(2024, 3, 9), metadata={"created": date(2020, 1, 2)})
        assert effective_date(item) == "2020-01-02"

    def test_string_truncated(self) -> None:
        item = ContentItem(url="a", date="2024-03-09T12:00:00Z")
        assert effective_date(item) == "2024-03-09"

    def test_empty_created_ignored(self) -> None:
        item = ContentItem(url="a", date=date(2024, 3, 9), metadata={"created": ""})
        assert effective_date(item) == "2024-03-09"


class TestYearMonth:
    """Tests for year_month."""

    def test_match(self) -> None:
        assert year_month("2024-01-15") == ("2024", "01")

    def test_no_match(self) -> None:
        assert year_month("january") is None
        assert year_month("2024/01/15") is None

    def test_unpadded_month_padded(self) -> None:
        assert year_month("2024-1-20") == ("2024", "01")
        assert year_month("2024-10-1") == ("2024", "10")

    def test_month_out_of_range(self) -> None:
        assert year_month("2024-13-01") is None
        assert year_month("2024-0-01") is None


class TestMonthName:
    """Tests for month_name."""

    def test_names(self) -> None:
        assert month_name(1) == "January"
        assert month_name("02") == "February"
        assert month_name(12) == "December"

    @pytest.mark.parametrize("month", [0, 13, "00"])
    def test_out_of_range(self, month) -> None:
        with pytest.raises(ValueError):
            month_name(month)


class TestToDatetime:
    """Tests for to_datetime."""

    def test_none_and_empty(self) -> None:
        assert to_datetime(None) is None
        assert to_datetime("") is None

    def test_date(self) -> None:
        assert to_datetime(date(2024, 1, 2)) == datetime(2024, 1, 2)

    def test_iso_string(self) -> None:
        assert to_datetime("2024-01-02") == datetime(2024, 1, 2)

    def test_zulu_suffix(self) -> None:
        assert to_datetime("2024-01-02T03:04:05Z") == datetime(
            2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc
        )

    def test_unparseable_time_part_falls_back_to_date(self) -> None:
        assert to_datetime("2024-01-02 at noon") == datetime(2024, 1, 2)

    def test_not_a_date(self) -> None:
        assert to_datetime("sometime") is None
