from __future__ import annotations

from datetime import date, datetime

import pytest

from todocal.domain.date_keys import (
    format_long_date,
    format_month_label,
    format_short_date,
    normalize_date_key,
    parse_date_key,
    to_date_key,
)


def test_to_date_key_zero_pads_components() -> None:
    assert to_date_key(date(2024, 6, 9)) == "2024-06-09"
    assert to_date_key(datetime(987, 1, 2, 23, 59)) == "0987-01-02"


@pytest.mark.parametrize("raw", ["", "2024-6-9", "2024/06/09", "2024-02-30", "tomorrow", None])
def test_parse_date_key_rejects_malformed_values(raw) -> None:
    with pytest.raises(ValueError):
        parse_date_key(raw)


def test_normalize_date_key_accepts_dates_and_strings() -> None:
    assert normalize_date_key(date(2024, 6, 15)) == "2024-06-15"
    assert normalize_date_key(" 2024-06-15 ") == "2024-06-15"


def test_display_labels_use_english_names() -> None:
    assert format_long_date("2024-06-15") == "Saturday, June 15, 2024"
    assert format_short_date("2024-06-10") == "Mon, Jun 10, 2024"
    assert format_month_label(date(2024, 12, 31)) == "December 2024"
