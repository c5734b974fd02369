import logging

import pytest
from hypothesis import given, strategies as st

from src.build_lib import (
    BuildViewerError,
    EmptyInputError,
    NoHeaderError,
    NoValidRowsError,
    parse_catalog,
    parse_stat,
)

# Standard Unit Tests


def test_row_number_column_is_dropped():
    """Does it handle the canonical catalog row?"""
    text = "No.,Name,Kind,ENLoad,Weight\r\n1,Leg,Light,10,5"
    parts = parse_catalog(text)

    assert parts == [{"Name": "Leg", "Kind": "Light", "ENLoad": 10.0, "Weight": 5.0}]


def test_no_row_number_column():
    text = "Name,Kind,ENLoad,Weight\r\nLeg,Light,10,5\r\nArm,Heavy,3.5,"
    parts = parse_catalog(text)

    assert len(parts) == 2
    assert parts[0]["Name"] == "Leg"
    assert parts[1] == {"Name": "Arm", "Kind": "Heavy", "ENLoad": 3.5, "Weight": None}


def test_fields_are_trimmed_and_blank_lines_skipped():
    text = "  No. , Name ,Kind,ENLoad,Weight\r\n\r\n   \r\n1, Leg , Light , 10 , 5 \r\n"
    parts = parse_catalog(text)

    assert parts == [{"Name": "Leg", "Kind": "Light", "ENLoad": 10.0, "Weight": 5.0}]


def test_non_numeric_stat_is_absent_with_warning(caplog):
    """N/A must not raise, and must not surface as NaN."""
    text = "Name,ENLoad,Weight\r\nLeg,N/A,5"

    with caplog.at_level(logging.WARNING):
        parts = parse_catalog(text)

    assert parts[0]["ENLoad"] is None
    assert parts[0]["Weight"] == 5.0
    assert "not a number" in caplog.text


def test_zero_stat_is_kept():
    """A literal 0 is a real value, not a missing one."""
    parts = parse_catalog("Name,ENLoad,Weight\r\nBooster,0,0.0")

    assert parts[0]["ENLoad"] == 0.0
    assert parts[0]["Weight"] == 0.0


def test_blank_text_fields_stay_strings():
    parts = parse_catalog("Name,Kind,ENLoad\r\nLeg,,")

    assert parts[0]["Kind"] == ""
    assert parts[0]["ENLoad"] is None


def test_short_row_is_skipped(caplog):
    text = "Name,Kind,ENLoad,Weight\r\nLeg,Light,10,5\r\nBroken,Light\r\nArm,Heavy,1,2"

    with caplog.at_level(logging.WARNING):
        parts = parse_catalog(text)

    assert [p["Name"] for p in parts] == ["Leg", "Arm"]
    assert "Skipping catalog row" in caplog.text


def test_row_number_offset_counts_toward_length():
    """With a No. column the row needs one extra value."""
    text = "No.,Name,Weight\r\n1,Leg\r\n2,Arm,4"
    parts = parse_catalog(text)

    assert parts == [{"Name": "Arm", "Weight": 4.0}]


def test_extra_values_are_ignored():
    parts = parse_catalog("Name,Weight\r\nLeg,5,extra,columns")

    assert parts == [{"Name": "Leg", "Weight": 5.0}]


def test_order_is_preserved(catalog_text):
    parts = parse_catalog(catalog_text)

    assert [p["Name"] for p in parts] == ["Leg", "Core", "Booster"]
    assert parts[2]["ENLoad"] == 0.0
    assert parts[2]["Weight"] is None


def test_header_only_catalog_is_empty():
    assert parse_catalog("Name,Kind\r\n") == []


# Failure Modes


@pytest.mark.parametrize("text", ["", "\r\n", "   \r\n\r\n  "])
def test_empty_input(text):
    with pytest.raises(EmptyInputError):
        parse_catalog(text)


def test_header_with_only_row_number():
    with pytest.raises(NoHeaderError):
        parse_catalog("No.\r\n1")


def test_no_valid_rows():
    with pytest.raises(NoValidRowsError):
        parse_catalog("Name,Kind,Weight\r\nLeg\r\nArm,Heavy")


def test_parse_stat_rejects_non_finite():
    assert parse_stat("nan") is None
    assert parse_stat("inf") is None
    assert parse_stat("") is None
    assert parse_stat("12.5") == 12.5
    assert parse_stat("1_000") is None


def test_grouped_digits_are_not_numbers(caplog):
    with caplog.at_level(logging.WARNING):
        parts = parse_catalog("Name,Weight\r\nCore,1_000")

    assert parts[0]["Weight"] is None
    assert "not a number" in caplog.text


# Stress Testing


@given(st.text())
def test_parser_never_crashes(garbage_string):
    """
    STRESS TEST: Any input either parses or raises one of our own errors.
    """
    try:
        parts = parse_catalog(garbage_string)
    except BuildViewerError:
        return

    assert isinstance(parts, list)
    for part in parts:
        for column in ("ENLoad", "Weight"):
            value = part.get(column)
            assert value is None or isinstance(value, float)
