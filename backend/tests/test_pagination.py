"""Tests for page arithmetic."""

import pytest

from petclinic.core.pagination import page_window, paginate, parse_page


@pytest.mark.parametrize(
    "total_items, page_size, expected_pages",
    [
        (0, 5, 1),
        (1, 5, 1),
        (5, 5, 1),
        (6, 5, 2),
        (10, 5, 2),
        (11, 5, 3),
        (7, 1, 7),
    ],
)
def test_total_pages(total_items, page_size, expected_pages):
    window = page_window(total_items, page_size, 1)
    assert window.total_pages == expected_pages
    assert window.total_items == total_items


@pytest.mark.parametrize("requested", [0, -1, -50])
def test_page_below_one_clamps_to_first(requested):
    window = page_window(12, 5, requested)
    assert window.current_page == 1
    assert window.offset == 0
    assert window.limit == 5


def test_page_past_end_is_empty_but_keeps_number():
    page = paginate(list(range(12)), 5, 999)
    assert page.items == []
    assert page.current_page == 999
    assert page.total_pages == 3
    assert page.total_items == 12


def test_last_page_is_partial():
    page = paginate(list(range(12)), 5, 3)
    assert page.items == [10, 11]
    assert page.current_page == 3


def test_middle_page_slice():
    page = paginate(list("abcdefghij"), 5, 2)
    assert page.items == list("fghij")


def test_empty_listing_has_one_page():
    page = paginate([], 5, 1)
    assert page.items == []
    assert page.total_pages == 1
    assert page.total_items == 0


def test_non_positive_page_size_rejected():
    with pytest.raises(ValueError):
        page_window(10, 0, 1)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 1),
        ("", 1),
        ("abc", 1),
        ("0", 1),
        ("-3", 1),
        ("2", 2),
        (" 4 ", 4),
        (3, 3),
    ],
)
def test_parse_page(raw, expected):
    assert parse_page(raw) == expected
