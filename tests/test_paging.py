from __future__ import annotations

import pytest

from cashcard.domain.paging import (
    DEFAULT_SORT,
    InvalidSortError,
    MAX_OFFSET,
    Order,
    PageRequest,
    Sort,
    page_request_from_query,
    parse_sort,
)


def test_parse_sort_field_and_direction():
    assert parse_sort(["amount,desc"]) == Sort((Order("amount", "desc"),))
    assert parse_sort(["amount"]) == Sort((Order("amount", "asc"),))
    assert parse_sort(["owner", "amount,DESC"]) == Sort((Order("owner", "asc"), Order("amount", "desc")))


def test_trailing_direction_applies_to_every_field():
    assert parse_sort(["owner,amount,desc"]) == Sort((Order("owner", "desc"), Order("amount", "desc")))


def test_empty_sort_is_unsorted():
    assert not parse_sort(None).is_sorted
    assert not parse_sort(["", " , "]).is_sorted


@pytest.mark.parametrize("raw", ["bogus", "desc", "amount,sideways", "password,asc"])
def test_parse_sort_rejects_unknown_fields(raw):
    with pytest.raises(InvalidSortError):
        parse_sort([raw])


def test_page_request_defaults():
    req = page_request_from_query(None, None, None, default_size=20, max_size=2000)
    assert req == PageRequest(page=0, size=20, sort=DEFAULT_SORT)
    assert req.sort == Sort.by("amount")


def test_page_request_clamps_out_of_range_values():
    assert page_request_from_query(-3, 5, None, default_size=20, max_size=2000).page == 0
    assert page_request_from_query(0, 0, None, default_size=20, max_size=2000).size == 20
    assert page_request_from_query(0, 5000, None, default_size=20, max_size=2000).size == 2000


def test_page_request_keeps_explicit_sort_and_offset():
    req = page_request_from_query(2, 5, ["amount,desc"], default_size=20, max_size=2000)
    assert req.offset == 10
    assert req.sort == Sort.by("amount", direction="desc")


def test_page_request_keeps_offset_within_64_bits():
    req = page_request_from_query(10**30, 20, None, default_size=20, max_size=2000)
    assert req.offset + req.size <= MAX_OFFSET
    assert req.page > 0
