import pytest

from tronald.paging import Page, Pageable
from tronald.rest.exceptions import InvalidArgumentError, TronaldClientError


def test_pageable_defaults():
    p = Pageable()
    assert p.page == 1
    assert p.size == 25


@pytest.mark.parametrize("page,size", [(0, 10), (1, 0), (-1, 5), (1, -3)])
def test_pageable_rejects_values_below_one(page, size):
    with pytest.raises(InvalidArgumentError):
        Pageable(page, size)


def test_pageable_rejects_non_integers():
    with pytest.raises(InvalidArgumentError):
        Pageable("1", 10)
    with pytest.raises(InvalidArgumentError):
        Pageable(True, 10)


def test_invalid_argument_is_not_a_client_error():
    with pytest.raises(ValueError) as exc_info:
        Pageable(0, 10)
    assert not isinstance(exc_info.value, TronaldClientError)


def test_pageable_navigation():
    p = Pageable(3, 10)
    assert p.next() == Pageable(4, 10)
    assert p.previous() == Pageable(2, 10)
    assert p.first() == Pageable(1, 10)
    assert p.previous_or_first() == Pageable(2, 10)


def test_pageable_previous_floors_at_first_page():
    p = Pageable(1, 10)
    assert p.previous() is p
    assert p.previous_or_first() == Pageable(1, 10)


@pytest.mark.parametrize("page,size", [(1, 1), (1, 25), (2, 5), (17, 3)])
def test_pageable_next_then_previous_is_identity(page, size):
    p = Pageable(page, size)
    assert p.next().previous() == p


def test_pageable_equality_and_hash():
    assert Pageable(2, 5) == Pageable(2, 5)
    assert Pageable(2, 5) != Pageable(5, 2)
    assert len({Pageable(2, 5), Pageable(2, 5), Pageable(3, 5)}) == 2


def test_pageable_is_immutable():
    p = Pageable(1, 10)
    with pytest.raises(AttributeError):
        p.page = 2


def test_page_requires_content():
    with pytest.raises(InvalidArgumentError):
        Page(None, Pageable(1, 10), 100)


def test_page_requires_pageable():
    with pytest.raises(InvalidArgumentError):
        Page([], None, 100)


def test_page_rejects_negative_total():
    with pytest.raises(InvalidArgumentError):
        Page([], Pageable(1, 10), -1)


def test_page_no_content():
    page = Page([], Pageable(1, 10), 0)
    assert list(page.content) == []
    assert page.number == 1
    assert page.size == 10
    assert page.number_of_elements == 0
    assert page.has_content is False
    assert page.total_pages == 1
    assert page.total_elements == 0
    assert page.has_next is False
    assert page.has_previous is False
    assert page.is_first is True
    assert page.is_last is True
    assert page.next_pageable() is None
    assert page.previous_pageable() is None


def test_page_single_partial_page():
    page = Page(["a", "b", "c"], Pageable(1, 5), 3)
    assert page.number_of_elements == 3
    assert page.total_pages == 1
    assert page.is_first and page.is_last
    assert page.next_pageable() is None
    assert page.previous_pageable() is None


def test_page_full_single_page():
    page = Page(["a", "b", "c", "d", "e"], Pageable(1, 5), 5)
    assert page.total_pages == 1
    assert page.has_next is False
    assert page.has_previous is False


def test_page_multiple_pages_first():
    page = Page(["a", "b", "c", "d", "e"], Pageable(1, 5), 50)
    assert page.total_pages == 10
    assert page.total_elements == 50
    assert page.has_next is True
    assert page.has_previous is False
    assert page.is_first is True
    assert page.is_last is False
    assert page.next_pageable() == Pageable(2, 5)
    assert page.previous_pageable() is None


def test_page_multiple_pages_last():
    page = Page(["a", "b", "c", "d", "e"], Pageable(10, 5), 50)
    assert page.number == 10
    assert page.has_next is False
    assert page.has_previous is True
    assert page.is_first is False
    assert page.is_last is True
    assert page.next_pageable() is None
    assert page.previous_pageable() == Pageable(9, 5)


def test_page_multiple_pages_middle():
    page = Page(["a", "b", "c", "d", "e"], Pageable(5, 5), 50)
    assert page.has_next is True
    assert page.has_previous is True
    assert page.is_first is False
    assert page.is_last is False
    assert page.next_pageable() == Pageable(6, 5)
    assert page.previous_pageable() == Pageable(4, 5)


def test_page_has_next_requires_two_pages_ahead():
    page = Page(["a", "b", "c", "d", "e"], Pageable(8, 5), 50)
    assert page.has_next is True
    assert page.next_pageable() == Pageable(9, 5)

    page = Page(["a", "b", "c", "d", "e"], Pageable(9, 5), 50)
    assert page.has_next is False
    assert page.is_last is True
    assert page.next_pageable() is None


def test_page_first_of_two_reports_no_next():
    page = Page(["a", "b", "c", "d", "e"], Pageable(1, 5), 10)
    assert page.total_pages == 2
    assert page.has_next is False
    assert page.is_last is True
    assert page.next_pageable() is None


def test_page_total_pages_rounds_up():
    page = Page(["a"], Pageable(3, 5), 11)
    assert page.total_pages == 3
    assert page.is_last is True


def test_page_first_and_last_pageable():
    page = Page(["a", "b", "c", "d", "e"], Pageable(5, 5), 50)
    assert page.first_pageable() == Pageable(1, 5)
    assert page.last_pageable() == Pageable(10, 5)


def test_page_content_is_a_snapshot():
    items = ["a", "b"]
    page = Page(items, Pageable(1, 5), 2)
    items.append("c")
    assert page.content == ("a", "b")
    assert page.number_of_elements == 2


def test_page_content_is_read_only():
    page = Page(["a", "b"], Pageable(1, 5), 2)
    with pytest.raises((TypeError, AttributeError)):
        page.content.append("c")
    with pytest.raises(AttributeError):
        page.total = 3


def test_page_iterates_content_in_order():
    page = Page(["a", "b", "c"], Pageable(1, 5), 3)
    assert list(page) == ["a", "b", "c"]
    assert len(page) == 3


def test_page_equality():
    assert Page(["a"], Pageable(1, 5), 1) == Page(("a",), Pageable(1, 5), 1)
    assert Page(["a"], Pageable(1, 5), 1) != Page(["a"], Pageable(1, 5), 2)
