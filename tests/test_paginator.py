# tests/test_paginator.py

"""Tests for page slicing and the pager's page-number window."""

import unittest

from src.filters.paginator import (
    clamp_page,
    is_valid_page,
    paginate,
    total_pages,
    visible_pages,
)
from src.models.property import Property


def _props(count: int) -> list[Property]:
    """Create *count* minimal listings with sequential ids."""
    return [
        Property(
            id=f"P{i:02d}",
            title=f"Listing {i}",
            price=1000 + i,
            location="Madrid",
            area=50,
            type="piso",
            status="venta",
            office="Centro",
            date="01-01-2024",
        )
        for i in range(count)
    ]


class TestTotalPages(unittest.TestCase):
    """total_pages arithmetic."""

    def test_empty_is_zero(self) -> None:
        self.assertEqual(total_pages(0, 8), 0)

    def test_exact_multiple(self) -> None:
        self.assertEqual(total_pages(16, 8), 2)

    def test_rounds_up(self) -> None:
        self.assertEqual(total_pages(20, 8), 3)

    def test_single_item(self) -> None:
        self.assertEqual(total_pages(1, 8), 1)


class TestPaginate(unittest.TestCase):
    """paginate slicing and metadata."""

    def test_twenty_items_three_pages(self) -> None:
        props = _props(20)
        first = paginate(props, 1, 8)
        last = paginate(props, 3, 8)
        self.assertEqual(first.total_pages, 3)
        self.assertEqual(len(first.items), 8)
        self.assertEqual(len(last.items), 4)
        self.assertEqual(last.items[0].id, "P16")

    def test_empty_list_has_no_pages(self) -> None:
        view = paginate([], 1, 8)
        self.assertEqual(view.total_pages, 0)
        self.assertEqual(view.items, [])
        self.assertTrue(view.is_empty)
        self.assertEqual(view.visible_pages, [])

    def test_page_length_invariant(self) -> None:
        """len(items) == min(size, count - (page-1)*size) for every page."""
        for count in (1, 7, 8, 9, 20, 33):
            props = _props(count)
            pages = total_pages(count, 8)
            for page in range(1, pages + 1):
                with self.subTest(count=count, page=page):
                    view = paginate(props, page, 8)
                    expected = min(8, count - (page - 1) * 8)
                    self.assertEqual(len(view.items), expected)
                    self.assertGreaterEqual(len(view.items), 0)

    def test_out_of_range_slice_is_clipped(self) -> None:
        view = paginate(_props(5), 4, 8)
        self.assertEqual(view.items, [])

    def test_page_before_first_is_empty(self) -> None:
        view = paginate(_props(20), 0, 8)
        self.assertEqual(view.items, [])
        self.assertEqual(view.current_page, 0)
        self.assertEqual(view.total_items, 20)

    def test_has_previous_and_next(self) -> None:
        props = _props(20)
        self.assertFalse(paginate(props, 1, 8).has_previous)
        self.assertTrue(paginate(props, 1, 8).has_next)
        self.assertTrue(paginate(props, 3, 8).has_previous)
        self.assertFalse(paginate(props, 3, 8).has_next)


class TestPageBounds(unittest.TestCase):
    """is_valid_page and clamp_page."""

    def test_valid_range(self) -> None:
        self.assertTrue(is_valid_page(1, 3))
        self.assertTrue(is_valid_page(3, 3))
        self.assertFalse(is_valid_page(0, 3))
        self.assertFalse(is_valid_page(4, 3))

    def test_no_page_is_valid_when_empty(self) -> None:
        self.assertFalse(is_valid_page(1, 0))

    def test_clamp(self) -> None:
        self.assertEqual(clamp_page(5, 3), 3)
        self.assertEqual(clamp_page(0, 3), 1)
        self.assertEqual(clamp_page(2, 3), 2)

    def test_clamp_empty(self) -> None:
        self.assertEqual(clamp_page(4, 0), 1)


class TestVisiblePages(unittest.TestCase):
    """Compact page window with ellipsis markers."""

    def test_few_pages_all_shown(self) -> None:
        self.assertEqual(visible_pages(2, 3), [1, 2, 3])

    def test_single_page(self) -> None:
        self.assertEqual(visible_pages(1, 1), [1])

    def test_first_page_of_many(self) -> None:
        self.assertEqual(visible_pages(1, 10), [1, 2, None, 10])

    def test_middle_page(self) -> None:
        self.assertEqual(
            visible_pages(5, 10), [1, None, 4, 5, 6, None, 10]
        )

    def test_single_hidden_page_still_collapses(self) -> None:
        self.assertEqual(visible_pages(4, 5), [1, None, 3, 4, 5])

    def test_adjacent_neighbours_no_ellipsis(self) -> None:
        self.assertEqual(visible_pages(3, 5), [1, 2, 3, 4, 5])

    def test_last_page(self) -> None:
        self.assertEqual(visible_pages(10, 10), [1, None, 9, 10])

    def test_no_pages(self) -> None:
        self.assertEqual(visible_pages(1, 0), [])


if __name__ == "__main__":
    unittest.main()
