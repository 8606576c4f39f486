"""Tests for drag-and-drop section ordering."""

import pytest

from job_vault.errors import ErrorKind, ServiceError
from job_vault.resume.layout import SectionLayout
from job_vault.resume.ordering import move, reorder, sort_by_order


def _sections(*titles):
    return [{"id": f"s{i}", "title": title, "order_index": i} for i, title in enumerate(titles)]


def test_move_forward_and_backward():
    assert move(["a", "b", "c", "d"], 0, 2) == ["b", "c", "a", "d"]
    assert move(["a", "b", "c", "d"], 3, 1) == ["a", "d", "b", "c"]


def test_move_to_same_index_is_identity():
    assert move(["a", "b", "c"], 1, 1) == ["a", "b", "c"]


def test_move_does_not_mutate_input():
    items = ["a", "b", "c"]
    move(items, 0, 2)
    assert items == ["a", "b", "c"]


def test_reorder_renumbers_contiguously():
    result = reorder(_sections("Summary", "Experience", "Skills", "Education"), 0, 2)

    assert [s["title"] for s in result] == ["Experience", "Skills", "Summary", "Education"]
    assert [s["order_index"] for s in result] == [0, 1, 2, 3]


def test_reorder_leaves_input_untouched():
    sections = _sections("A", "B")
    reorder(sections, 1, 0)
    assert sections[0]["title"] == "A"
    assert sections[0]["order_index"] == 0


def test_reorder_copies_pydantic_models():
    sections = [
        SectionLayout(type="custom", title=t, order_index=i, paragraphs=[]) for i, t in enumerate("XYZ")
    ]
    result = reorder(sections, 2, 0)
    assert [(s.title, s.order_index) for s in result] == [("Z", 0), ("X", 1), ("Y", 2)]
    assert sections[2].order_index == 2


@pytest.mark.parametrize("source,destination", [(-1, 0), (3, 0), (0, 3), (0, -1)])
def test_out_of_range_indices_rejected(source, destination):
    with pytest.raises(ServiceError) as exc_info:
        reorder(_sections("A", "B", "C"), source, destination)
    assert exc_info.value.kind is ErrorKind.VALIDATION_FAILED


def test_reorder_of_empty_list_rejected():
    with pytest.raises(ServiceError):
        reorder([], 0, 0)


def test_sort_by_order_ignores_insertion_order():
    sections = [{"title": "c", "order_index": 2}, {"title": "a", "order_index": 0}, {"title": "b", "order_index": 1}]
    assert [s["title"] for s in sort_by_order(sections)] == ["a", "b", "c"]
