"""
Section ordering for drag-and-drop reordering.

``move`` is the permutation; ``reorder`` additionally rewrites ``order_index``
to 0..N-1 in the final order and returns copies, leaving the input untouched.
"""

from collections.abc import Mapping, Sequence
from typing import TypeVar

from pydantic import BaseModel

from job_vault.errors import ErrorKind, ServiceError

T = TypeVar("T")


def move(items: Sequence[T], source_index: int, destination_index: int) -> list[T]:
    """Remove the item at ``source_index`` and reinsert it at ``destination_index``."""
    size = len(items)
    if not 0 <= source_index < size:
        raise ServiceError(ErrorKind.VALIDATION_FAILED, f"Source index {source_index} out of range 0..{size - 1}")
    if not 0 <= destination_index < size:
        raise ServiceError(
            ErrorKind.VALIDATION_FAILED, f"Destination index {destination_index} out of range 0..{size - 1}"
        )

    result = list(items)
    moved = result.pop(source_index)
    result.insert(destination_index, moved)
    return result


def _with_index(item, index: int):
    if isinstance(item, BaseModel):
        return item.model_copy(update={"order_index": index})
    if isinstance(item, Mapping):
        return {**item, "order_index": index}
    raise TypeError(f"Cannot set order_index on {type(item).__name__}")


def reorder(sections: Sequence, source_index: int, destination_index: int) -> list:
    """Move one section and renumber every section to match its new position."""
    return [_with_index(section, i) for i, section in enumerate(move(sections, source_index, destination_index))]


def sort_by_order(sections: Sequence) -> list:
    """Sections in display order (``order_index`` ascending)."""

    def key(section):
        return section["order_index"] if isinstance(section, Mapping) else section.order_index

    return sorted(sections, key=key)
