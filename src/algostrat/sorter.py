from __future__ import annotations

import heapq
import logging
from abc import ABC, abstractmethod
from collections.abc import MutableSequence, Sequence
from typing import Any

from .errors import InvalidInput

logger = logging.getLogger(__name__)

SAMPLE_SEQUENCE: tuple[int, ...] = (8, 34, 64, 51, 33, 22, 44, 55, 88, 1, 0, 2, 2)


def validate_sequence(sequence: object) -> MutableSequence[Any]:
    """Check that ``sequence`` can be sorted in place.

    Every element is ordered against the first one; a ``TypeError`` from
    either direction, or an element that is not equal to itself (NaN), means
    the elements lack a total order. Pairs that only fail against each other
    surface later, while :meth:`Sorter.sort` orders its private copy.
    Nothing is mutated here.
    """
    if sequence is None:
        logger.debug("Rejected sequence: None")
        raise InvalidInput("sequence is None")
    if not isinstance(sequence, MutableSequence):
        logger.debug("Rejected sequence of type %s", type(sequence).__name__)
        raise InvalidInput(
            f"expected a mutable sequence, got {type(sequence).__name__}"
        )
    if not sequence:
        return sequence

    first = sequence[0]
    for index, item in enumerate(sequence):
        try:
            item < first
            first < item
        except TypeError as exc:
            logger.debug("Rejected element %d: %r", index, item)
            raise InvalidInput(
                f"element {index} ({item!r}) is not comparable with {first!r}"
            ) from exc
        if item != item:
            logger.debug("Rejected element %d: %r", index, item)
            raise InvalidInput(f"element {index} ({item!r}) has no total order")
    return sequence


def render(sequence: Sequence[Any] | None) -> str:
    if sequence is None or len(sequence) == 0:
        raise InvalidInput("no element or invalid element in sequence")
    return "[" + ",".join(str(item) for item in sequence) + "]"


class Sorter(ABC):
    """Sorts a mutable sequence in place into non-decreasing order.

    Strategies order a private copy of the elements. The caller's sequence is
    only written once the copy is fully sorted, so a pair of elements that
    turns out to be incomparable mid-sort raises :class:`InvalidInput` with
    the sequence untouched.
    """

    name: str = ""

    def sort(self, sequence: MutableSequence[Any]) -> MutableSequence[Any]:
        target = validate_sequence(sequence)
        items = list(target)
        try:
            self._sort_items(items)
        except TypeError as exc:
            logger.debug("%s hit incomparable elements: %s", self.name, exc)
            raise InvalidInput(
                f"elements are not mutually comparable: {exc}"
            ) from exc
        for index, item in enumerate(items):
            target[index] = item
        return target

    @abstractmethod
    def _sort_items(self, items: list[Any]) -> None:
        """Order ``items`` in place."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ExchangeSort(Sorter):
    # Every pass runs to completion even once the sequence is ordered.
    name = "exchange"

    def _sort_items(self, items: list[Any]) -> None:
        length = len(items)
        comparisons = 0
        swaps = 0
        for done in range(length - 1):
            for index in range(length - 1 - done):
                comparisons += 1
                if items[index] > items[index + 1]:
                    items[index], items[index + 1] = items[index + 1], items[index]
                    swaps += 1
        logger.debug(
            "%s sorted %d elements (%d comparisons, %d swaps)",
            self.name,
            length,
            comparisons,
            swaps,
        )


class HeapSort(Sorter):
    name = "heap"

    def _sort_items(self, items: list[Any]) -> None:
        heap: list[Any] = []
        for item in items:
            heapq.heappush(heap, item)
        for index in range(len(items)):
            items[index] = heapq.heappop(heap)
        logger.debug("%s sorted %d elements", self.name, len(items))


SORTERS: dict[str, type[Sorter]] = {
    ExchangeSort.name: ExchangeSort,
    HeapSort.name: HeapSort,
}


def get_sorter(name: str) -> Sorter:
    key = name.strip().lower()
    try:
        return SORTERS[key]()
    except KeyError:
        choices = ", ".join(sorted(SORTERS))
        raise InvalidInput(
            f"unknown sort strategy {name!r} (choose from {choices})"
        ) from None
