"""In-place reversal of singly linked lists.

Every strategy rewires the existing nodes and never copies them, so the
reference passed in as ``head`` ends up as the tail of the reversed list.
Callers must keep the returned head and drop the old one. The chain reachable
from ``head`` must be finite and acyclic; only :class:`RecursiveReverser`
checks this, and only up to its depth bound.
"""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from .errors import InvalidInput, PreconditionViolation

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 500
# frames kept free for the callers of reverse()
RECURSION_HEADROOM = 200
SAMPLE_LIST_VALUES: tuple[int, ...] = (0, 1, 3, 5, 7)


def max_supported_depth() -> int:
    return sys.getrecursionlimit() - RECURSION_HEADROOM


@dataclass(eq=False, repr=False)
class ListNode:
    value: Any
    next: ListNode | None = None

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


def build_list(values: Iterable[Any]) -> ListNode | None:
    head: ListNode | None = None
    tail: ListNode | None = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def iter_values(head: ListNode | None) -> Iterator[Any]:
    node = head
    while node is not None:
        yield node.value
        node = node.next


def to_values(head: ListNode | None) -> list[Any]:
    return list(iter_values(head))


class ListReverser(ABC):
    name: str = ""

    @abstractmethod
    def reverse(self, head: ListNode | None) -> ListNode | None:
        """Reverse the list starting at ``head`` and return the new head."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class IterativeReverser(ListReverser):
    name = "iterative"

    def reverse(self, head: ListNode | None) -> ListNode | None:
        previous: ListNode | None = None
        current = head
        count = 0
        while current is not None:
            # the successor must be saved before the link is overwritten
            successor = current.next
            current.next = previous
            previous = current
            current = successor
            count += 1
        logger.debug("%s reversed %d nodes", self.name, count)
        return previous


class RecursiveReverser(ListReverser):
    """Post-order reversal using one stack frame per node.

    ``max_depth`` bounds the number of nodes (and so stack frames) accepted.
    The chain is measured before any link changes; a longer chain, including
    any cyclic one, raises :class:`PreconditionViolation`. The bound may not
    exceed :func:`max_supported_depth`, which leaves headroom below the
    interpreter recursion limit. ``None`` lifts the bound, leaving deep lists
    to fail with ``RecursionError``.
    """

    name = "recursive"

    def __init__(self, max_depth: int | None = DEFAULT_MAX_DEPTH) -> None:
        if max_depth is not None and max_depth < 1:
            raise InvalidInput(f"max_depth must be positive, got {max_depth}")
        if max_depth is not None and max_depth > max_supported_depth():
            raise InvalidInput(
                f"max_depth {max_depth} exceeds the supported depth "
                f"{max_supported_depth()} for the current recursion limit"
            )
        self.max_depth = max_depth

    def __repr__(self) -> str:
        return f"{type(self).__name__}(max_depth={self.max_depth!r})"

    def reverse(self, head: ListNode | None) -> ListNode | None:
        if self.max_depth is not None:
            self._check_depth(head, self.max_depth)
        new_head = self._reverse(head)
        logger.debug("%s reversed list ending at %r", self.name, head)
        return new_head

    def _reverse(self, head: ListNode | None) -> ListNode | None:
        if head is None or head.next is None:
            return head
        new_head = self._reverse(head.next)
        head.next.next = head
        head.next = None
        return new_head

    def _check_depth(self, head: ListNode | None, limit: int) -> None:
        count = 0
        node = head
        while node is not None:
            count += 1
            if count > limit:
                logger.debug(
                    "%s refused a list longer than %d nodes", self.name, limit
                )
                raise PreconditionViolation(
                    f"list is longer than {limit} nodes or contains a cycle"
                )
            node = node.next


class HeadInsertionReverser(ListReverser):
    # Moves the node after the original head to the front until none remain.
    name = "head-insertion"

    def reverse(self, head: ListNode | None) -> ListNode | None:
        if head is None:
            return None
        sentinel = ListNode(None, head)
        moves = 0
        while head.next is not None:
            moved = head.next
            head.next = moved.next
            moved.next = sentinel.next
            sentinel.next = moved
            moves += 1
        logger.debug("%s reversed %d nodes", self.name, moves + 1)
        return sentinel.next


REVERSERS: dict[str, type[ListReverser]] = {
    IterativeReverser.name: IterativeReverser,
    RecursiveReverser.name: RecursiveReverser,
    HeadInsertionReverser.name: HeadInsertionReverser,
}


def get_reverser(
    name: str, *, max_depth: int | None = DEFAULT_MAX_DEPTH
) -> ListReverser:
    key = name.strip().lower()
    if key not in REVERSERS:
        choices = ", ".join(sorted(REVERSERS))
        raise InvalidInput(
            f"unknown reverse strategy {name!r} (choose from {choices})"
        )
    if key == RecursiveReverser.name:
        return RecursiveReverser(max_depth=max_depth)
    return REVERSERS[key]()
