"""algostrat provides interchangeable sorting and linked-list reversal strategies."""

from .config import AlgostratConfig
from .errors import AlgostratError, InvalidInput, PreconditionViolation
from .reverser import (
    HeadInsertionReverser,
    IterativeReverser,
    ListNode,
    ListReverser,
    RecursiveReverser,
    build_list,
    get_reverser,
    to_values,
)
from .sorter import ExchangeSort, HeapSort, Sorter, get_sorter, render

__all__ = [
    "AlgostratConfig",
    "AlgostratError",
    "ExchangeSort",
    "HeadInsertionReverser",
    "HeapSort",
    "InvalidInput",
    "IterativeReverser",
    "ListNode",
    "ListReverser",
    "PreconditionViolation",
    "RecursiveReverser",
    "Sorter",
    "build_list",
    "get_reverser",
    "get_sorter",
    "render",
    "to_values",
]
