from __future__ import annotations

import math
from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algostrat import ExchangeSort, HeapSort, InvalidInput, Sorter, get_sorter, render
from algostrat.sorter import SAMPLE_SEQUENCE, validate_sequence

STRATEGIES: list[Sorter] = [ExchangeSort(), HeapSort()]
STRATEGY_IDS = [sorter.name for sorter in STRATEGIES]

int_lists = st.lists(st.integers(), max_size=60)


def _is_non_decreasing(values: list[Any]) -> bool:
    return all(left <= right for left, right in zip(values, values[1:]))


class _CountingValue:
    def __init__(self, value: int, counter: list[int]) -> None:
        self.value = value
        self.counter = counter

    def __lt__(self, other: _CountingValue) -> bool:
        return self.value < other.value

    def __gt__(self, other: _CountingValue) -> bool:
        self.counter[0] += 1
        return self.value > other.value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _CountingValue) and self.value == other.value


@pytest.mark.parametrize("sorter", STRATEGIES, ids=STRATEGY_IDS)
@given(values=int_lists)
def test_sort_yields_ordered_permutation(sorter: Sorter, values: list[int]) -> None:
    expected = sorted(values)
    result = sorter.sort(values)

    assert result is values
    assert _is_non_decreasing(result)
    assert result == expected


@given(values=int_lists)
def test_strategies_agree(values: list[int]) -> None:
    assert ExchangeSort().sort(list(values)) == HeapSort().sort(list(values))


@pytest.mark.parametrize("sorter", STRATEGIES, ids=STRATEGY_IDS)
@pytest.mark.parametrize(
    "values",
    [
        [],
        [42],
        [1, 2, 3, 4, 5],
        [5, 4, 3, 2, 1],
        [2, 2, 2, 1, 1],
        [3.5, -1, 2, 0.25],
        ["pear", "apple", "fig"],
    ],
)
def test_sort_edge_inputs(sorter: Sorter, values: list[Any]) -> None:
    assert sorter.sort(list(values)) == sorted(values)


@pytest.mark.parametrize("sorter", STRATEGIES, ids=STRATEGY_IDS)
def test_sample_sequence_renders_sorted(sorter: Sorter) -> None:
    result = sorter.sort(list(SAMPLE_SEQUENCE))

    assert render(result) == "[0,1,2,2,8,22,33,34,44,51,55,64,88]"


@pytest.mark.parametrize("values", [[], None])
def test_render_rejects_empty(values: list[int] | None) -> None:
    with pytest.raises(InvalidInput):
        render(values)


@pytest.mark.parametrize("values", [[5, 1, 4], [1, 2, 3, 4, 5, 6], [7]])
def test_exchange_sort_runs_every_pass(values: list[int]) -> None:
    counter = [0]
    items = [_CountingValue(value, counter) for value in values]

    ExchangeSort().sort(items)

    length = len(values)
    assert counter[0] == length * (length - 1) // 2
    assert [item.value for item in items] == sorted(values)


@pytest.mark.parametrize("sorter", STRATEGIES, ids=STRATEGY_IDS)
@pytest.mark.parametrize(
    "values",
    [
        None,
        (3, 1, 2),
        "cab",
        [3, "a", 1],
        [2.0, math.nan, 1.0],
        [{1}, 3],
        [(2,), (0,), (1, "a"), (1, 2)],
        [(0,), (1, 2), (1, "a")],
    ],
)
def test_invalid_input_is_rejected_untouched(sorter: Sorter, values: Any) -> None:
    snapshot = list(values) if isinstance(values, list) else values

    with pytest.raises(InvalidInput):
        sorter.sort(values)

    if isinstance(values, list):
        assert values == snapshot


def test_invalid_input_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        validate_sequence(None)


def test_get_sorter_by_name() -> None:
    assert isinstance(get_sorter("exchange"), ExchangeSort)
    assert isinstance(get_sorter(" HEAP "), HeapSort)

    with pytest.raises(InvalidInput, match="unknown sort strategy"):
        get_sorter("quick")


@pytest.mark.parametrize("sorter", STRATEGIES, ids=STRATEGY_IDS)
def test_pairwise_incomparable_elements_leave_sequence_untouched(
    sorter: Sorter,
) -> None:
    # each tuple compares fine with the first one, but not with each other
    values = [(2,), (0,), (1, "a"), (1, 2)]
    before = [id(item) for item in values]

    with pytest.raises(InvalidInput, match="not mutually comparable"):
        sorter.sort(values)

    assert [id(item) for item in values] == before
