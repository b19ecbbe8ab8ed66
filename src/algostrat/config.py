from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .reverser import (
    DEFAULT_MAX_DEPTH,
    REVERSERS,
    ListReverser,
    get_reverser,
    max_supported_depth,
)
from .sorter import SORTERS, Sorter, get_sorter

DEFAULT_SORT_STRATEGY = "heap"
DEFAULT_REVERSE_STRATEGY = "iterative"


def _normalize_strategy(raw: Any, choices: dict[str, Any], fallback: str) -> str:
    if isinstance(raw, str):
        item = raw.strip().lower()
        if item in choices:
            return item
    return fallback


def _normalize_depth(raw: Any) -> int | None:
    # bool is an int subclass but never a meaningful depth
    if isinstance(raw, bool) or not isinstance(raw, int):
        return DEFAULT_MAX_DEPTH
    if raw <= 0:
        return None
    if raw > max_supported_depth():
        return DEFAULT_MAX_DEPTH
    return raw


@dataclass
class AlgostratConfig:
    sort_strategy: str = DEFAULT_SORT_STRATEGY
    reverse_strategy: str = DEFAULT_REVERSE_STRATEGY
    max_recursion_depth: int | None = DEFAULT_MAX_DEPTH

    @classmethod
    def load(cls, root: Path) -> AlgostratConfig:
        pyproject = root / "pyproject.toml"
        sort_strategy: Any = None
        reverse_strategy: Any = None
        max_depth: Any = DEFAULT_MAX_DEPTH

        if pyproject.exists():
            with pyproject.open("rb") as handle:
                data = tomllib.load(handle)
            tool_cfg = data.get("tool", {}).get("algostrat", {})
            sort_strategy = tool_cfg.get("sort_strategy")
            reverse_strategy = tool_cfg.get("reverse_strategy")
            max_depth = tool_cfg.get("max_recursion_depth", max_depth)

        return cls(
            sort_strategy=_normalize_strategy(
                sort_strategy, SORTERS, DEFAULT_SORT_STRATEGY
            ),
            reverse_strategy=_normalize_strategy(
                reverse_strategy, REVERSERS, DEFAULT_REVERSE_STRATEGY
            ),
            max_recursion_depth=_normalize_depth(max_depth),
        )

    def sorter(self, name: str | None = None) -> Sorter:
        return get_sorter(name or self.sort_strategy)

    def reverser(self, name: str | None = None) -> ListReverser:
        return get_reverser(
            name or self.reverse_strategy, max_depth=self.max_recursion_depth
        )
