from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from .config import AlgostratConfig
from .errors import AlgostratError
from .reverser import REVERSERS, SAMPLE_LIST_VALUES, build_list, to_values
from .sorter import SAMPLE_SEQUENCE, SORTERS, render

logger = logging.getLogger(__name__)


def _find_project_root(start: Path) -> Path:
    current = start if start.is_dir() else start.parent
    for ancestor in [current, *current.parents]:
        if (ancestor / "pyproject.toml").exists():
            return ancestor
    return current


def _parse_value(raw: str) -> Any:
    for convert in (int, float):
        try:
            return convert(raw)
        except ValueError:
            continue
    return raw


def _run_sort(args: argparse.Namespace, config: AlgostratConfig) -> None:
    values = [_parse_value(raw) for raw in args.values] or list(SAMPLE_SEQUENCE)
    sorter = config.sorter(args.strategy)
    logger.info("Sorting %d values with %s", len(values), sorter.name)
    print(render(sorter.sort(values)))


def _run_reverse(args: argparse.Namespace, config: AlgostratConfig) -> None:
    values = [_parse_value(raw) for raw in args.values] or list(SAMPLE_LIST_VALUES)
    reverser = config.reverser(args.strategy)
    logger.info("Reversing %d nodes with %s", len(values), reverser.name)
    print(render(to_values(reverser.reverse(build_list(values)))))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Sort sequences and reverse linked lists with pluggable strategies."
    )
    parser.add_argument(
        "--root", type=Path, help="Override the project root used for config"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log strategy details to stderr"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    sort_parser = commands.add_parser("sort", help="Sort values in ascending order")
    sort_parser.add_argument(
        "values", nargs="*", help="Values to sort (defaults to a sample sequence)"
    )
    sort_parser.add_argument(
        "--strategy", choices=sorted(SORTERS), help="Sort strategy to use"
    )
    sort_parser.set_defaults(handler=_run_sort)

    reverse_parser = commands.add_parser(
        "reverse", help="Build a linked list from values and reverse it"
    )
    reverse_parser.add_argument(
        "values", nargs="*", help="List values head to tail (defaults to a sample list)"
    )
    reverse_parser.add_argument(
        "--strategy", choices=sorted(REVERSERS), help="Reverse strategy to use"
    )
    reverse_parser.set_defaults(handler=_run_reverse)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    root = args.root.resolve() if args.root else _find_project_root(Path.cwd())
    config = AlgostratConfig.load(root)

    try:
        args.handler(args, config)
    except AlgostratError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
