from __future__ import annotations

import argparse

from poolbench.executor import Strategy


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="poolbench")

    parser.add_argument(
        "--config",
        default=None,
        help="Path to a YAML, TOML or JSON config file",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Log level for diagnostics on stderr",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit logs as JSON lines",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
    )

    # run
    run = subparsers.add_parser("run", help="Run the benchmark")
    run.add_argument(
        "strategies",
        nargs="*",
        type=_strategy,
        help="Strategies to run, in order (default: all)",
    )
    run.add_argument("--tasks", type=int, help="Number of tasks in the batch")
    run.add_argument("--seconds", type=int, help="Duration of each task")
    run.add_argument(
        "--max-workers",
        type=int,
        help="Worker cap for the dedicated pool",
    )

    # list
    subparsers.add_parser("list", help="List strategies")

    return parser


def _strategy(name: str) -> Strategy:
    try:
        return Strategy.from_name(name)
    except KeyError:
        names = ", ".join(strategy.cli_name for strategy in Strategy)
        raise argparse.ArgumentTypeError(
            f"unknown strategy '{name}' (expected one of: {names})"
        ) from None
