from __future__ import annotations

import argparse
import sys

import structlog

from poolbench.config import BenchConfig, ConfigError, load_config
from poolbench.executor import InvalidPoolSizeError, Runner, Strategy
from poolbench.log import configure_logging, get_logger
from poolbench.task import InvalidTaskError, make_batch

from .args import build_parser

logger = get_logger(__name__)


def run_cli(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        configure_logging(args.log_level, args.json_logs)

        match args.command:
            case "run":
                return cmd_run(args)
            case "list":
                return cmd_list(args)
            case _:
                return 2

    # Setup only: failures inside a strategy are mapped by cmd_run.
    except (ConfigError, InvalidTaskError, InvalidPoolSizeError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return 2

    except KeyboardInterrupt:
        return 130


def cmd_run(args: argparse.Namespace) -> int:
    config = _config_from(args)
    runner = Runner(config.max_workers)
    batch = make_batch(config.task_count, config.task_seconds)

    for strategy in config.strategies:
        print(f"{strategy.label}.")
        print("Wait...")
        with structlog.contextvars.bound_contextvars(strategy=strategy.cli_name):
            try:
                _, report = runner.measure(strategy, batch)
            except Exception as exc:
                logger.debug("strategy_failed", error=repr(exc))
                print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
                return 1

            logger.info(
                "strategy_finished",
                tasks=report.task_count,
                elapsed_ms=report.elapsed_ms,
            )
        print(report.render())

    return 0


def cmd_list(args: argparse.Namespace) -> int:
    for strategy in Strategy:
        print(f"{strategy.cli_name}: {strategy.label}")
    return 0


def _config_from(args: argparse.Namespace) -> BenchConfig:
    config = load_config(args.config) if args.config else BenchConfig()

    if args.tasks is not None:
        config.task_count = args.tasks
    if args.seconds is not None:
        config.task_seconds = args.seconds
    if args.max_workers is not None:
        config.max_workers = args.max_workers
    if args.strategies:
        config.strategies = tuple(args.strategies)

    return config
