import json
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml

from poolbench.executor import Strategy

from .types import BenchConfig, ConfigError, UnsupportedConfigFormatError


def load_config(path: str | Path) -> BenchConfig:
    pure_path = Path(path).expanduser().resolve()

    if not pure_path.exists():
        raise ConfigError(f"Config file not found: {pure_path}")

    if not pure_path.is_file():
        raise ConfigError(f"Config path is not a file: {pure_path}")

    fmt = _detect_format(pure_path)
    raw_file = _parse_file(pure_path, fmt)
    return _build_bench_config(raw_file)


def _detect_format(path: Path) -> str:
    fmt = path.suffix
    match fmt:
        case ".yaml" | ".yml":
            return "yaml"
        case ".toml":
            return "toml"
        case ".json":
            return "json"
        case _:
            raise UnsupportedConfigFormatError(
                f"Non supported file extension: {fmt}\n Expected format: .yml/.yaml, .toml, .json"
            )


def _parse_file(path: Path, fmt: str) -> Mapping[str, Any]:
    text = path.read_text(encoding="utf-8")
    match fmt:
        case "yaml":
            try:
                raw_file = yaml.safe_load(text)
            except yaml.YAMLError as exc:
                raise ConfigError(f"{path}: invalid YAML") from exc
        case "toml":
            try:
                raw_file = tomllib.loads(text)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(f"{path}: invalid TOML") from exc
        case "json":
            try:
                raw_file = json.loads(text)
            except json.JSONDecodeError as exc:
                raise ConfigError(f"{path}: invalid JSON") from exc
        case _:
            raise AssertionError("Unreachable")

    if not isinstance(raw_file, Mapping):
        raise ConfigError(
            f"{path}: parsed succesfully but top-level value is not an object: {type(raw_file)}"
        )

    return raw_file


def _build_bench_config(raw: Mapping[str, Any]) -> BenchConfig:
    if not "bench" in raw:
        raise ConfigError("Missing 'bench' field")

    fields = raw["bench"]
    if not isinstance(fields, Mapping):
        raise ConfigError(f"'bench' must be a mapping, got {type(fields)}")

    keys = {"tasks", "seconds", "max_workers", "strategies"}
    for field in fields.keys():
        if field not in keys:
            raise ConfigError(f"bench: Can't process: {field}")

    config = BenchConfig()

    if "tasks" in fields:
        config.task_count = _non_negative_int(fields["tasks"], "tasks")

    if "seconds" in fields:
        config.task_seconds = _non_negative_int(fields["seconds"], "seconds")

    if "max_workers" in fields:
        workers = _non_negative_int(fields["max_workers"], "max_workers")
        if workers < 1:
            raise ConfigError("bench: max_workers must be at least 1")
        config.max_workers = workers

    if "strategies" in fields:
        config.strategies = _strategies(fields["strategies"])

    return config


def _non_negative_int(value: Any, name: str) -> int:
    # bool is an int subclass; "tasks: yes" is almost certainly a mistake
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"bench: {name} should be an integer, got {type(value)}")

    if value < 0:
        raise ConfigError(f"bench: {name} can't be negative")

    return value


def _strategies(value: Any) -> tuple[Strategy, ...]:
    if not isinstance(value, list):
        raise ConfigError("bench: strategies should be in a list.")

    if len(value) < 1:
        raise ConfigError("bench: strategies can't be empty")

    out: list[Strategy] = []
    for item in value:
        if not isinstance(item, str):
            raise ConfigError(f"bench: {item} should be a string in the strategies list")

        try:
            strategy = Strategy.from_name(item.strip())
        except KeyError:
            raise ConfigError(f"bench: unknown strategy '{item}'") from None

        # Allows to ignore duplicate strategies
        if strategy in out:
            continue

        out.append(strategy)

    return tuple(out)
