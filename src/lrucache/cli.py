"""CLI command handling

Provides the demo and replay commands.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

import structlog

from lrucache.cache import LRUCache
from lrucache.config import AppConfig, ReportConfig
from lrucache.exceptions import CacheError, ConfigurationError, OperationParseError
from lrucache.reports import render_snapshot

logger = structlog.get_logger()


def configure_logging(verbose: bool = False) -> None:
    """Configure structlog"""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer() if verbose else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


@dataclass(frozen=True)
class Operation:
    """One parsed line of a replay script"""

    name: str
    key: str
    value: str | None = None
    line_number: int = 0


def parse_operations(text: str) -> list[Operation]:
    """Parse a replay script

    Each non-empty line is ``put <key> <value>``, ``get <key>`` or
    ``delete <key>``. Lines starting with ``#`` are comments. A put value
    is the rest of the line and may contain spaces.

    Raises:
        OperationParseError: a line is not one of the forms above
    """
    operations = []
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.split(maxsplit=2)
        name = parts[0].lower()
        if name == "put":
            if len(parts) < 3:
                raise OperationParseError(number, "put needs a key and a value")
            operations.append(Operation("put", parts[1], parts[2], number))
        elif name in ("get", "delete"):
            if len(parts) != 2:
                raise OperationParseError(number, f"{name} needs exactly one key")
            operations.append(Operation(name, parts[1], None, number))
        else:
            raise OperationParseError(number, f"unknown operation {parts[0]!r}")
    return operations


def apply_operation(cache: LRUCache[str, str], op: Operation) -> str | None:
    """Apply one operation and return a line to print, if any"""
    log = logger.bind(op=op.name, key=op.key, line=op.line_number)
    if op.name == "put":
        evicted = cache.put(op.key, op.value)
        if evicted is not None:
            log.info("evicted", evicted_key=evicted.key)
        return None
    if op.name == "get":
        if op.key not in cache:
            log.debug("miss")
            return f"get {op.key} -> (absent)"
        return f"get {op.key} -> {cache.get(op.key)}"
    cache.delete(op.key)
    return None


def _resolve_capacity(args: argparse.Namespace, config: AppConfig) -> int:
    return args.capacity if args.capacity is not None else config.cache.capacity


def _print_snapshot(cache: LRUCache[str, str], report: ReportConfig) -> None:
    print(render_snapshot(cache.snapshot(), title=report.title, max_width=report.max_value_width))


def run_demo(cache: LRUCache[str, str], report: ReportConfig) -> None:
    """Walk through fill, evict, touch, update and delete, printing each state"""
    for i in range(1, cache.capacity + 1):
        cache.put(f"key{i}", str(i))
    print("Cache is at full capacity")
    _print_snapshot(cache, report)

    c = cache.capacity
    steps = [
        (f'Inserting element "key{c + 1}"', Operation("put", f"key{c + 1}", str(c + 1))),
        ('Getting element "key3"', Operation("get", "key3")),
        (f'Updating element "key{c}"', Operation("put", f"key{c}", "updated value")),
        ('Deleting element "key2"', Operation("delete", "key2")),
        (f'Adding element "key{c + 2}"', Operation("put", f"key{c + 2}", str(c + 2))),
        (f'Adding element "key{c + 3}"', Operation("put", f"key{c + 3}", str(c + 3))),
    ]
    for message, op in steps:
        print(f"\n{message}")
        apply_operation(cache, op)
        _print_snapshot(cache, report)


def cmd_demo(args: argparse.Namespace) -> int:
    """Run the demo command"""
    configure_logging(args.verbose)
    try:
        config = AppConfig.from_env()
        cache: LRUCache[str, str] = LRUCache(_resolve_capacity(args, config))
        run_demo(cache, config.report)
        return 0
    except CacheError as e:
        logger.error("demo failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_replay(args: argparse.Namespace) -> int:
    """Run the replay command"""
    configure_logging(args.verbose)
    log = logger.bind(path=str(args.file))
    try:
        config = AppConfig.from_env()
        cache: LRUCache[str, str] = LRUCache(_resolve_capacity(args, config))
        try:
            text = args.file.read_text()
        except OSError as e:
            raise ConfigurationError(f"cannot read {args.file}: {e}") from e
        operations = parse_operations(text)
        log.info("replaying", operations=len(operations), capacity=cache.capacity)
        for op in operations:
            line = apply_operation(cache, op)
            if line is not None:
                print(line)
        _print_snapshot(cache, config.report)
        return 0
    except CacheError as e:
        log.error("replay failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI parser"""
    parser = argparse.ArgumentParser(
        prog="lrucache",
        description="Fixed-capacity LRU cache - demo walkthrough and operation replay",
    )
    subparsers = parser.add_subparsers(dest="command", help="available commands")

    demo_parser = subparsers.add_parser(
        "demo",
        help="fill a cache and show how it evicts",
    )
    replay_parser = subparsers.add_parser(
        "replay",
        help="apply put/get/delete lines from a file",
    )
    replay_parser.add_argument(
        "file",
        type=Path,
        help="operation script, one operation per line",
    )

    for sub in (demo_parser, replay_parser):
        sub.add_argument(
            "--capacity",
            type=int,
            default=None,
            help="cache capacity (default: LRU_CACHE_CAPACITY or 5)",
        )
        sub.add_argument(
            "--verbose",
            action="store_true",
            help="human readable log output",
        )

    return parser
