#!/usr/bin/env python3
"""
decicalc command line

Runs one calculator operation over operands given on the command line.

Usage (from repo root):
    python -m scripts.calculate add 2 3.5 0.25
    python -m scripts.calculate divide -- -2 -3 0.5
    python -m scripts.calculate multiply 2.3 3.3 --log-json logs/calc.json

Exit codes: 0 success, 1 invalid input, 2 division by zero.
"""

import argparse
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from calculator.arithmetic.calculator import DecimalCalculator
from calculator.errors import DivisionByZeroError, InvalidArgumentError
from configs import config_loader

OPERATIONS = ("add", "subtract", "multiply", "divide")

EXIT_OK = 0
EXIT_INVALID_ARGUMENT = 1
EXIT_DIVISION_BY_ZERO = 2

# Attributes every LogRecord carries; anything else came in through `extra`
_RECORD_ATTRS = {
    "name", "msg", "args", "created", "filename", "funcName", "levelname",
    "levelno", "lineno", "module", "msecs", "message", "pathname", "process",
    "processName", "relativeCreated", "thread", "threadName", "exc_info",
    "exc_text", "stack_info", "getMessage", "taskName",
}


class JSONFormatter(logging.Formatter):
    """One JSON object per record, including extra fields."""

    def format(self, record):
        log_obj = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS and not key.startswith("_"):
                log_obj[key] = value
        return json.dumps(log_obj, default=str)


def default_log_file() -> Path:
    """Timestamped JSON log path under the configured log directory."""
    log_dir = Path(config_loader.get_config("logging").get("json_log_dir", "logs"))
    return log_dir / f"decicalc_{datetime.now(timezone.utc).strftime('%Y%m%d_%H%M%S')}.json"


def setup_logging(verbose: bool = False, log_file: Optional[Path] = None) -> List[logging.Handler]:
    """
    Console logging at the configured level, plus an optional JSON file.

    Returns:
        Handlers added to the root logger, for teardown_logging()
    """
    level_name = "DEBUG" if verbose else config_loader.get_config("logging").get("level", "INFO")

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, level_name))
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root_logger.addHandler(console_handler)
    handlers = [console_handler]

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(file_handler)
        handlers.append(file_handler)

    return handlers


def teardown_logging(handlers: List[logging.Handler]) -> None:
    """Detach and close handlers installed by setup_logging()."""
    root_logger = logging.getLogger()
    for handler in handlers:
        root_logger.removeHandler(handler)
        handler.close()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="decicalc",
        description="Exact decimal arithmetic with half-up rounding.",
    )
    parser.add_argument("operation", choices=OPERATIONS, help="Operation to run")
    parser.add_argument("operands", nargs="+", help="Two or more decimal operands")
    parser.add_argument(
        "--log-json",
        nargs="?",
        const="",
        default=None,
        metavar="PATH",
        help="Also write JSON logs (default path under the configured log dir)",
    )
    parser.add_argument("--verbose", action="store_true", help="Console log level DEBUG")
    return parser


def main(argv: Optional[List[str]] = None, calculator: Optional[DecimalCalculator] = None) -> int:
    """Parse arguments, run the operation and print the result."""
    args = build_parser().parse_args(argv)

    log_file = None
    if args.log_json is not None:
        log_file = Path(args.log_json) if args.log_json else default_log_file()
    root_level = logging.getLogger().level
    handlers = setup_logging(verbose=args.verbose, log_file=log_file)

    try:
        calculator = calculator or DecimalCalculator()
        operation = getattr(calculator, args.operation)

        try:
            result = operation(*args.operands)
        except DivisionByZeroError as e:
            print(f"FAIL: {e}", file=sys.stderr)
            return EXIT_DIVISION_BY_ZERO
        except InvalidArgumentError as e:
            print(f"FAIL: {e}", file=sys.stderr)
            return EXIT_INVALID_ARGUMENT

        print(result)
        return EXIT_OK
    finally:
        teardown_logging(handlers)
        logging.getLogger().setLevel(root_level)


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
