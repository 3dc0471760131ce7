"""
Acetics CLI — Interactive task entry and config commands.

Commands:
- acetics new       — Prompt for a task and submit it (default command)
- acetics config    — Show the loaded configuration, or its path with --path

Exit codes: 0 on success, on a declined confirmation and on a canceled
prompt; 1 on config or network errors; 130 when interrupted.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Callable, Optional

import httpx

from acetics_cli import __version__
from acetics_cli.engine.api_client import AceticsClient
from acetics_cli.engine.config import AceticsConfig, default_config_path, load_config
from acetics_cli.engine.errors import (
    AceticsConfigBootstrapError,
    AceticsConfigError,
    AceticsError,
    AceticsOperatorAbort,
)
from acetics_cli.records.task import TaskPriority, TaskType
from acetics_cli.translation_sets.labels import Labels
from acetics_cli.workflow.call_task import CallTaskWorkflow
from acetics_cli.workflow.prompts import Prompter

logger = logging.getLogger("acetics_cli.cli")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

TASK_TYPES = {
    "customer-call": TaskType.CUSTOMER_CALL,
    "technical": TaskType.TECHNICAL,
    "administrative": TaskType.ADMINISTRATIVE,
    "reminder": TaskType.REMINDER,
}

PRIORITIES = {priority.value.lower(): priority for priority in TaskPriority}

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="acetics",
        description="Acetics CLI — record a task in Acetics",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config", help="Path to config.toml (default: per-user config directory)"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level on stderr (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    # Used when no subcommand is given: "acetics" behaves like "acetics new".
    parser.set_defaults(command="new", task_type="customer-call", priority="normal", clear=True)

    # acetics new
    new_parser = subparsers.add_parser("new", help="Prompt for a task and submit it")
    new_parser.add_argument(
        "--type",
        dest="task_type",
        choices=sorted(TASK_TYPES),
        default="customer-call",
        help="Task type (default: customer-call)",
    )
    new_parser.add_argument(
        "--priority",
        choices=list(PRIORITIES),
        default="normal",
        help="Task priority (default: normal)",
    )
    new_parser.add_argument(
        "--no-clear",
        dest="clear",
        action="store_false",
        help="Do not clear the terminal before prompting",
    )

    # acetics config
    config_parser = subparsers.add_parser("config", help="Show the configuration")
    config_parser.add_argument(
        "--path", action="store_true", help="Only print the config file path"
    )

    return parser


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT, stream=sys.stderr)

    try:
        if args.command == "config":
            return cmd_config(args)
        return cmd_new(args)
    except KeyboardInterrupt:
        print()
        return EXIT_INTERRUPTED


def _load(args: argparse.Namespace) -> Optional[AceticsConfig]:
    """Load the config, printing the reason and returning None on failure."""
    try:
        return load_config(args.config)
    except AceticsConfigBootstrapError as e:
        print(e.message)
        return None
    except AceticsConfigError as e:
        logger.error(e.to_json())
        print(f"[ERROR] {e.config_path}: {e.message}")
        return None


def clear_terminal() -> None:
    print("\033[2J\033[1;1H", end="", flush=True)


def cmd_new(
    args: argparse.Namespace,
    input_func: Optional[Callable[[str], str]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> int:
    """
    Run the call task workflow:
    1. Load config (bootstrap on first run)
    2. Prompt for every field
    3. Submit to tasks/create and print the JSON response
    """
    if args.clear:
        clear_terminal()

    config = _load(args)
    if config is None:
        return EXIT_ERROR

    labels = Labels(config.language)
    prompter = Prompter(labels, input_func=input_func or input, editor_command=config.editor_command())
    workflow = CallTaskWorkflow(
        config,
        AceticsClient.from_config(config, transport=transport),
        prompter,
        task_type=TASK_TYPES[args.task_type],
        priority=PRIORITIES[args.priority],
    )

    try:
        response = workflow.run()
    except AceticsOperatorAbort as e:
        print(e.message)
        return EXIT_OK
    except AceticsError as e:
        logger.error(e.to_json())
        print(f"[ERROR] {e.message}")
        return EXIT_ERROR

    if response is None:
        print(labels.get("not_saved"))
        return EXIT_OK

    print(_format_response(response))
    return EXIT_OK


def _format_response(response: Any) -> str:
    return json.dumps(response, indent=2, ensure_ascii=False, default=str)


def _mask(token: str) -> str:
    if len(token) <= 4:
        return "*" * len(token)
    return "*" * (len(token) - 4) + token[-4:]


def cmd_config(args: argparse.Namespace) -> int:
    """Print the config path, or the loaded endpoint and staff roster."""
    if args.path:
        print(args.config or default_config_path())
        return EXIT_OK

    config = _load(args)
    if config is None:
        return EXIT_ERROR

    print(f"[OK] endpoint: {config.endpoint}")
    print(f"[OK] token: {_mask(config.token)}")
    print(f"[OK] language: {config.language}")
    print(f"[OK] editor: {config.editor_command()}")
    print("[OK] staffs:")
    for index, staff in enumerate(config.staffs):
        marker = "*" if index == config.default_staff_index else " "
        print(f"  {marker} {staff.id:>4}  {staff.name}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
