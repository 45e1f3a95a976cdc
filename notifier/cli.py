"""CLI entry: notifier [shell | run --scenario path [--filter kind]] [--config path]."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml
from dotenv import load_dotenv

from notifier.config import DEFAULT_CONFIG, Settings, load_settings
from notifier.errors import NotifierError
from notifier.runner import run
from notifier.shell import Shell

load_dotenv()


def _setup_logging(settings: Settings, console_level: str) -> None:
    log_dir = Path(settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "app.log"
    fmt = "%(asctime)s %(levelname)s %(name)s %(message)s"
    formatter = logging.Formatter(fmt)
    root = logging.getLogger()
    root.setLevel(settings.log_level)
    if not root.handlers:
        h_stderr = logging.StreamHandler(sys.stderr)
        h_stderr.setFormatter(formatter)
        h_stderr.setLevel(settings.console_level or console_level)
        root.addHandler(h_stderr)
        h_file = logging.FileHandler(log_file, encoding="utf-8")
        h_file.setFormatter(formatter)
        root.addHandler(h_file)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Notification channel manager")
    parser.add_argument(
        "--config",
        default=None,
        help=f"Settings file path (default: {DEFAULT_CONFIG} if present)",
    )
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("shell", help="Interactive menu (default)")
    run_parser = sub.add_parser("run", help="Send notifications from a scenario file")
    run_parser.add_argument("--scenario", required=True, help="YAML scenario file")
    run_parser.add_argument(
        "--filter",
        default=None,
        help="Only render channels of this kind (email, sms, push)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.config)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.command == "run":
        _setup_logging(settings, "INFO")
        try:
            run(args.scenario, args.filter)
        except (FileNotFoundError, ValueError, NotifierError, yaml.YAMLError) as e:
            logging.error("%s", e)
            return 1
        return 0

    _setup_logging(settings, "WARNING")
    return Shell().run()


if __name__ == "__main__":
    sys.exit(main())
