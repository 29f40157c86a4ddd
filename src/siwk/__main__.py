"""CLI entry point for siwk.

Builds a SIWK message from a YAML request file and prints it to stdout, or
classifies a single address by network prefix.

Examples:
    ```bash
    python -m siwk build --config config/message.yaml
    python -m siwk build --config config/message.yaml --issued-at 2024-01-01T00:00:00Z
    python -m siwk classify kaspatest:qrzq2766zyqqpnlsmnwflm7kzgzz5d3yut7096kxpyqcg566t6836zjwcx4lp
    ```
"""

import argparse
import dataclasses
import logging
import sys
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from siwk.core.exceptions import SiwkError
from siwk.core.logger import Logger, StructuredFormatter
from siwk.message.builder import MessageBuilder
from siwk.message.config import SiwkConfig
from siwk.models.address import classify_address


DEFAULT_CONFIG = Path("config") / "message.yaml"

# Used until a config has been loaded; run_build rebuilds it from the config
logger = Logger("siwk.cli")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="siwk",
        description="Sign-In With Kaspa message tools",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level (default: from config, else INFO)",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    build = commands.add_parser("build", help="Render a message from a YAML request")
    build.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG,
        help=f"Message request path (default: {DEFAULT_CONFIG})",
    )
    build.add_argument(
        "--issued-at",
        type=datetime.fromisoformat,
        default=None,
        help="ISO-8601 issue time overriding the config and the current time",
    )

    classify = commands.add_parser("classify", help="Print the network of an address")
    classify.add_argument("address", help="Address to classify")

    return parser.parse_args(argv)


def setup_logging(level: str) -> None:
    """Configure the root logger with structured formatting.

    Installs a ``StructuredFormatter`` on a stderr handler so log lines never
    mix with the message printed on stdout.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(StructuredFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level))


def run_build(config_path: Path, issued_at: datetime | None, log_level: str | None) -> int:
    """Render the message described by *config_path* to stdout."""
    try:
        config = SiwkConfig.from_yaml(config_path)
    except SiwkError as e:
        logger.error("config_invalid", path=str(config_path), error=str(e))
        return 1

    if log_level is None:
        logging.root.setLevel(getattr(logging, config.logging.level))

    fields = config.message.to_fields()
    if issued_at is not None:
        fields = dataclasses.replace(fields, issued_at=issued_at)

    json_output = config.logging.json_output
    cli_logger = Logger("siwk.cli", json_output=json_output)
    builder = MessageBuilder(logger=Logger("siwk.builder", json_output=json_output))
    try:
        message = builder.build(fields)
    except SiwkError as e:
        cli_logger.error("build_failed", path=str(config_path), error=str(e))
        return 1

    sys.stdout.write(message + "\n")
    return 0


def run_classify(raw: str) -> int:
    """Print the network *raw* belongs to."""
    try:
        address = classify_address(raw)
    except SiwkError as e:
        logger.error("classify_failed", error=str(e))
        return 1

    sys.stdout.write(f"{address.network}\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point: parse args, configure logging, and dispatch the command."""
    args = parse_args(argv)
    setup_logging(args.log_level or "INFO")

    if args.command == "classify":
        return run_classify(args.address)
    return run_build(args.config, args.issued_at, args.log_level)


def cli() -> None:
    """Synchronous entry point for console_scripts."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
