"""CLI interface for Tokenline."""

import argparse
import logging
import sys
from pathlib import Path

import uvicorn
import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from tokenline.api.app import create_app
from tokenline.core.config import load_config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(description="Tokenline - per-channel token queue for Slack")
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path("config.yaml"),
        help="Path to configuration file (YAML or JSON)",
    )
    parser.add_argument(
        "--host",
        type=str,
        help="Server host (overrides api.host)",
    )
    parser.add_argument(
        "--port",
        type=int,
        help="Server port (overrides api.port)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    load_dotenv()

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError, ValidationError, yaml.YAMLError) as e:
        logger.error(f"Failed to load config: {e}")
        sys.exit(1)

    level = "DEBUG" if args.verbose else config.logging.level
    logging.getLogger().setLevel(level)

    host = args.host if args.host is not None else config.api.host
    port = args.port if args.port is not None else config.api.port

    app = create_app(config)
    logger.info(f"Serving token queues on {host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level=level.lower())


if __name__ == "__main__":
    main()
