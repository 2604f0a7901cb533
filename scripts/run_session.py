"""Command-line interface for running a scripted container session."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
project_root_str = str(PROJECT_ROOT)
if project_root_str not in sys.path:
    sys.path.insert(0, project_root_str)

from loguru import logger

from itemstore.pipelines import run_session
from itemstore.reporting import write_listing
from itemstore.utils import apply_overrides, configure_logging, get_by_dotted_path, load_config


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("configs/default.yaml"),
        help="Path to the YAML configuration file.",
    )
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override a configuration value, e.g. --set session.random_items=5.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    config = load_config(args.config)
    apply_overrides(config, args.overrides)
    configure_logging(str(get_by_dotted_path(config, "logging.level", "INFO")))

    logger.info("Starting session with config at {}", args.config)
    report = run_session(config)
    write_listing(report.container, sys.stdout)
    logger.info("Container holds {} items", report.count)


if __name__ == "__main__":
    main()
