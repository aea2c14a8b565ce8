#!/usr/bin/env python3
"""rrdecoder Command Line Interface.

Classifies systems from a locally cached RadioReference catalog and prints
their talkgroups in the configured display format.

Usage:
    python -m rrdecoder --catalog catalog.yaml classify
    python -m rrdecoder --catalog catalog.yaml classify --system 1234
    python -m rrdecoder --config config/rrdecoder.yaml talkgroups 1234
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from .catalog import Catalog, CatalogError, load_catalog
from .classifier import ProtocolClassifier
from .config import AppConfig, load_config
from .utils.log_levels import configure_logging, resolve_log_level

logger = logging.getLogger(__name__)


def _default_config_path() -> str:
    # backend/config/rrdecoder.yaml relative to this module
    module_dir = Path(__file__).resolve().parent
    return str(module_dir.parent / "config" / "rrdecoder.yaml")


def build_classifier(catalog: Catalog, cfg: AppConfig) -> ProtocolClassifier:
    return ProtocolClassifier(
        catalog.types,
        catalog.flavors,
        catalog.voices,
        catalog.tags,
        format_policy=cfg.format.to_policy(),
    )


def cmd_classify(args: argparse.Namespace, catalog: Catalog, classifier: ProtocolClassifier) -> int:
    """Print one JSON line per classified system."""
    if args.system is not None:
        system = catalog.get_system(args.system)
        if system is None:
            print(f"Error: system {args.system} not in catalog", file=sys.stderr)
            return 1
        systems = [system]
    else:
        systems = sorted(catalog.systems.values(), key=lambda s: s.system_id)

    for system in systems:
        print(json.dumps(classifier.classify(system).to_dict()))
    return 0


def cmd_talkgroups(args: argparse.Namespace, catalog: Catalog, classifier: ProtocolClassifier) -> int:
    """Print formatted talkgroups with their tag descriptions."""
    system = catalog.get_system(args.system_id)
    if system is None:
        print(f"Error: system {args.system_id} not in catalog", file=sys.stderr)
        return 1

    for tg in catalog.get_talkgroups(system.system_id):
        tags = ", ".join(t.description or f"tag {t.tag_id}" for t in classifier.tags_for(tg))
        label = tg.alpha_tag or tg.description
        print(f"{classifier.format_talkgroup(tg, system)}\t{label}\t{tags}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="rrdecoder",
        description="Classify RadioReference systems and format talkgroups",
    )
    parser.add_argument(
        "--config",
        "-c",
        default=os.environ.get("RRDECODER_CONFIG", _default_config_path()),
        help="Path to YAML config file",
    )
    parser.add_argument("--catalog", help="Catalog YAML file (overrides catalog.path)")
    parser.add_argument("--log-level", default=None, help="Log level (debug, info, warning, ...)")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    p_classify = subparsers.add_parser("classify", help="Show protocol and decoder type for systems")
    p_classify.add_argument("-s", "--system", type=int, default=None, help="Only this system id")
    p_classify.set_defaults(func=cmd_classify)

    p_tgs = subparsers.add_parser("talkgroups", help="List formatted talkgroups for a system")
    p_tgs.add_argument("system_id", type=int, help="RadioReference system id")
    p_tgs.set_defaults(func=cmd_talkgroups)

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 1

    try:
        cfg = load_config(args.config)
    except (OSError, ValueError) as exc:
        print(f"Error: failed to load config {args.config}: {exc}", file=sys.stderr)
        return 1

    configure_logging(resolve_log_level(args.log_level, cfg.logging.level))

    catalog_path = args.catalog or cfg.catalog.path
    if not catalog_path:
        print("Error: no catalog given (use --catalog or catalog.path)", file=sys.stderr)
        return 1

    # --catalog is relative to the working directory, catalog.path to the config file
    try:
        catalog = load_catalog(catalog_path, None if args.catalog else cfg.config_dir)
    except CatalogError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    classifier = build_classifier(catalog, cfg)
    logger.debug(f"Format policy: {classifier.format_policy}")
    return int(args.func(args, catalog, classifier))


if __name__ == "__main__":
    sys.exit(main())
