"""Command line front end: convert an FTB Quests directory to Heracles JSON."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from questbridge.data.errors import DataError
from questbridge.data.quest_source import QuestSourceBundle
from questbridge.presentation.cli.config import load_config
from questbridge.services.conversion_service import convert_ftb_quests
from questbridge.services.errors import ConversionError


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="questbridge",
        description="Convert FTB Quests SNBT files into Heracles quest JSON.",
    )
    parser.add_argument(
        "quests_dir",
        type=Path,
        help="FTB quests directory (containing data.snbt) or a modpack instance root.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write the converted quests to this file instead of stdout.",
    )
    parser.add_argument(
        "--indent",
        type=int,
        help="JSON indentation (default from config, otherwise 2).",
    )
    parser.add_argument(
        "--sort-keys",
        action="store_true",
        default=None,
        help="Sort JSON object keys in the output.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to a JSON options file.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    config = load_config(args.config)
    indent = config["indent"] if args.indent is None else args.indent
    sort_keys = config["sort_keys"] if args.sort_keys is None else args.sort_keys

    try:
        bundle = QuestSourceBundle.from_directory(args.quests_dir)
        quests = convert_ftb_quests(bundle)
    except (DataError, ConversionError) as exc:
        logging.error("Conversion failed: %s", exc)
        return 1

    text = json.dumps(quests, indent=indent or None, sort_keys=sort_keys)
    if args.output is None:
        sys.stdout.write(text + "\n")
        return 0
    try:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(text + "\n", encoding="utf-8")
    except OSError as exc:
        logging.error("Unable to write %s: %s", args.output, exc)
        return 1
    logging.info("Wrote %d quests to %s", len(quests), args.output)
    return 0
