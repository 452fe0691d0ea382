"""Command line interface: render a TOML message file as a JSON payload."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from toml_embeds import exceptions, transcoder
from toml_embeds.configuration import Config

_logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="toml-embeds", description="Render a TOML message file as a Discord webhook payload"
    )
    parser.add_argument("message_file", type=Path, help="TOML message file")
    parser.add_argument("--config-file", type=Path, help="Configuration file")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")
    args = parser.parse_args(argv)

    config = Config.from_file(args.config_file) if args.config_file else Config()

    logging.basicConfig(
        level=config.log_level,
        stream=sys.stderr,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        sources = config.load_sources()
        _logger.info("Rendering %s with %d injection source(s)", args.message_file, len(sources))
        payload = transcoder.parse(args.message_file.read_text(encoding="utf-8"), sources)
    except exceptions.TomlEmbedsError as exc:
        parser.exit(1, f"{parser.prog}: {exc}\n")

    print(json.dumps(payload, indent=args.indent, ensure_ascii=False))
