from __future__ import annotations

import argparse
import json
from collections.abc import Sequence
from pathlib import Path

from line_reader.adapters.host_probe import SystemHostProbe
from line_reader.adapters.line_source import FileLineSource
from line_reader.adapters.log_sinks import build_log_sink
from line_reader.adapters.output_sink import build_output_sink
from line_reader.config.loader import default_config, load_config
from line_reader.config.models import AppConfig
from line_reader.observability.logging import LEVELS, Logger
from line_reader.ports.host_probe import HostProbe
from line_reader.services.host_facts import collect_host_facts, host_facts_to_dict
from line_reader.services.line_copy import copy_lines

# NOTE: this module only wires config, adapters and services; behavior lives in services/.


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="line-reader", description="Stream file lines and report host facts")
    parser.add_argument("--config", help="Path to YAML config")
    parser.add_argument("--log-level", choices=sorted(LEVELS, key=LEVELS.__getitem__), help="Override logging.level")
    commands = parser.add_subparsers(dest="command", required=True)

    lines = commands.add_parser("lines", help="Print every line of a file in order")
    lines.add_argument("path", help="Path to the input file")
    lines.add_argument("--output", help="Write lines to this file instead of stdout")

    host = commands.add_parser("host", help="Print host facts as JSON")
    host.add_argument("--output", help="Write the JSON document to this file instead of stdout")
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Parse CLI arguments; caller passes argv for testability.
    return build_parser().parse_args(argv)


def resolve_config(args: argparse.Namespace) -> AppConfig:
    config = load_config(Path(args.config)) if args.config else default_config()
    apply_overrides(config, args)
    return config


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> None:
    # CLI overrides take precedence over config values.
    if getattr(args, "log_level", None) is not None:
        config.logging.level = args.log_level
    if getattr(args, "output", None) is not None:
        config.output.kind = "file"
        config.output.file_path = args.output


def run(argv: Sequence[str] | None = None, *, probe: HostProbe | None = None) -> int:
    args = parse_args(argv)
    config = resolve_config(args)
    logger = Logger(build_log_sink(config.logging), level=config.logging.level)
    try:
        if args.command == "lines":
            return _run_lines(config, Path(args.path), logger)
        return _run_host(config, probe if probe is not None else SystemHostProbe(), logger)
    finally:
        logger.close()


def _run_lines(config: AppConfig, path: Path, logger: Logger) -> int:
    source = FileLineSource(path, encoding=config.input.encoding, decode_errors=config.input.decode_errors)
    sink = build_output_sink(config.output)
    logger.debug("reading lines", path=source.name, output=config.output.kind)
    try:
        copy_lines(source, sink, logger)
    except Exception:
        sink.abort()
        raise
    sink.close()
    return 0


def _run_host(config: AppConfig, probe: HostProbe, logger: Logger) -> int:
    facts = collect_host_facts(probe)
    sink = build_output_sink(config.output)
    document = json.dumps(host_facts_to_dict(facts), indent=2, ensure_ascii=False)
    try:
        for line in document.splitlines():
            sink.write_line(line)
    except Exception:
        sink.abort()
        raise
    sink.close()
    logger.info("host facts collected", hostname=facts.hostname, interfaces=len(facts.network_interfaces))
    return 0
