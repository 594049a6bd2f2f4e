#!/usr/bin/env python3
"""
Patient Index — Командний рядок

Запуск:
    patient-index data/patients.csv out/
    patient-index data/patients.csv out/ --config examples_config/wide_schema.yaml
    patient-index data/patients.csv out/ --columns patient_id=0,name=1,age=2,gender=3,symptoms=8,region=12

Коди виходу:
    0 — успіх
    1 — помилка використання (не вказано вхід/вихід)
    2 — некоректна конфігурація
    3 — помилка читання/запису
"""

import sys
import argparse
import logging
from dataclasses import replace
from typing import List, Optional

from patient_index.config import ColumnMapping, get_default_config, load_config
from patient_index.errors import ConfigError, StorageError
from patient_index.pipeline import run_pipeline

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_CONFIG = 2
EXIT_STORAGE = 3


class _ArgumentParser(argparse.ArgumentParser):
    """argparse з кодом виходу 1 для помилок використання"""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="patient-index",
        description="Classify patient records by id, region and symptoms",
    )
    parser.add_argument("input", help="Input CSV file")
    parser.add_argument("output", help="Output directory for the JSON documents")
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument(
        "--columns",
        help="Column mapping as name=index pairs, e.g. patient_id=0,name=1,age=2",
    )
    parser.add_argument("--delimiter", help="Field delimiter (default: ,)")
    parser.add_argument("--no-header", action="store_true", help="Input has no header row")
    parser.add_argument(
        "--no-multiline",
        action="store_true",
        help="Treat every physical line as a record, even inside quotes",
    )
    parser.add_argument("--log-level", help="Logging level (default: INFO)")
    return parser


def _resolve_config(args):
    config = load_config(args.config) if args.config else get_default_config()

    if args.columns:
        config.records.columns = ColumnMapping.from_spec(args.columns)

    overrides = {}
    if args.delimiter is not None:
        overrides["delimiter"] = args.delimiter
    if args.no_header:
        overrides["skip_header"] = False
    if args.no_multiline:
        overrides["join_multiline"] = False
    if overrides:
        # replace() повторно валідує ParserConfig
        config.parser = replace(config.parser, **overrides)

    if args.log_level:
        config.logging = replace(config.logging, level=args.log_level)

    return config


def _configure_logging(level: str, fmt: str) -> None:
    # LoggingConfig вже перевірив, що назва рівня відома
    logging.basicConfig(level=logging.getLevelName(level), format=fmt, stream=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = _resolve_config(args)
        _configure_logging(config.logging.level, config.logging.format)
    except ConfigError as e:
        print(f"patient-index: configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG

    try:
        report = run_pipeline(args.input, args.output, config)
    except StorageError as e:
        logger.error(f"❌ Run aborted: {e}")
        return EXIT_STORAGE

    logger.info(
        f"✅ Done: {report.summary['patients']} patients, "
        f"{report.skipped_rows} skipped rows, {len(report.warnings)} warnings"
    )
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
