"""Command-line entry points for the log code utilities."""

import logging
import sys
from argparse import ArgumentParser

from logcodes.catalog import CatalogError, catalog_path_from_env, load_catalog
from logcodes.config import load_config
from logcodes.coverage import check_coverage
from logcodes.emitter import DEFAULT_LOG_CODES, build_emitter_logger, close_emitter_logger, emit_log_codes
from logcodes.report import format_report_json, render_log_coverage, render_terraform_coverage
from logcodes.sources import DEFAULT_LOG_FIELD, LogParseError, observed_from_log_records, read_log_records, read_terraform_metrics
from logcodes.webhook import create_app, run_webhook

logger = logging.getLogger(__name__)


def _setup_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
        stream=sys.stderr,
    )


def _add_output_flag(parser: ArgumentParser):
    parser.add_argument(
        "--output",
        choices=["text", "json"],
        default="text",
        help="Report format (default: text)",
    )


def build_emit_parser(default_output: str) -> ArgumentParser:
    parser = ArgumentParser(
        prog="logcodes-emit",
        description="Write one JSON log entry per built-in log code.",
    )
    parser.add_argument(
        "--output",
        default=default_output,
        help=f"Log file to append to (default: {default_output})",
    )
    return parser


def build_coverage_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="logcodes-coverage",
        description="Check catalog log codes against JSON log lines read from stdin. "
                    "The catalog path is taken from LOG_CODES_YAML.",
    )
    parser.add_argument(
        "--field",
        default=DEFAULT_LOG_FIELD,
        help=f"Log record field holding the code, matched case-insensitively (default: {DEFAULT_LOG_FIELD})",
    )
    _add_output_flag(parser)
    return parser


def build_terraform_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="logcodes-terraform",
        description="Check catalog log codes against Terraform log-based metric filters.",
    )
    parser.add_argument(
        "tf_file",
        nargs="?",
        default="main.tf",
        help="Terraform file to scan (default: main.tf)",
    )
    parser.add_argument(
        "--catalog",
        default="log_codes.yaml",
        help="Log code catalog (default: log_codes.yaml)",
    )
    _add_output_flag(parser)
    return parser


def build_webhook_parser(config) -> ArgumentParser:
    parser = ArgumentParser(
        prog="logcodes-webhook",
        description="Receive webhook messages and append them to a file.",
    )
    parser.add_argument("--host", default=config.webhook_host)
    parser.add_argument("--port", type=int, default=config.webhook_port)
    parser.add_argument(
        "--output-file",
        default=config.webhook_output_file,
        help=f"File messages are appended to (default: {config.webhook_output_file})",
    )
    return parser


def emit_main(argv=None) -> int:
    config = load_config()
    _setup_logging(config.log_level)
    args = build_emit_parser(config.app_log_file).parse_args(argv)

    entry_logger = build_emitter_logger(args.output)
    try:
        count = emit_log_codes(entry_logger, DEFAULT_LOG_CODES)
    finally:
        close_emitter_logger(entry_logger)
    logger.info("Wrote %d log entries to %s", count, args.output)
    return 0


def coverage_main(argv=None, stdin=None) -> int:
    config = load_config()
    _setup_logging(config.log_level)
    args = build_coverage_parser().parse_args(argv)
    if stdin is None:
        stdin = sys.stdin

    try:
        catalog = load_catalog(catalog_path_from_env())
    except CatalogError as e:
        logger.error("Failed to get log codes from YAML: %s", e)
        return 1

    try:
        observed = observed_from_log_records(read_log_records(stdin), field=args.field)
    except (LogParseError, OSError, UnicodeDecodeError) as e:
        logger.error("Failed to get logs from standard input: %s", e)
        return 1

    report = check_coverage(catalog.log_codes, observed)
    if args.output == "json":
        print(format_report_json(report))
    else:
        print(render_log_coverage(report))
    return 0


def terraform_main(argv=None) -> int:
    config = load_config()
    _setup_logging(config.log_level)
    args = build_terraform_parser().parse_args(argv)

    try:
        catalog = load_catalog(args.catalog)
    except CatalogError as e:
        logger.error("Failed to get log codes from YAML: %s", e)
        return 1

    try:
        metric_codes = read_terraform_metrics(args.tf_file)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("cannot read file: %s", e)
        return 1
    logger.info("Found %d metric filters in %s", len(metric_codes), args.tf_file)

    report = check_coverage(catalog.log_codes, metric_codes)
    if args.output == "json":
        print(format_report_json(report))
    else:
        print(render_terraform_coverage(catalog, report))
    return 0 if report.is_complete else 1


def webhook_main(argv=None) -> int:
    config = load_config()
    _setup_logging(config.log_level)
    args = build_webhook_parser(config).parse_args(argv)

    app = create_app(args.output_file)
    logger.info("Webhook receiver listening on %s:%d, writing to %s", args.host, args.port, args.output_file)
    run_webhook(app, args.host, args.port, debug=config.webhook_debug)
    return 0


def _run(main_fn):
    try:
        sys.exit(main_fn())
    except KeyboardInterrupt:
        sys.exit(0)
    except BrokenPipeError:
        sys.exit(0)


def emit():
    _run(emit_main)


def coverage():
    _run(coverage_main)


def terraform():
    _run(terraform_main)


def webhook():
    _run(webhook_main)
