#!/usr/bin/env python
"""Form submission client.

Posts form fields as JSON to an HTTP endpoint and prints the JSON response.
The target defaults to `FORMPOST_URL` (or https://reqres.in/api/users).

Run with:
    python -m formpost.main --username oli --password secret
"""

import argparse
import dataclasses
import json
import logging
import os
import sys
from typing import Any, List, Optional, Tuple

from dotenv import load_dotenv

from .api import FormSubmitClient
from .config import Config
from .pipeline import Form, FormEvent, SubmitPipeline, make_failure_reporter
from .storage import DataStorage

# Load environment variables from .env file if present
load_dotenv()

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers,
    )


def parse_field(value: str) -> Tuple[str, str]:
    """Parse a NAME=VALUE command-line field."""
    name, sep, field_value = value.partition("=")
    name = name.strip().lstrip("#")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"Expected NAME=VALUE, got '{value}'")
    return name, field_value


def print_json(data: Any) -> None:
    print(json.dumps(data, indent=2))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Submit form fields as JSON to an HTTP endpoint",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Post username and password to the default endpoint
  python -m formpost.main --username oli --password secret

  # Post extra fields to another endpoint and keep the request log
  python -m formpost.main --url http://localhost:8000/users --field name=oli --request-log request_log.json
        """,
    )

    parser.add_argument("--url", help="Target URL (default: FORMPOST_URL)")
    parser.add_argument("--username", default="", help="Value of the username field")
    parser.add_argument("--password", default="", help="Value of the password field")
    parser.add_argument(
        "--field",
        action="append",
        type=parse_field,
        default=[],
        metavar="NAME=VALUE",
        help="Additional form field (repeatable)",
    )
    parser.add_argument("--label", help="Prefix for logged errors (default: FORMPOST_ERROR_LABEL)")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds (default: none)")
    parser.add_argument("--request-log", help="Save the request log to this JSON file")
    parser.add_argument("--output", help="Save the submission result to this JSON file")
    parser.add_argument("--log-file", help="Also write logs to this file")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    return parser



def resolve_config(args: argparse.Namespace) -> Config:
    """Environment config with command-line flags taking precedence."""
    config = Config.from_environment()
    return dataclasses.replace(
        config,
        submit_url=args.url or config.submit_url,
        error_label=args.label if args.label is not None else config.error_label,
        timeout=args.timeout if args.timeout is not None else config.timeout,
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Entry-point: read fields, submit, report."""
    args = build_parser().parse_args(argv)

    setup_logging(
        "DEBUG" if args.verbose else os.environ.get("LOG_LEVEL", "INFO"),
        args.log_file,
    )

    try:
        config = resolve_config(args)
        is_valid, err = config.validate()
        if not is_valid:
            logger.error(f"Configuration error: {err}")
            sys.exit(1)

        values = {"username": args.username, "password": args.password}
        values.update(args.field)

        client = FormSubmitClient(timeout=config.timeout)
        pipeline = SubmitPipeline(
            url=config.submit_url,
            transport=client,
            on_success=print_json,
            on_failure=make_failure_reporter(config.error_label),
            fields=list(values),
        )

        logger.info(f"Submitting {len(values)} fields to {config.submit_url}")
        result = pipeline.handle_event(FormEvent(form=Form(form_id="cli", values=values)))

        if args.request_log:
            client.save_request_log(args.request_log)
        if args.output:
            DataStorage.save_result(result, args.output)

    except KeyboardInterrupt:
        logger.info("Process interrupted by user")
        sys.exit(1)
    except Exception as err:
        logger.error(f"Unexpected error: {err}")
        sys.exit(1)

    if not result.ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
