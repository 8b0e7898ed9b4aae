#!/usr/bin/env python3
"""
Send one request to the Front API from the command line.

- Reads FRONTAPP_API_KEY / FRONTAPP_API_ENDPOINT / FRONTAPP_TIMEOUT /
  FRONTAPP_VERIFY_SSL from the environment
- Arguments come from --arg key=value pairs and/or a --payload JSON file
- Prints the decoded JSON response
- With --report DIR, saves request + response to DIR/frontapp_<verb>_<timestamp>.json

Example:
    frontapp-request get conversations --arg limit=5
    frontapp-request post channels/cha_123/messages --payload message.json
"""
import argparse
import json
import sys
import time
from datetime import datetime, timezone
from pathlib import Path

from frontapp_client import HTTP_VERBS, FrontAppClient, FrontAppError
from utils.payload_loader import get_logger, load_payload, parse_args_pairs

logger = get_logger("frontapp.cli")


def build_parser():
    parser = argparse.ArgumentParser(prog="frontapp-request", description="Call the Front API.")
    parser.add_argument("verb", choices=HTTP_VERBS, type=str.lower)
    parser.add_argument("path", help="API method path, e.g. conversations or inboxes/inb_1")
    parser.add_argument("--arg", action="append", default=[], metavar="KEY=VALUE",
                        help="request argument (repeatable); JSON values are decoded")
    parser.add_argument("--payload", help="JSON file with the request arguments")
    parser.add_argument("--timeout", type=float, default=None, help="timeout in seconds")
    parser.add_argument("--insecure", action="store_true", help="disable SSL certificate verification")
    parser.add_argument("--report", metavar="DIR", help="write a JSON report into DIR")
    return parser


def collect_args(payload_path, pairs):
    args = {}
    if payload_path:
        payload = load_payload(payload_path)
        if pairs and not isinstance(payload, dict):
            raise ValueError("--arg can only be combined with a JSON object payload")
        if not isinstance(payload, dict):
            return payload
        args.update(payload)
    args.update(parse_args_pairs(pairs))
    return args


def write_report(report_dir, verb, result):
    reports = Path(report_dir)
    reports.mkdir(parents=True, exist_ok=True)
    timestamp = time.strftime("%Y%m%d-%H%M%S")
    out = reports / f"frontapp_{verb}_{timestamp}.json"
    entry = {
        "date": datetime.now(timezone.utc).isoformat(),
        "success": result.success,
        "error": result.error,
        "status": result.status_code,
        "request": result.request_dict(),
        "response": result.response_dict(),
        "body": result.data,
    }
    out.write_text(json.dumps(entry, indent=2, ensure_ascii=False), encoding="utf-8")
    return out


def main(argv=None):
    opts = build_parser().parse_args(argv)

    try:
        client = FrontAppClient.from_env()
        args = collect_args(opts.payload, opts.arg)
    except (FrontAppError, ValueError, OSError) as e:
        logger.error("%s", e)
        return 2
    if opts.insecure:
        client.verify_ssl = False

    try:
        result = client.send(opts.verb, opts.path, args, opts.timeout)
    except ValueError as e:
        logger.error("Invalid request arguments: %s", e)
        return 2

    if result.data is not None:
        print(json.dumps(result.data, indent=2, ensure_ascii=False))
    elif result.raw_body:
        print(result.raw_body)

    if opts.report:
        logger.info("WROTE REPORT: %s", write_report(opts.report, opts.verb, result))

    if not result.success:
        logger.error("Request failed: %s", result.error or "empty response body")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
