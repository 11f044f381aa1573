"""
Entrypoint: load .env and config, init logging, execute one request and
print the normalized response
"""

import argparse
import asyncio
import json
import sys

import yaml
from dotenv import load_dotenv

load_dotenv()

from http_executor.config import config
from http_executor.executor import RequestExecutor
from http_executor.logging_setup import setup_logging
from http_executor.models import Callbacks, HttpMethod, RequestDescriptor


def build_parser():
    parser = argparse.ArgumentParser(description="Execute a single HTTP request and print the normalized response")
    parser.add_argument("method", help="HTTP method, e.g. GET")
    parser.add_argument("url")
    parser.add_argument("-H", "--header", action="append", default=[], help='Request header, "Name: value"')
    parser.add_argument("-d", "--data", default=None, help="Request body")
    parser.add_argument("--json", action="store_true", help="Parse --data as JSON before sending")
    return parser


def parse_headers(raw_headers):
    headers = {}
    for raw in raw_headers:
        name, sep, value = raw.partition(':')
        if not sep:
            raise ValueError(f"Invalid header {raw!r}, expected 'Name: value'")
        headers[name.strip()] = value.strip()
    return headers


async def main(argv=None) -> int:
    """Run one request; exit code 0 on the success callback, 1 on the error callback"""
    setup_logging(config)
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        HttpMethod.parse(args.method)
        headers = parse_headers(args.header)
        body = json.loads(args.data) if args.json and args.data is not None else args.data
    except ValueError as e:
        parser.error(str(e))

    outcome = {}

    def on_response(response):
        outcome['ok'] = True
        outcome['response'] = response

    def on_error(response):
        outcome['ok'] = False
        outcome['response'] = response

    request = RequestDescriptor(
        method=args.method,
        url=args.url,
        headers=headers,
        body=body,
        on=Callbacks(response=on_response, error=on_error),
    )

    await RequestExecutor(config).execute(request)

    print(yaml.safe_dump(outcome['response'].to_dict(), sort_keys=False, allow_unicode=True))
    return 0 if outcome['ok'] else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
