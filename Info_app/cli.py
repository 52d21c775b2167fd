"""
Write one key/value pair to a running info server.

Usage:
  info-cli [--url BASE_URL] <key> <value>
  python -m Info_app.cli [--url BASE_URL] <key> <value>

The base URL is taken from --url, then INFO_SERVER_URL, then http://localhost:8080.
"""
import argparse
import sys

import requests

from Info_app.config import Settings

USAGE = "info-cli [--url BASE_URL] <key> <value>"


def resolve_url(cli_url: str | None) -> str:
    if cli_url:
        return cli_url
    return Settings().server_url


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="info-cli", usage=USAGE, add_help=True)
    parser.add_argument("--url", default=None, help="Base URL of the info server")
    parser.add_argument("key", nargs="?")
    # options end at the key: everything after it is taken literally, e.g. a value of "-x"
    parser.add_argument("rest", nargs=argparse.REMAINDER)
    opts = parser.parse_args(argv)

    if opts.key is None or not opts.rest:
        print("usage:", USAGE)
        return 1
    key, value = opts.key, opts.rest[0]

    url = resolve_url(opts.url).rstrip("/") + "/set"
    try:
        resp = requests.post(url, params={"key": key, "value": value}, timeout=10)
    except requests.RequestException as e:
        print("error:", e)
        return 1

    print(resp.text)
    return 0 if resp.ok else 1


if __name__ == "__main__":
    sys.exit(main())
