"""
Command Line Interface

Entry point for using the workbench from a terminal.

Usage:
    python -m curl_workbench parse "curl 'https://example.com' -H 'Accept: application/json'"
    python -m curl_workbench run "https://httpbin.org/get"
    pbpaste | python -m curl_workbench run - --mode no-cors
    python -m curl_workbench generate --url https://example.com -X POST -d '{"a": 1}'
    python -m curl_workbench serve --port 8000
"""

import argparse
import asyncio
import json
import logging
import sys

from . import config
from .builder import BuilderSession
from .command import Parsed, generate_curl, parse_curl
from .config_manager import ExecutorConfig
from .exceptions import WorkbenchError
from .executor import RequestExecutor
from .models import HTTP_METHODS, CorsMode, RequestModel


def _read_text(value: str) -> str:
    if value == "-":
        return sys.stdin.read()
    return value


def _parse_header(raw: str):
    if ':' not in raw:
        raise argparse.ArgumentTypeError(f"header must look like 'Name: value', got {raw!r}")
    name, value = raw.split(':', 1)
    return name.strip(), value.strip()


def cmd_parse(args) -> int:
    result = parse_curl(_read_text(args.text))
    if not isinstance(result, Parsed):
        print(f"Error: could not parse cURL command ({result.reason})", file=sys.stderr)
        return 1
    print(json.dumps(result.request.to_dict(), indent=2, ensure_ascii=False))
    return 0


def cmd_generate(args) -> int:
    request = RequestModel(
        method=args.method,
        url=args.url,
        headers=dict(args.header or []),
        body=args.data,
    )
    print(generate_curl(request))
    return 0


def cmd_run(args) -> int:
    executor_config = ExecutorConfig(include_credentials=not args.omit_credentials)
    if args.no_origin:
        executor_config.origin = None
    if args.timeout is not None:
        executor_config.timeout = args.timeout

    session = BuilderSession(RequestExecutor(executor_config), mode=args.mode)
    session.handle_input(_read_text(args.text).strip())

    result = asyncio.run(session.execute())
    if result.error:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1

    print(result.response.to_json())
    return 0


def cmd_serve(args) -> int:
    from .server import run_server
    run_server(host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="curl-workbench",
        description="Parse, generate and execute cURL commands",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  curl-workbench parse "curl example.com -d '{\\"a\\":1}'"
  curl-workbench run https://httpbin.org/get
  curl-workbench run - --mode no-cors < request.txt
  curl-workbench generate --url https://example.com -X PUT -H 'Accept: */*'
  curl-workbench serve --port 8080
        """
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Parse a cURL command into JSON")
    parse_cmd.add_argument("text", help="cURL command, or - to read stdin")
    parse_cmd.set_defaults(func=cmd_parse)

    gen_cmd = subparsers.add_parser("generate", help="Build a cURL command")
    gen_cmd.add_argument("--url", required=True, help="Target URL")
    gen_cmd.add_argument(
        "-X", "--method",
        type=str.upper,
        choices=HTTP_METHODS,
        default="GET",
        help="HTTP method (default: GET)"
    )
    gen_cmd.add_argument(
        "-H", "--header",
        type=_parse_header,
        action="append",
        help="Header as 'Name: value' (repeatable)"
    )
    gen_cmd.add_argument("-d", "--data", help="Request body")
    gen_cmd.set_defaults(func=cmd_generate)

    run_cmd = subparsers.add_parser("run", help="Execute a URL or cURL command")
    run_cmd.add_argument("text", help="URL or cURL command, or - to read stdin")
    run_cmd.add_argument(
        "--mode",
        choices=[m.value for m in CorsMode],
        default=CorsMode.STANDARD.value,
        help="Cross-origin policy (default: cors)"
    )
    run_cmd.add_argument(
        "--no-origin",
        action="store_true",
        help="Do not inject the Origin header"
    )
    run_cmd.add_argument(
        "--omit-credentials",
        action="store_true",
        help="Send no cookies"
    )
    run_cmd.add_argument(
        "--timeout",
        type=float,
        help="Timeout in seconds (default: none)"
    )
    run_cmd.set_defaults(func=cmd_run)

    serve_cmd = subparsers.add_parser("serve", help="Run the API server")
    serve_cmd.add_argument("--host", default=config.API_HOST)
    serve_cmd.add_argument("--port", type=int, default=config.API_PORT)
    serve_cmd.set_defaults(func=cmd_serve)

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except WorkbenchError as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
