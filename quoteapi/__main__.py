"""
Command line entry point.

    python -m quoteapi serve --port 8000
    python -m quoteapi check
    python -m quoteapi dump
"""

import argparse
import sys

from loguru import logger

from quoteapi.utils.constants import Server
from quoteapi.utils.dataset import load, read_raw
from quoteapi.utils.errors import DatasetError


def serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run(
        "quoteapi.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=Server.LOG_LEVEL.lower(),
    )
    return 0


def check(args: argparse.Namespace) -> int:
    try:
        dataset = load(read_raw(Server.DATASET_PATH))
    except DatasetError as e:
        logger.error(str(e))
        return 1
    print(f"{len(dataset.quotes)} quotes, etag {dataset.etag}")
    return 0


def dump(args: argparse.Namespace) -> int:
    try:
        raw = read_raw(Server.DATASET_PATH)
    except DatasetError as e:
        logger.error(str(e))
        return 1
    sys.stdout.write(raw.decode("utf-8", errors="replace"))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quoteapi", description="Random quote API server"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="run the API server")
    serve_parser.add_argument("--host", default=Server.HOST)
    serve_parser.add_argument("--port", type=int, default=Server.PORT)
    serve_parser.add_argument(
        "--reload", action="store_true", help="restart on code changes"
    )
    serve_parser.set_defaults(func=serve)

    check_parser = subparsers.add_parser("check", help="validate the quote dataset")
    check_parser.set_defaults(func=check)

    dump_parser = subparsers.add_parser("dump", help="print the raw quote dataset")
    dump_parser.set_defaults(func=dump)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=Server.LOG_LEVEL.upper())

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
