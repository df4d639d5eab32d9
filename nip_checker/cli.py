"""
Command-line entry point: run the stdio MCP server or the HTTP API.
"""

import argparse
import asyncio
import logging

from .config import configure_logging, get_settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="nip-checker",
        description="VAT taxpayer registry (White List) tools over MCP"
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="stdio MCP server (default) or HTTP API"
    )
    parser.add_argument("--host", default=settings.host, help="HTTP bind host")
    parser.add_argument("--port", type=int, default=settings.port, help="HTTP bind port")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    return parser


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    if args.transport == "http":
        import uvicorn

        from .api import app

        logger.info(f"Starting HTTP API on {args.host}:{args.port}")
        uvicorn.run(app, host=args.host, port=args.port)
        return

    from .server import main as run_stdio

    asyncio.run(run_stdio())


if __name__ == "__main__":
    main()
