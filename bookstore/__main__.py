"""
CLI entry point: serve the catalog API.

Usage:
    python -m bookstore
    python -m bookstore --port 8080 --books data/books.json
"""

import argparse
import logging
from typing import Optional

from bookstore.core.config import Settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Bookstore catalog API server")
    parser.add_argument("--host", default=None, help="Interface to bind (default from HOST)")
    parser.add_argument("--port", type=int, default=None, help="Port to listen on (default from PORT)")
    parser.add_argument("--books", default=None, help="Path of the JSON catalog document")
    return parser


def resolve_settings(args: argparse.Namespace) -> Settings:
    """Overlay command-line options on the environment settings."""
    overrides = {}
    if args.host is not None:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if args.books is not None:
        overrides["books_path"] = args.books
    return Settings(**overrides)


def main(argv: Optional[list[str]] = None) -> None:
    import uvicorn

    from bookstore.main import create_app

    args = build_parser().parse_args(argv)
    cfg = resolve_settings(args)
    app = create_app(cfg)

    if cfg.is_production:
        logger.info("Running on cloud on port %d", cfg.port)
    else:
        logger.info("Running locally on port %d", cfg.port)

    uvicorn.run(app, host=cfg.host, port=cfg.port)


if __name__ == "__main__":
    main()
