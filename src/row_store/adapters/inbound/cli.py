"""Command-line entry point.

Starts the interactive prompt over a fresh in-memory table, or serves the
same table over HTTP with --serve.

    $ row-store
    db > insert 1 alice a@example.com
    Executed.
    db > .exit
"""

from __future__ import annotations

import argparse
import io
import sys
from typing import Sequence

from row_store import __version__
from row_store.adapters.inbound.repl import Repl
from row_store.application.lifecycle import destroy_table
from row_store.infrastructure.config import Config, ObservabilityConfig, ServerConfig, StorageConfig
from row_store.infrastructure.container import Container
from row_store.infrastructure.metrics import setup_metrics


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="row-store",
        description="Fixed-schema in-memory record store",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--page-size", type=int, help="page size in bytes")
    parser.add_argument("--max-pages", type=int, help="maximum pages in the table")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="log level",
    )
    parser.add_argument("--log-format", choices=["json", "console"], help="log format")
    parser.add_argument(
        "--metrics-port", type=int, help="expose Prometheus metrics on this port"
    )
    parser.add_argument(
        "--serve", action="store_true", help="serve the table over HTTP instead of the prompt"
    )
    parser.add_argument("--host", help="HTTP host for --serve")
    parser.add_argument("--port", type=int, help="HTTP port for --serve")
    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Overlay command-line options on the environment-derived config."""
    base = Config()

    storage = base.storage.model_dump()
    if args.page_size is not None:
        storage["page_size"] = args.page_size
    if args.max_pages is not None:
        storage["max_pages"] = args.max_pages

    observability = base.observability.model_dump()
    if args.log_level is not None:
        observability["log_level"] = args.log_level
    if args.log_format is not None:
        observability["log_format"] = args.log_format

    server = base.server.model_dump()
    if args.host is not None:
        server["host"] = args.host
    if args.port is not None:
        server["port"] = args.port
    if args.metrics_port is not None:
        server["metrics_port"] = args.metrics_port
        server["metrics_enabled"] = True

    return Config(
        storage=StorageConfig(**storage),
        server=ServerConfig(**server),
        observability=ObservabilityConfig(**observability),
        repl=base.repl,
    )


def _tolerate_undecodable_input() -> None:
    # Undecodable bytes reach the parser as lone surrogates and are rejected there
    for stream in (sys.stdin, sys.stdout):
        if isinstance(stream, io.TextIOWrapper):
            stream.reconfigure(errors="surrogateescape")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the row store from the command line.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except ValueError as e:
        parser.error(str(e))

    if config.server.metrics_enabled:
        metrics = setup_metrics(config.server.metrics_port)
    else:
        metrics = None
    _tolerate_undecodable_input()
    container = Container.create(config, metrics=metrics)
    table = container.new_table()
    executor = container.new_executor()

    try:
        if args.serve:
            from row_store.adapters.inbound.rest_api import create_app, run_server

            run_server(
                create_app(table, executor),
                host=config.server.host,
                port=config.server.port,
            )
            return 0

        return Repl(table, executor, prompt=config.repl.prompt).run()
    finally:
        destroy_table(table)


if __name__ == "__main__":
    sys.exit(main())
