"""
Command line interface

    tfidf-lab index <input_dir> <output_path>
    tfidf-lab search <query_phrase> <model_path>
    tfidf-lab serve <model_path> [--port N]

Diagnostics go to stderr, search results to stdout. Fatal errors (root
directory, model file, server bind) exit with a non-zero status.
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import config
from .document_processor import DocumentProcessor
from .logging_config import setup_logging
from .storage import StorageError, load_model, save_model
from .tfidf import CorpusModel

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tfidf-lab",
        description="Index HTML documents and rank them against a query with TF-IDF",
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        help=f"console log level (default: {config.LOG_LEVEL})",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    index_parser = subparsers.add_parser("index", help="index the specified path recursively")
    index_parser.add_argument("input_dir", help="the directory of the collection to index")
    index_parser.add_argument("output_path", help="where to write the index for later searches")

    search_parser = subparsers.add_parser("search", help=f"list the top {config.CLI_TOP_K} most relevant documents")
    search_parser.add_argument("query_phrase", help="the word or phrase to rank documents for")
    search_parser.add_argument("model_path", help="the index file to search in")

    serve_parser = subparsers.add_parser("serve", help="serve the search API over HTTP")
    serve_parser.add_argument("model_path", help="the index file to serve")
    serve_parser.add_argument("--port", type=int, default=config.PORT, help=f"port to listen on (default: {config.PORT})")
    serve_parser.add_argument("--host", default=config.HOST, help=f"address to bind (default: {config.HOST})")

    return parser


def run_index(input_dir: str, output_path: str) -> int:
    model = CorpusModel()
    try:
        DocumentProcessor().index_directory(input_dir, model)
    except OSError as e:
        logger.error(f"could not open directory {input_dir}: {e}")
        return 1

    try:
        save_model(model, output_path)
    except StorageError as e:
        logger.error(str(e))
        return 1

    return 0


def run_search(query_phrase: str, model_path: str, top_k: int = config.CLI_TOP_K) -> int:
    try:
        model = load_model(model_path)
    except StorageError as e:
        logger.error(str(e))
        return 1

    for rank, (doc_id, score) in enumerate(model.search(query_phrase)[:top_k], start=1):
        print(f"{rank}. {doc_id} => {score}")

    return 0


def run_serve(model_path: str, host: str, port: int) -> int:
    try:
        model = load_model(model_path)
    except StorageError as e:
        logger.error(str(e))
        return 1

    from .api import serve

    serve(model, host=host, port=port)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(log_file=config.LOG_FILE, console_level=args.log_level)

    if args.command == "index":
        return run_index(args.input_dir, args.output_path)
    if args.command == "search":
        return run_search(args.query_phrase, args.model_path)
    return run_serve(args.model_path, args.host, args.port)


def entrypoint() -> None:
    sys.exit(main())
