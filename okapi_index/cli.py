"""
Command-line demo: index a few documents and run one BM25 query.

Usage:
    okapi-index like
    okapi-index --doc 1="I like cats" --doc 2="dogs" --top-k 5 "like cats"
    okapi-index --file corpus.txt --k 1.2 --b 0.5 "search terms"

Without --doc / --file the built-in demo corpus is indexed.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .bm25 import BM25Index, english_normalizer
from .bm25.doc_stats import DocId
from .config import BM25Settings, load_settings
from .errors import OkapiIndexError
from .logging_config import setup_logging

logger = logging.getLogger(__name__)

DEMO_CORPUS: List[Tuple[DocId, str]] = [
    (123, "Hello world"),
    (456, "I like like like cats"),
    (780, "I like like dogs"),
]


def parse_doc(value: str) -> Tuple[DocId, str]:
    """
    Parse "ID=TEXT" into (doc_id, text); numeric ids become ints.

    Examples:
        >>> parse_doc("7=I like cats")
        (7, 'I like cats')
        >>> parse_doc("intro=Hello=world")
        ('intro', 'Hello=world')
    """
    doc_id, sep, text = value.partition("=")
    doc_id = doc_id.strip()
    if not sep or not doc_id:
        raise argparse.ArgumentTypeError(f"expected ID=TEXT, got {value!r}")
    return (int(doc_id) if doc_id.isdigit() else doc_id), text


def read_corpus_file(path: Path, start: int = 0) -> List[Tuple[DocId, str]]:
    """One document per non-empty line, ids start..start+n-1 in file order."""
    with open(path, encoding="utf-8") as f:
        lines = [line.strip() for line in f]
    return list(enumerate((line for line in lines if line), start=start))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="okapi-index",
        description="Rank documents against a query with Okapi BM25.",
    )
    parser.add_argument("query", help="Query text")
    parser.add_argument("--k", type=float, default=None, help="Term frequency saturation (default: BM25_K or 1.5)")
    parser.add_argument("--b", type=float, default=None, help="Length normalization 0..1 (default: BM25_B or 0.75)")
    parser.add_argument("--top-k", type=int, default=10, help="Number of results (default: 10)")
    parser.add_argument("--doc", type=parse_doc, action="append", default=[], metavar="ID=TEXT",
                        help="Document to index (repeatable)")
    parser.add_argument("--file", type=Path, action="append", default=[],
                        help="File with one document per line (repeatable)")
    parser.add_argument("--english", action="store_true",
                        help="Lowercase, drop stopwords and Snowball-stem terms")
    parser.add_argument("--env-file", type=Path, default=None, help="Env file to load (default: .env.local / .env)")
    parser.add_argument("--log-file", default=None, help="Also write DEBUG logs to this file")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = os.getenv("LOG_LEVEL", "WARNING").upper()
    setup_logging(log_file=args.log_file, console_level=getattr(logging, log_level, logging.WARNING))

    if args.top_k < 0:
        parser.error("--top-k must be >= 0")

    try:
        env_settings = load_settings(args.env_file)
        settings = BM25Settings.build(
            k=env_settings.k if args.k is None else args.k,
            b=env_settings.b if args.b is None else args.b,
        )
    except OkapiIndexError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    documents = list(args.doc)
    next_id = 0
    for path in args.file:
        try:
            lines = read_corpus_file(path, start=next_id)
        except OSError as e:
            print(f"Error reading {path}: {e}", file=sys.stderr)
            return 2
        documents.extend(lines)
        next_id += len(lines)
    if not documents:
        documents = DEMO_CORPUS

    normalizer = english_normalizer() if args.english else None
    index = BM25Index.from_settings(settings, normalizer=normalizer)

    try:
        for doc_id, text in documents:
            index.index_document(text, doc_id)
    except OkapiIndexError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logger.info(f"Indexed {len(index)} documents (avg length {index.average_document_length:.2f})")

    results = index.search(args.query, args.top_k)
    logger.info(f"Query {args.query!r}: {len(results)} hits")

    for score, doc_id in results:
        print(f"Document ID: {doc_id}, Score: {score:.6f}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
