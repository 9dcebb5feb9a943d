"""CLI entry point for Sentimerge."""

import argparse
import sys
from collections.abc import Sequence
from typing import Any

import orjson

from sentimerge.config import load_settings
from sentimerge.core.exceptions import SentimergeError
from sentimerge.core.logging import get_logger, setup_logging
from sentimerge.lexicons import BUILTIN_LEXICONS
from sentimerge.processing.sentiment import CollisionStrategy, create_sentiment_analyzer

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sentimerge",
        description="Score text sentiment with merged multi-language lexicons",
    )
    parser.add_argument(
        "texts",
        nargs="*",
        metavar="TEXT",
        help="Texts to score (reads one text per stdin line if omitted)",
    )
    parser.add_argument("--analysis", action="store_true", help="Print full analysis records")
    parser.add_argument("--tokens", action="store_true", help="Include tokens in analysis")
    parser.add_argument("--stats", action="store_true", help="Print lexicon statistics and exit")
    parser.add_argument(
        "--verbose", action="store_true", help="Log at the configured level instead of WARNING"
    )
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in CollisionStrategy],
        help="Collision strategy (overrides SENTIMERGE_COLLISION_STRATEGY)",
    )
    parser.add_argument(
        "--lexicon",
        action="append",
        choices=list(BUILTIN_LEXICONS),
        help="Built-in lexicon to merge, repeatable (overrides SENTIMERGE_LEXICONS)",
    )
    parser.add_argument(
        "--lexicon-file",
        action="append",
        default=[],
        metavar="PATH",
        help="Extra JSON lexicon file, repeatable",
    )
    return parser


def _emit(payload: Any) -> None:
    print(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode())


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except SentimergeError as e:
        # Logging is not configured yet and stdout is reserved for results
        print(f"sentimerge: {e.message}", file=sys.stderr)
        return 2

    overrides: dict[str, Any] = {}
    if args.strategy:
        overrides["collision_strategy"] = CollisionStrategy.parse(args.strategy)
    if args.lexicon:
        overrides["lexicons"] = args.lexicon
    if args.lexicon_file:
        overrides["lexicon_files"] = [*settings.lexicon_files, *args.lexicon_file]
    if overrides:
        settings = settings.model_copy(update=overrides)

    setup_logging(settings, quiet=not args.verbose)

    try:
        analyzer = create_sentiment_analyzer(settings)
    except SentimergeError as e:
        logger.error("Failed to build analyzer", error=e.message)
        return 2

    if args.stats:
        _emit(analyzer.dictionary_stats().to_dict())
        return 0

    texts = list(args.texts) or [line.strip() for line in sys.stdin if line.strip()]

    if args.analysis or args.tokens:
        results = analyzer.batch_analysis(texts, include_tokens=args.tokens)
        _emit([{"text": text, **r.to_dict()} for text, r in zip(texts, results, strict=True)])
    else:
        scores = analyzer.batch_score(texts)
        _emit([{"text": text, "score": s} for text, s in zip(texts, scores, strict=True)])
    return 0
