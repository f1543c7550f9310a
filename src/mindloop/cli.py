"""
Module: cli

Purpose:
    Command-line entry point (console script ``mindloop``).

        mindloop process FILE [--seed N] [--store PATH] [--json] [--pdf-decoder] [-v]
        mindloop capabilities

    Exit code 0 on success, 1 when the pipeline rejects or fails on the
    document, 2 on usage errors (argparse).
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from mindloop import __version__
from mindloop.config import EngineConfig
from mindloop.core.errors import MindloopError
from mindloop.core.models import PipelineResult
from mindloop.engine import Engine
from mindloop.storage import SnapshotStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mindloop",
        description="Turn a study document into a tiered curriculum of questions",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    process = subparsers.add_parser("process", help="Process a document into levels and questions")
    process.add_argument("file", type=Path, help="Document to process (.pdf, .docx, .txt, .pptx)")
    process.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")
    process.add_argument("--store", type=Path, default=None, help="Snapshot file to record the result in")
    process.add_argument("--json", action="store_true", help="Print the full result as JSON")
    process.add_argument(
        "--pdf-decoder",
        action="store_true",
        help="Extract real text from PDFs with PyMuPDF instead of placeholder text",
    )
    process.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers.add_parser("capabilities", help="Print supported formats and features as JSON")
    return parser


def _print_summary(result: PipelineResult) -> None:
    print(f"\n{result.document.name}: {result.word_count} words, "
          f"{result.difficulty.value}, {result.reading_level.value}")
    print(f"Confidence: {result.overall_confidence:.0%}  Time: {result.elapsed_time_label}")
    if result.key_terms:
        print(f"Key terms: {', '.join(result.key_terms[:5])}")
    if result.summary:
        print(f"Summary: {result.summary}")
    print(f"\n{len(result.levels)} levels, {result.total_question_count} questions:")
    for level in result.levels:
        lock = " (locked)" if level.is_locked else ""
        print(f"  {level.order}. {level.name} [{level.tier.value}]{lock} "
              f"{level.question_count} questions, {level.point_value} pts, "
              f"{level.estimated_time_label}")


def _run_process(args: argparse.Namespace) -> int:
    config = EngineConfig(seed=args.seed, enable_pdf_decoder=args.pdf_decoder)
    engine = Engine.create(config)

    def show_progress(label: str, percent: int) -> None:
        print(f"[{percent:3d}%] {label}", file=sys.stderr)

    try:
        result = engine.process_file(
            args.file, on_progress=None if args.json else show_progress
        )
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1
    except MindloopError as e:
        logger.error(f"Error: {e}")
        return 1

    if args.store is not None:
        SnapshotStore(args.store).record_result(result)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        _print_summary(result)
    return 0


def _run_capabilities() -> int:
    print(json.dumps(Engine().capabilities().to_dict(), indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "verbose", False) else logging.INFO,
        format='%(message)s',
    )

    if args.command == "process":
        return _run_process(args)
    return _run_capabilities()


if __name__ == "__main__":
    sys.exit(main())
