# src/digest_kit/cli.py

"""Command-line interface for digest-kit.

    digest-kit sections course.pdf
    digest-kit summarize course.pdf --section 3 --config config.yaml
"""

import argparse
import asyncio
import logging
import sys

from digest_kit.config import DigestConfig, load_config
from digest_kit.errors import DigestError
from digest_kit.observability import LoggingMetricsHook
from digest_kit.service import StudyNotesService, create_service
from digest_kit.summarization import (
    CompleteEvent,
    ErrorEvent,
    ProgressUpdate,
    StartEvent,
)

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="digest-kit",
        description="Split a long PDF into sections and turn them into study notes",
    )
    parser.add_argument("--config", help="Path to config.yaml (defaults built in)")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_sections = sub.add_parser("sections", help="List the detected sections of a PDF")
    p_sections.add_argument("pdf", help="Path to the PDF")

    p_summarize = sub.add_parser("summarize", help="Summarize one section of a PDF")
    p_summarize.add_argument("pdf", help="Path to the PDF")
    p_summarize.add_argument(
        "--section", type=int, required=True, help="Section index (see `sections`)"
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config) if args.config else DigestConfig()
    service = create_service(config, metrics_hook=LoggingMetricsHook())

    try:
        if args.cmd == "sections":
            return _cmd_sections(service, args.pdf)
        return asyncio.run(_cmd_summarize(service, args.pdf, args.section))
    except DigestError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


def _cmd_sections(service: StudyNotesService, pdf: str) -> int:
    result = service.extract(pdf)
    print(f"{result.page_count} pages, {len(result.sections)} sections")
    for i, section in enumerate(result.sections):
        print(f"[{i:>2}] {section.name:<40} {section.char_count:>8} chars {section.word_count:>7} words")
    return 0


async def _cmd_summarize(service: StudyNotesService, pdf: str, index: int) -> int:
    result = service.extract(pdf)
    async for event in service.stream_summary(result.upload_id, index):
        if isinstance(event, StartEvent):
            print(f'Summarizing "{event.section_name}" in {event.total_chunks} chunk(s)')
        elif isinstance(event, ProgressUpdate):
            print(f"  chunk {event.chunk}/{event.total_chunks}: {event.status.value}")
        elif isinstance(event, CompleteEvent):
            print()
            for bullet in event.bullets:
                print(bullet)
            return 0
        elif isinstance(event, ErrorEvent):
            print(f"error: {event.message}", file=sys.stderr)
            return 1
    return 1


if __name__ == "__main__":
    sys.exit(main())
