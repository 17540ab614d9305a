import argparse
import asyncio
import json
import sys
from pathlib import Path

from docinsight.config.settings import Settings
from docinsight.extraction.progress import LoggingProgressSink
from docinsight.files.file_loader import FileLoader
from docinsight.logging.logger import Log
from docinsight.processor.processor import build_processor


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="docinsight",
        description="Extract text from .txt/.pdf files and generate an AI report.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="Text or PDF files to analyze")
    parser.add_argument("--language", help="Tesseract language for scanned PDFs (default: eng)")
    parser.add_argument("--provider", help="Report provider, e.g. openai, gemini, example")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> load files -> run one analysis session."""
    args = parse_args(argv)
    settings = Settings()
    if args.language:
        settings.ocr_language = args.language
    if args.provider:
        settings.report_provider = args.provider
    Log.configure(settings.log_level)

    try:
        loader = FileLoader()
        files = [loader.load(path) for path in args.files]
        processor = build_processor(settings)
        outcome = asyncio.run(processor.process(files, LoggingProgressSink()))
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for warning in outcome.warnings:
        print(f"Warning: {warning}", file=sys.stderr)
    print(json.dumps(outcome.report.to_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
