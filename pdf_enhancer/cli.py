#!/usr/bin/env python3
"""CLI for the content enhancer.

Usage:
    # Summarize an article into ./out/<title>-enhanced.pdf
    python -m pdf_enhancer.cli run --url https://example.com/post --output-dir out

    # Validate raw text with Claude and include the original
    python -m pdf_enhancer.cli run --text-file notes.txt --model claude --action validate --include-original

    # Serve the HTTP API
    python -m pdf_enhancer.cli serve --port 8100
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pdf_enhancer.config.settings import api_settings
from pdf_enhancer.domain.errors import PipelineError
from pdf_enhancer.domain.schemas import Action, ModelId, ProcessingOptions, RenderOptions
from pdf_enhancer.services.pipeline_service import ContentPipeline

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def cmd_run(args: argparse.Namespace) -> int:
    """Extract, enhance and render to a PDF file."""
    text = args.text
    if args.text_file:
        text = Path(args.text_file).read_text(encoding="utf-8")

    options = ProcessingOptions(
        model=ModelId(args.model),
        action=Action(args.action),
        include_original=args.include_original,
        generate_citations=args.citations,
    )
    render_options = RenderOptions(
        include_table_of_contents=not args.no_toc,
        include_citations=args.citations,
        include_original=args.include_original,
    )

    try:
        result = ContentPipeline().run(
            url=args.url,
            text=text,
            options=options,
            render_options=render_options,
            output_dir=args.output_dir,
        )
    except PipelineError as e:
        logger.error("Failed at %s stage: %s", e.stage, e.message)
        return 1

    print(f"PDF written: {result.path}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the FastAPI app under uvicorn."""
    import uvicorn

    uvicorn.run(
        "pdf_enhancer.api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=api_settings.log_level,
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Extract, enhance with an LLM, and render content as PDF",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment variables:
  GEMINI_API_KEY     Google Gemini key (GOOGLE_API_KEY also accepted)
  OPENAI_API_KEY     OpenAI key
  ANTHROPIC_API_KEY  Anthropic key
""",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # run
    p_run = subparsers.add_parser("run", help="Produce an enhanced PDF")
    source = p_run.add_mutually_exclusive_group(required=True)
    source.add_argument("--url", "-u", help="Article URL to extract")
    source.add_argument("--text", "-t", help="Raw text to enhance")
    source.add_argument("--text-file", help="Read raw text from a file")
    p_run.add_argument(
        "--model", "-m",
        choices=[m.value for m in ModelId],
        default=ModelId.GEMINI_2_0_FLASH_EXP.value,
        help="Model id (default: gemini-2.0-flash-exp)",
    )
    p_run.add_argument(
        "--action", "-a",
        choices=[a.value for a in Action],
        default=Action.SUMMARIZE.value,
        help="Enhancement action (default: summarize)",
    )
    p_run.add_argument("--include-original", action="store_true", help="Append the original text")
    p_run.add_argument("--citations", action="store_true", help="Generate citations (validate only)")
    p_run.add_argument("--no-toc", action="store_true", help="Omit the table of contents")
    p_run.add_argument("--output-dir", "-o", default=".", help="Output directory (default: .)")
    p_run.set_defaults(func=cmd_run)

    # serve
    p_serve = subparsers.add_parser("serve", help="Run the HTTP API")
    p_serve.add_argument("--host", default=api_settings.host, help="Bind host")
    p_serve.add_argument("--port", type=int, default=api_settings.port, help="Bind port")
    p_serve.add_argument("--reload", action="store_true", default=api_settings.reload, help="Auto-reload")
    p_serve.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
