#!/usr/bin/env python3
"""
Tutorial Flow - Main Entry Point
Cross-platform compatible (Windows, macOS, Linux)

Usage:
    python run.py --dir /path/to/code
    python run.py --dir . --output ./tutorials
"""

import argparse
import logging
import sys
import time
from pathlib import Path

from dotenv import load_dotenv

from flow import create_tutorial_flow
from pipeline.errors import PipelineError
from pipeline.state import SharedState
from utils.call_llm import get_llm_provider
from constants.defaults import (
    DEFAULT_INCLUDE_PATTERNS,
    DEFAULT_EXCLUDE_PATTERNS,
    DEFAULT_MAX_FILE_SIZE,
    DEFAULT_LANGUAGE,
    DEFAULT_MAX_ABSTRACTIONS,
)
from constants.paths import DEFAULT_OUTPUT_DIR

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Generate a beginner-friendly tutorial from a local codebase.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run.py --dir /path/to/project
  python run.py --dir . --output ./tutorials
  python run.py --dir ./src --include "*.py" --exclude "*test*"
  python run.py --dir . --language spanish
        """
    )
    parser.add_argument("--dir", required=True, help="Path to local directory to analyze.")
    parser.add_argument("-n", "--name", help="Project name (optional, derived from directory if omitted).")
    parser.add_argument(
        "-o", "--output",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory for the tutorial (default: ./{DEFAULT_OUTPUT_DIR})."
    )
    parser.add_argument("-i", "--include", nargs="+", help="Include file patterns (e.g., '*.py' '*.js').")
    parser.add_argument("-e", "--exclude", nargs="+", help="Exclude file patterns (e.g., 'tests/*' 'docs/*').")
    parser.add_argument(
        "-s", "--max-size",
        type=int,
        default=DEFAULT_MAX_FILE_SIZE,
        help=f"Maximum file size in bytes (default: {DEFAULT_MAX_FILE_SIZE}, about 100KB)."
    )
    parser.add_argument(
        "--language",
        default=DEFAULT_LANGUAGE,
        help=f"Language for the generated tutorial (default: {DEFAULT_LANGUAGE})."
    )
    parser.add_argument("--no-cache", action="store_true", help="Disable LLM response caching.")
    parser.add_argument(
        "--max-abstractions",
        type=int,
        default=DEFAULT_MAX_ABSTRACTIONS,
        help=f"Maximum number of abstractions to identify (default: {DEFAULT_MAX_ABSTRACTIONS})."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show step and crawler details.")
    return parser


def build_shared_state(args) -> SharedState:
    """Translate parsed arguments into the run's initial SharedState."""
    return SharedState(
        local_dir=str(Path(args.dir).resolve()),
        project_name=args.name,
        output_dir=args.output,
        include_patterns=set(args.include) if args.include else set(DEFAULT_INCLUDE_PATTERNS),
        exclude_patterns=set(args.exclude) if args.exclude else set(DEFAULT_EXCLUDE_PATTERNS),
        max_file_size=args.max_size,
        language=args.language,
        use_cache=not args.no_cache,
        max_abstraction_num=args.max_abstractions,
    )


def main(argv=None):
    load_dotenv()
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if not Path(args.dir).is_dir():
        print(f"Error: Directory does not exist: {args.dir}")
        return 1

    try:
        provider = get_llm_provider()
    except ValueError as e:
        print(f"LLM Provider: Not configured - {e}")
        return 1

    shared = build_shared_state(args)

    print("=" * 60)
    print("Tutorial Flow")
    print("=" * 60)
    print(f"Directory: {shared.local_dir}")
    print(f"Language: {args.language.capitalize()}")
    print(f"LLM Caching: {'Disabled' if args.no_cache else 'Enabled'}")
    print(f"LLM Provider: {provider}")
    print(f"Output: {args.output}")
    print("=" * 60)

    start_time = time.time()
    try:
        create_tutorial_flow().run(shared)
    except PipelineError as e:
        logger.debug("Pipeline aborted", exc_info=True)
        print(f"\n❌ Tutorial generation stopped in step {e.step or 'unknown'}: "
              f"{type(e).__name__}: {e.message}")
        return 1

    elapsed = time.time() - start_time
    time_str = f"{elapsed/60:.1f} minutes" if elapsed >= 60 else f"{elapsed:.1f} seconds"

    print(f"\n{'=' * 60}")
    print("✅ Tutorial generated successfully!")
    print(f"   Output: {shared.final_output_dir}")
    print(f"   Time: {time_str}")
    print(f"{'=' * 60}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
