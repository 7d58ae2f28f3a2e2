"""
Command-line entry point for the tweet sentiment analyzer.

Handles:
- Command-line argument parsing
- Logging setup
- Running the analysis and mapping failures to exit codes
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config.settings import DEFAULT_LOG_LEVEL, DEFAULT_MAX_WORKERS
from .core.analysis_manager import SentimentAnalysisManager
from .core.errors import FileReadError, OutputWriteError, PathNotFoundError
from .core.result_writer import ResultWriter, resolve_output_file
from .utils.logger import configure_logging

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_OUTPUT_FAILED = 2
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tweet-sentiment",
        description="Score tweets against a sentiment lexicon and write the results to a file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  tweet-sentiment -l lexicons/vader.txt -i tweets.txt -o results/
  tweet-sentiment -l ./lexicons -i ./tweets -o ./out/results.txt -w 4
  tweet-sentiment -l ./lexicons -i ./tweets -o ./out --summary-csv ./out/summary.csv --quiet
        '''
    )

    parser.add_argument(
        '-l', '--lexicon',
        type=Path,
        required=True,
        help='Lexicon file or directory of "word,score" files'
    )

    parser.add_argument(
        '-i', '--input',
        type=Path,
        required=True,
        help='Tweet file or directory of tweet files (one tweet per line)'
    )

    parser.add_argument(
        '-o', '--output',
        type=Path,
        required=True,
        help='Output file, or an existing directory to write outputFile.txt into'
    )

    parser.add_argument(
        '-w', '--workers',
        type=int,
        default=None,
        help=f'Number of worker threads for directories (default: {DEFAULT_MAX_WORKERS})'
    )

    parser.add_argument(
        '--summary-csv',
        type=Path,
        default=None,
        help='Also write a CSV summary of every scored tweet to this path'
    )

    parser.add_argument(
        '-q', '--quiet',
        action='store_true',
        help='Do not print result blocks to stdout'
    )

    parser.add_argument(
        '--log-level',
        default=DEFAULT_LOG_LEVEL,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help=f'Logging level (default: {DEFAULT_LOG_LEVEL})'
    )

    parser.add_argument(
        '--log-file',
        type=Path,
        default=None,
        help='Also append log messages to this file'
    )

    parser.add_argument(
        '--show-settings',
        action='store_true',
        help='Print the resolved lexicon, input and output settings and exit'
    )

    return parser


def show_settings(args: argparse.Namespace):
    print(f" Lexicon path: {args.lexicon}")
    print(f" Input path: {args.input}")
    print(f" Output file: {resolve_output_file(args.output)}")
    print(f" Workers: {args.workers or DEFAULT_MAX_WORKERS}")
    print(f" Summary CSV: {args.summary_csv or 'Not set'}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.workers is not None and args.workers < 1:
        parser.error("--workers must be at least 1")

    if args.show_settings:
        show_settings(args)
        return EXIT_OK

    logger = configure_logging(args.log_level, args.log_file)

    manager = SentimentAnalysisManager(
        result_writer=ResultWriter(echo=not args.quiet),
        max_workers=args.workers,
        summary_csv=args.summary_csv,
    )

    try:
        summary = manager.perform_analysis(args.lexicon, args.input, args.output)
    except (PathNotFoundError, FileReadError) as e:
        logger.error(str(e))
        return EXIT_INPUT_ERROR
    except OutputWriteError as e:
        logger.error(f"No results written: {e}")
        return EXIT_OUTPUT_FAILED
    except KeyboardInterrupt:
        logger.error("Analysis interrupted; no results written")
        return EXIT_INTERRUPTED

    logger.info(f"Output: {summary.output_file}")
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
