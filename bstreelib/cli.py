#!/usr/bin/env python
"""
Command-line front end for the word tracker.

Indexes one or more text files into the persistent word repository and
prints (or writes) an alphabetical report.

Usage:
    wordtracker story.txt -pf               # Words with the files they occur in
    wordtracker story.txt -pl               # ...with line numbers
    wordtracker story.txt -po               # ...with occurrence counts
    wordtracker story.txt -po -freport      # Write the report to report.txt
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import ReportFormat, TrackerConfig
from .error_policies import ContinueOnErrorsPolicy, FailFastPolicy
from .errors import BSTreeError
from .wordtracker import WordTracker


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the wordtracker command."""
    parser = argparse.ArgumentParser(
        prog="wordtracker",
        description="Track the words of text files and report where they occur.",
    )
    parser.add_argument("inputs", nargs="+", metavar="input.txt",
                        help="Text file(s) to index")

    report = parser.add_mutually_exclusive_group(required=True)
    report.add_argument("-pf", dest="report", action="store_const", const=ReportFormat.FILES,
                        help="Print words with files")
    report.add_argument("-pl", dest="report", action="store_const", const=ReportFormat.LINES,
                        help="Print words with files and line numbers")
    report.add_argument("-po", dest="report", action="store_const", const=ReportFormat.OCCURRENCES,
                        help="Print words with files, line numbers, and occurrences")

    parser.add_argument("-f", dest="output", metavar="<output.txt>",
                        help="Redirect the report to a file (.txt is appended "
                             "when the name has no suffix)")
    parser.add_argument("--repository", default="repository.json",
                        help="Repository file (default: %(default)s)")
    parser.add_argument("--no-persist", action="store_true",
                        help="Neither load nor save the repository")
    parser.add_argument("--strict", action="store_true",
                        help="Stop at the first unreadable file or corrupt repository")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log repository and indexing activity")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def output_path(name: str) -> Path:
    """Resolve the -f argument to a report path."""
    path = Path(name)
    if not path.suffix:
        path = path.with_suffix(".txt")
    return path


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if args.no_persist:
        config = TrackerConfig.in_memory()
    else:
        config = TrackerConfig.with_repository(args.repository)
    policy = FailFastPolicy() if args.strict else ContinueOnErrorsPolicy(verbose=True)

    try:
        tracker = WordTracker(config, policy)
        processed = tracker.process_files(args.inputs)
    except (OSError, UnicodeDecodeError, BSTreeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not processed:
        print("Error: no input file could be read", file=sys.stderr)
        return 1

    report = tracker.make_report(args.report)

    if args.output:
        destination = output_path(args.output)
        print(f"Output will be redirected to: {destination}")
        try:
            tracker.write_report(report, destination)
        except OSError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
    else:
        print(report)

    return 0


if __name__ == "__main__":
    sys.exit(main())
